# ============================================================================
# SERVICES MODULE
# ============================================================================
# STATUS: Core - Business logic layer
# PURPOSE: Model loading and schema mapping services
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Services Module

Loading and assembly on top of the core schema modules.

Usage:
    from services import SchemaMappingService, load_entities

    entities = load_entities("petstore.yaml")
    result = SchemaMappingService().map_entities(entities)
"""

from .model_loader import ModelLoadError, load_entities, parse_document
from .schema_service import (
    MappingFailure,
    SchemaMappingError,
    SchemaMappingResult,
    SchemaMappingService,
)

__all__ = [
    "SchemaMappingService",
    "SchemaMappingResult",
    "SchemaMappingError",
    "MappingFailure",
    "ModelLoadError",
    "load_entities",
    "parse_document",
]

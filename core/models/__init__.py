# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Input side:
    - Entity, Property (from the upstream model builder)

Output side:
    - TableDefinition, ColumnDefinition (attached by the mapping pass)
    - ColumnDefault, CategoryFlags (parts of a ColumnDefinition)
"""

from core.models.definitions import (
    CategoryFlags,
    ColumnDefault,
    ColumnDefinition,
    TableDefinition,
)
from core.models.entity import Entity, Property

__all__ = [
    # Input
    "Entity",
    "Property",
    # Output
    "TableDefinition",
    "ColumnDefinition",
    "ColumnDefault",
    "CategoryFlags",
]

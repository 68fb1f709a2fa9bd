# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export core contracts and models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import StorageCategory, PhysicalType, IdentifierKind, NamingConvention
from core.models import (
    Entity,
    Property,
    TableDefinition,
    ColumnDefinition,
    ColumnDefault,
    CategoryFlags,
)

__all__ = [
    # Enums
    "StorageCategory",
    "PhysicalType",
    "IdentifierKind",
    "NamingConvention",
    # Models
    "Entity",
    "Property",
    "TableDefinition",
    "ColumnDefinition",
    "ColumnDefault",
    "CategoryFlags",
]

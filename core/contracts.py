# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Core enums shared by every schema component
# PURPOSE: Storage categories, physical SQL types, identifier kinds
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: StorageCategory, PhysicalType, IdentifierKind, NamingConvention
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the schema mapping pass.

These enums cross every boundary of the pass:
- Input (semantic type tags from the upstream model builder)
- Mapping (classifier, normalizers, default resolver)
- Output (column definitions consumed by the DDL renderer)
"""

from enum import Enum


# ============================================================================
# STORAGE ENUMS
# ============================================================================

class StorageCategory(str, Enum):
    """
    Closed classification of a property's storage kind.

    Exactly one category per property, derived from its semantic type.
    UNKNOWN stores like BLOB but is reported separately.
    """
    BOOLEAN = "boolean"
    INTEGER = "integer"
    REAL = "real"
    DECIMAL = "decimal"
    TEXT = "text"
    DATE = "date"
    BLOB = "blob"
    JSON = "json"
    UNKNOWN = "unknown"

    def is_numeric(self) -> bool:
        """Categories resolved by the numeric range normalizer."""
        return self in (StorageCategory.INTEGER, StorageCategory.REAL, StorageCategory.DECIMAL)

    def is_length_bounded(self) -> bool:
        """Categories resolved by the string length normalizer."""
        return self in (StorageCategory.TEXT, StorageCategory.BLOB)

    def accepts_default(self) -> bool:
        """BLOB and JSON columns cannot carry a DEFAULT clause."""
        return self not in (StorageCategory.BLOB, StorageCategory.JSON)


class PhysicalType(str, Enum):
    """SQLite storage classes a column can be declared with."""
    INTEGER = "INTEGER"
    REAL = "REAL"
    TEXT = "TEXT"
    BLOB = "BLOB"


# ============================================================================
# IDENTIFIER ENUMS
# ============================================================================

class IdentifierKind(str, Enum):
    """What an identifier names. Only TABLE and COLUMN follow the naming convention."""
    DATABASE = "database"
    TABLE = "table"
    COLUMN = "column"

    def follows_naming_convention(self) -> bool:
        return self is not IdentifierKind.DATABASE


class NamingConvention(str, Enum):
    """Identifier naming conventions for table and column names."""
    ORIGINAL = "original"        # Do not transform original names
    SNAKE_CASE = "snake_case"    # Use snake_case names


__all__ = [
    "StorageCategory",
    "PhysicalType",
    "IdentifierKind",
    "NamingConvention",
]

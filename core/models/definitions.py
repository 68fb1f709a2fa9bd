# ============================================================================
# SCHEMA DEFINITION MODELS
# ============================================================================
# STATUS: Core model - Derived table and column descriptions
# PURPOSE: Typed output of the mapping pass, consumed by the DDL renderer
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: CategoryFlags, ColumnDefault, ColumnDefinition, TableDefinition
# DEPENDENCIES: pydantic
# ============================================================================
"""
Schema Definition Models

Output records attached by the mapping pass:
- TableDefinition: attached to an Entity
- ColumnDefinition: attached to a Property

Both are created once per run and never mutated afterwards (frozen).
The renderer reads them; nothing in this package writes them to disk.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from core.contracts import PhysicalType, StorageCategory


class CategoryFlags(BaseModel):
    """
    Boolean mirror of a StorageCategory for template convenience.

    Templates branch on flags ({% if flags.is_numeric %}) rather than
    comparing category strings.
    """
    is_primitive: bool = False
    is_numeric: bool = False
    is_boolean: bool = False
    is_integer: bool = False
    is_float: bool = False
    is_decimal: bool = False
    is_string: bool = False
    is_date: bool = False
    is_blob: bool = False
    is_json: bool = False
    is_null: bool = False

    model_config = {"frozen": True}


class ColumnDefault(BaseModel):
    """
    A resolved column default.

    category is the category the literal was resolved under; a missing or
    NULL raw default resolves under UNKNOWN with value "NULL".
    """
    value: str = Field(..., description="Literal default, passed through unchanged")
    category: StorageCategory
    flags: CategoryFlags

    model_config = {"frozen": True}

    @property
    def is_null(self) -> bool:
        return self.flags.is_null


class ColumnDefinition(BaseModel):
    """
    Derived column description for one Property.

    Bounds:
        Integer/Real/Decimal: always set (after swap-correction)
        Text/Blob: set only when they differ from 0 / max length
        other categories: None
    """
    name: str = Field(..., max_length=255, description="Legalized column name")
    source_type: str = Field(..., description="Semantic type as received, for diagnostics")
    data_format: Optional[str] = Field(default=None)
    category: StorageCategory
    sql_type: PhysicalType
    not_null: bool = False
    default: Optional[ColumnDefault] = None
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    unsigned: Optional[bool] = Field(default=None, description="Integer category only")
    comment: Optional[str] = None
    flags: CategoryFlags

    model_config = {"frozen": True}

    @property
    def has_bounds(self) -> bool:
        return self.minimum is not None or self.maximum is not None


class TableDefinition(BaseModel):
    """Derived table description for one Entity."""
    name: str = Field(..., max_length=255, description="Legalized table name")
    comment: Optional[str] = None

    model_config = {"frozen": True}


__all__ = [
    "CategoryFlags",
    "ColumnDefault",
    "ColumnDefinition",
    "TableDefinition",
]

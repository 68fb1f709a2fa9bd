# ============================================================================
# ENTITY & PROPERTY MODELS
# ============================================================================
# STATUS: Core model - Input data models from the upstream model builder
# PURPOSE: Named entities with typed, constrained properties
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Entity, Property
# DEPENDENCIES: pydantic
# ============================================================================
"""
Entity and Property Models

An Entity is one API data model; each Property is one of its fields.
Both arrive fully resolved (no references, inheritance flattened).

A user-authored schema_override on either record is authoritative:
the mapping pass never attaches a derived definition next to it.

Output slots:
    Entity.table_definition     <- TableDefinition
    Property.column_definition  <- ColumnDefinition
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from core.models.definitions import ColumnDefinition, TableDefinition


def _to_raw_string(value: Any) -> Optional[str]:
    """Raw constraint values travel as strings, the way the model builder hands them over."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Property(BaseModel):
    """
    One field of an Entity, represented as a column.
    """

    name: str = Field(..., description="Property name as authored in the API document")
    data_type: str = Field(..., description="Semantic type tag, e.g. 'integer', 'string'")
    data_format: Optional[str] = Field(default=None, description="Format modifier, e.g. 'int64'")
    required: bool = Field(default=False)

    # Numeric bounds (numeric-parseable strings)
    minimum: Optional[str] = Field(default=None)
    maximum: Optional[str] = Field(default=None)
    exclusive_minimum: bool = Field(default=False)
    exclusive_maximum: bool = Field(default=False)

    # String length bounds
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)

    default: Optional[str] = Field(default=None, description="Raw default, meaning depends on type")
    description: Optional[str] = Field(default=None)

    schema_override: Optional[Dict[str, Any]] = Field(
        default=None,
        description="User-authored schema, suppresses auto-generation",
    )
    column_definition: Optional[ColumnDefinition] = Field(default=None)

    model_config = {"frozen": False}

    @field_validator("minimum", "maximum", "default", mode="before")
    @classmethod
    def coerce_raw_string(cls, v: Any) -> Optional[str]:
        return _to_raw_string(v)

    @property
    def has_override(self) -> bool:
        return self.schema_override is not None


class Entity(BaseModel):
    """
    One API-level data model, represented as a table.
    """

    name: str = Field(..., description="Model name as authored in the API document")
    description: Optional[str] = Field(default=None)
    properties: List[Property] = Field(default_factory=list)

    schema_override: Optional[Dict[str, Any]] = Field(
        default=None,
        description="User-authored schema, suppresses auto-generation",
    )
    table_definition: Optional[TableDefinition] = Field(default=None)

    model_config = {"frozen": False}

    @property
    def has_override(self) -> bool:
        return self.schema_override is not None

    def get_property(self, name: str) -> Optional[Property]:
        """Look up a property by its source name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


__all__ = ["Entity", "Property"]

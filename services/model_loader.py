# ============================================================================
# MODEL LOADER
# ============================================================================
# STATUS: Service - Entity document loading
# PURPOSE: Read entity definitions from YAML/JSON documents
# CREATED: 19 OCT 2026
# ============================================================================
"""
Model Loader

Loads entities from a YAML or JSON document. Two shapes are accepted:

Entity document:
    entities:
      - name: Pet
        description: A pet for sale
        properties:
          - {name: id, data_type: long, required: true}
          - {name: tags, data_type: array}

OpenAPI document (components.schemas, references already resolved):
    components:
      schemas:
        Pet:
          type: object
          required: [id]
          properties:
            id: {type: integer, format: int64}
            tags: {type: array, items: {type: string}}

The vendor extension x-schema-override on a schema or a property marks
it as user-authored; the mapping pass will leave it alone.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from core.logging import ComponentType, get_logger
from core.models import Entity, Property

logger = get_logger(__name__, ComponentType.LOADER)


VENDOR_EXTENSION_OVERRIDE = "x-schema-override"

# (type, format) pairs the model builder folds into a semantic type
_FORMAT_TYPES: Dict[tuple, str] = {
    ("integer", "int64"): "long",
    ("number", "float"): "float",
    ("number", "double"): "double",
    ("string", "date"): "date",
    ("string", "date-time"): "date",
    ("string", "binary"): "blob",
    ("string", "byte"): "blob",
}


class ModelLoadError(Exception):
    """Raised when a model document cannot be read or understood."""
    pass


# ============================================================================
# OPENAPI CONVERSION
# ============================================================================

def semantic_type(schema: Dict[str, Any]) -> str:
    """
    Semantic type tag for an OpenAPI property schema.

    Unresolved $ref properties keep the referenced model name, which the
    classifier does not recognize.
    """
    if "$ref" in schema and "type" not in schema:
        return str(schema["$ref"]).rsplit("/", 1)[-1]

    schema_type = schema.get("type", "object")
    if isinstance(schema_type, list):
        # OpenAPI 3.1 nullable form: ["string", "null"]
        schema_type = next((t for t in schema_type if t != "null"), "object")

    return _FORMAT_TYPES.get((schema_type, schema.get("format")), schema_type)


def _bound(schema: Dict[str, Any], key: str, exclusive_key: str) -> tuple:
    """(bound, exclusive) from either the 3.0 boolean or the 3.1 numeric form."""
    value = schema.get(key)
    exclusive = schema.get(exclusive_key, False)
    if not isinstance(exclusive, bool):
        # 3.1: exclusiveMinimum carries the bound itself
        return exclusive, True
    return value, exclusive


def property_from_openapi(name: str, schema: Dict[str, Any], required: bool) -> Property:
    """Build a Property from one OpenAPI property schema."""
    minimum, exclusive_minimum = _bound(schema, "minimum", "exclusiveMinimum")
    maximum, exclusive_maximum = _bound(schema, "maximum", "exclusiveMaximum")

    return Property(
        name=name,
        data_type=semantic_type(schema),
        data_format=schema.get("format"),
        required=required,
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
        exclusive_maximum=exclusive_maximum,
        min_length=schema.get("minLength"),
        max_length=schema.get("maxLength"),
        default=schema.get("default"),
        description=schema.get("description"),
        schema_override=schema.get(VENDOR_EXTENSION_OVERRIDE),
    )


def entity_from_openapi(name: str, schema: Dict[str, Any]) -> Entity:
    """Build an Entity from one OpenAPI component schema."""
    required = set(schema.get("required") or [])
    properties = [
        property_from_openapi(prop_name, prop_schema or {}, prop_name in required)
        for prop_name, prop_schema in (schema.get("properties") or {}).items()
    ]
    return Entity(
        name=name,
        description=schema.get("description"),
        properties=properties,
        schema_override=schema.get(VENDOR_EXTENSION_OVERRIDE),
    )


# ============================================================================
# LOADING
# ============================================================================

def parse_document(data: Any, source: str = "<document>") -> List[Entity]:
    """
    Turn a parsed document into entities.

    Args:
        data: Parsed YAML/JSON content
        source: Where the document came from, for error messages

    Returns:
        List of Entity in document order

    Raises:
        ModelLoadError: If the document has neither shape or fails validation
    """
    if not isinstance(data, dict):
        raise ModelLoadError(f"{source}: expected a mapping at the top level")

    try:
        if "entities" in data:
            return [Entity(**item) for item in data["entities"] or []]

        schemas = (data.get("components") or {}).get("schemas")
        if schemas is not None:
            return [entity_from_openapi(name, schema or {}) for name, schema in schemas.items()]
    except (ValidationError, TypeError) as e:
        raise ModelLoadError(f"{source}: invalid model definition: {e}") from e

    raise ModelLoadError(f"{source}: no 'entities' list or 'components.schemas' mapping found")


def load_entities(path: Union[str, Path]) -> List[Entity]:
    """
    Load entities from a .yaml, .yml or .json file.

    Args:
        path: Document path

    Returns:
        List of Entity

    Raises:
        ModelLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ModelLoadError(f"Failed to read {path}: {e}") from e

    entities = parse_document(data, str(path))
    logger.info(f"Loaded {len(entities)} models from {path}")
    return entities


__all__ = [
    "VENDOR_EXTENSION_OVERRIDE",
    "ModelLoadError",
    "semantic_type",
    "property_from_openapi",
    "entity_from_openapi",
    "parse_document",
    "load_entities",
]

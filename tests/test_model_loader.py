# ============================================================================
# MODEL LOADER TESTS
# ============================================================================
# STATUS: Tests - Entity and OpenAPI document loading
# PURPOSE: Verify both document shapes and load errors
# CREATED: 19 OCT 2026
# ============================================================================
"""
Model Loader Tests

Run with:
    pytest tests/test_model_loader.py -v
"""

import json

import pytest

from services.model_loader import (
    ModelLoadError,
    entity_from_openapi,
    load_entities,
    parse_document,
    property_from_openapi,
    semantic_type,
)


ENTITY_YAML = """
entities:
  - name: Pet
    description: A pet for sale
    properties:
      - name: id
        data_type: long
        required: true
        minimum: 1
      - name: tags
        data_type: array
  - name: Legacy
    schema_override:
      table: legacy
"""

OPENAPI_DOC = {
    "openapi": "3.0.3",
    "components": {
        "schemas": {
            "Pet": {
                "type": "object",
                "description": "A pet for sale",
                "required": ["id", "name"],
                "properties": {
                    "id": {"type": "integer", "format": "int64", "minimum": 0,
                           "exclusiveMinimum": True},
                    "name": {"type": "string", "maxLength": 64},
                    "price": {"type": "number", "format": "double", "default": 9.5},
                    "born": {"type": "string", "format": "date-time"},
                    "photo": {"type": "string", "format": "binary"},
                    "owner": {"$ref": "#/components/schemas/Owner"},
                    "custom": {"type": "string", "x-schema-override": {"column": "c"}},
                },
            },
            "Owner": {
                "type": "object",
                "x-schema-override": {"table": "owners"},
            },
        },
    },
}


# ============================================================================
# OPENAPI CONVERSION
# ============================================================================

class TestSemanticType:

    @pytest.mark.parametrize("schema, expected", [
        ({"type": "integer"}, "integer"),
        ({"type": "integer", "format": "int64"}, "long"),
        ({"type": "integer", "format": "int32"}, "integer"),
        ({"type": "number", "format": "float"}, "float"),
        ({"type": "number"}, "number"),
        ({"type": "string", "format": "date"}, "date"),
        ({"type": "string", "format": "byte"}, "blob"),
        ({"type": "string", "format": "uuid"}, "string"),
        ({"type": "array", "items": {"type": "string"}}, "array"),
        ({"type": ["string", "null"]}, "string"),
        ({"$ref": "#/components/schemas/Owner"}, "Owner"),
        ({}, "object"),
    ])
    def test_mapping(self, schema, expected):
        assert semantic_type(schema) == expected


class TestPropertyFromOpenAPI:

    def test_keywords(self):
        prop = property_from_openapi("name", {
            "type": "string",
            "minLength": 2,
            "maxLength": 10,
            "default": "rex",
            "description": "Pet name",
        }, required=True)
        assert prop.data_type == "string"
        assert prop.required is True
        assert (prop.min_length, prop.max_length) == (2, 10)
        assert prop.default == "rex"
        assert prop.description == "Pet name"
        assert not prop.has_override

    def test_boolean_exclusive_bounds(self):
        prop = property_from_openapi("n", {
            "type": "integer", "minimum": 1, "exclusiveMinimum": True,
            "maximum": 9, "exclusiveMaximum": False,
        }, required=False)
        assert (prop.minimum, prop.exclusive_minimum) == ("1", True)
        assert (prop.maximum, prop.exclusive_maximum) == ("9", False)

    def test_numeric_exclusive_bounds(self):
        prop = property_from_openapi("n", {
            "type": "integer", "exclusiveMinimum": 0, "exclusiveMaximum": 100,
        }, required=False)
        assert (prop.minimum, prop.exclusive_minimum) == ("0", True)
        assert (prop.maximum, prop.exclusive_maximum) == ("100", True)

    def test_override(self):
        prop = property_from_openapi("c", {"type": "string", "x-schema-override": {}}, False)
        assert prop.has_override


class TestEntityFromOpenAPI:

    def test_required_and_order(self):
        entity = entity_from_openapi("Pet", OPENAPI_DOC["components"]["schemas"]["Pet"])
        assert [p.name for p in entity.properties] == [
            "id", "name", "price", "born", "photo", "owner", "custom",
        ]
        assert entity.get_property("id").required
        assert entity.get_property("name").required
        assert not entity.get_property("price").required
        assert entity.get_property("price").default == "9.5"
        assert entity.get_property("owner").data_type == "Owner"
        assert entity.get_property("custom").has_override

    def test_entity_override(self):
        entity = entity_from_openapi("Owner", OPENAPI_DOC["components"]["schemas"]["Owner"])
        assert entity.has_override
        assert entity.properties == []


# ============================================================================
# DOCUMENTS
# ============================================================================

class TestParseDocument:

    def test_entities_shape(self):
        entities = parse_document({"entities": [{"name": "A", "properties": []}]})
        assert [e.name for e in entities] == ["A"]

    def test_empty_entities(self):
        assert parse_document({"entities": None}) == []

    def test_openapi_shape(self):
        entities = parse_document(OPENAPI_DOC)
        assert [e.name for e in entities] == ["Pet", "Owner"]

    def test_unknown_shape(self):
        with pytest.raises(ModelLoadError, match="components.schemas"):
            parse_document({"openapi": "3.0.0", "paths": {}})

    def test_not_a_mapping(self):
        with pytest.raises(ModelLoadError):
            parse_document(["a", "b"])

    def test_invalid_entity(self):
        with pytest.raises(ModelLoadError, match="invalid model definition"):
            parse_document({"entities": [{"description": "no name"}]})


class TestLoadEntities:

    def test_yaml(self, tmp_path):
        path = tmp_path / "models.yaml"
        path.write_text(ENTITY_YAML)
        entities = load_entities(path)
        assert [e.name for e in entities] == ["Pet", "Legacy"]
        pet = entities[0]
        assert pet.description == "A pet for sale"
        assert pet.get_property("id").minimum == "1"
        assert entities[1].has_override

    def test_json_openapi(self, tmp_path):
        path = tmp_path / "openapi.json"
        path.write_text(json.dumps(OPENAPI_DOC))
        entities = load_entities(str(path))
        assert entities[0].get_property("born").data_type == "date"
        assert entities[0].get_property("photo").data_type == "blob"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ModelLoadError, match="Failed to read"):
            load_entities(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("entities: [unclosed\n")
        with pytest.raises(ModelLoadError):
            load_entities(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ModelLoadError):
            load_entities(path)

    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"entities:\n  - name: \xff\xfe\n")
        with pytest.raises(ModelLoadError, match="Failed to read"):
            load_entities(path)

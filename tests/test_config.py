# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# STATUS: Tests - SchemaConfig construction and setters
# PURPOSE: Verify defaults, options, environment and invalid input handling
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import logging

import pytest

from core.config import (
    DEFAULT_DATABASE_NAME,
    DEFAULT_PREFIX,
    OPT_DATABASE_NAME,
    OPT_NAMING_CONVENTION,
    SchemaConfig,
    get_config,
    reset_config,
)
from core.contracts import IdentifierKind, NamingConvention
from core.schema.identifiers import legalize


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for var in (
        "SCHEMA_DATABASE_NAME",
        "SCHEMA_IDENTIFIER_NAMING_CONVENTION",
        "SCHEMA_COLUMN_PREFIX",
        "SCHEMA_COLUMN_SUFFIX",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


class TestDefaults:

    def test_defaults(self):
        config = SchemaConfig()
        assert config.database_name == DEFAULT_DATABASE_NAME
        assert config.identifier_naming_convention is NamingConvention.ORIGINAL
        assert config.affixes(IdentifierKind.COLUMN) == ("_", "")
        assert config.affixes(IdentifierKind.TABLE) == ("_", "")
        assert config.affixes(IdentifierKind.DATABASE) == ("_", "")

    def test_convention_coerced_from_string(self):
        config = SchemaConfig(identifier_naming_convention="snake_case")
        assert config.identifier_naming_convention is NamingConvention.SNAKE_CASE


class TestSetters:

    def test_invalid_convention_keeps_current(self, caplog):
        config = SchemaConfig()
        with caplog.at_level(logging.WARNING):
            config.set_identifier_naming_convention("kebab")
        assert config.identifier_naming_convention is NamingConvention.ORIGINAL
        assert '"kebab" is invalid' in caplog.text

    def test_valid_convention(self):
        config = SchemaConfig()
        config.set_identifier_naming_convention("snake_case")
        assert config.identifier_naming_convention is NamingConvention.SNAKE_CASE

    def test_database_name_legal(self, caplog):
        config = SchemaConfig()
        with caplog.at_level(logging.ERROR):
            config.set_database_name("petstore")
        assert config.database_name == "petstore"
        assert "Invalid database name" not in caplog.text

    def test_database_name_escaped(self, caplog):
        config = SchemaConfig()
        with caplog.at_level(logging.ERROR):
            config.set_database_name("pet.store")
        assert config.database_name == "petstore"
        assert "Escaped value 'petstore'" in caplog.text

    def test_database_name_not_snake_cased(self):
        config = SchemaConfig(identifier_naming_convention="snake_case")
        config.set_database_name("PetStore")
        assert config.database_name == "PetStore"

    def test_empty_database_name_ignored(self):
        config = SchemaConfig()
        config.set_database_name("")
        assert config.database_name == DEFAULT_DATABASE_NAME

    def test_digit_database_name_uses_database_affixes(self):
        config = SchemaConfig(database_prefix="db", database_suffix="_x")
        config.set_database_name("2024")
        assert config.database_name == "db2024_x"

    def test_database_name_without_legal_form_keeps_current(self, caplog):
        config = SchemaConfig()
        with caplog.at_level(logging.ERROR):
            config.set_database_name("!!!")
        assert config.database_name == DEFAULT_DATABASE_NAME
        assert "Invalid database name" in caplog.text
        assert f"Current '{DEFAULT_DATABASE_NAME}' used instead" in caplog.text


class TestPrefixes:

    def test_digit_prefix_replaced(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = SchemaConfig(column_prefix="9")
        assert config.column_prefix == DEFAULT_PREFIX
        assert "a prefix cannot start with a digit" in caplog.text

    def test_digit_prefix_from_options_replaced(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = SchemaConfig.from_options({"table_prefix": "1x", "table_suffix": "9"})
        assert config.affixes(IdentifierKind.TABLE) == (DEFAULT_PREFIX, "9")
        assert "table_prefix" in caplog.text

    def test_letter_prefix_kept(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = SchemaConfig(table_prefix="t")
        assert config.table_prefix == "t"
        assert caplog.text == ""

    @pytest.mark.parametrize("name", ["123", "1abc", "2024_report"])
    def test_configured_affixes_keep_legalize_stable(self, name):
        config = SchemaConfig(column_prefix="c", column_suffix="9")
        prefix, suffix = config.affixes(IdentifierKind.COLUMN)
        once = legalize(name, IdentifierKind.COLUMN, prefix=prefix, suffix=suffix).value
        twice = legalize(once, IdentifierKind.COLUMN, prefix=prefix, suffix=suffix).value
        assert once == twice


class TestFromOptions:

    def test_options(self):
        config = SchemaConfig.from_options({
            OPT_DATABASE_NAME: "petstore",
            OPT_NAMING_CONVENTION: "snake_case",
            "column_prefix": "c",
        })
        assert config.database_name == "petstore"
        assert config.identifier_naming_convention is NamingConvention.SNAKE_CASE
        assert config.affixes(IdentifierKind.COLUMN) == ("c", "")

    def test_missing_options_use_defaults(self):
        config = SchemaConfig.from_options({})
        assert config == SchemaConfig()


class TestFromEnv:

    def test_env(self, monkeypatch):
        monkeypatch.setenv("SCHEMA_DATABASE_NAME", "inventory")
        monkeypatch.setenv("SCHEMA_IDENTIFIER_NAMING_CONVENTION", "snake_case")
        monkeypatch.setenv("SCHEMA_COLUMN_SUFFIX", "_col")
        config = SchemaConfig.from_env()
        assert config.database_name == "inventory"
        assert config.identifier_naming_convention is NamingConvention.SNAKE_CASE
        assert config.affixes(IdentifierKind.COLUMN) == ("_", "_col")

    def test_get_config_cached(self, monkeypatch):
        monkeypatch.setenv("SCHEMA_DATABASE_NAME", "first")
        config = get_config()
        monkeypatch.setenv("SCHEMA_DATABASE_NAME", "second")
        assert get_config() is config
        assert config.database_name == "first"

        reset_config()
        assert get_config().database_name == "second"

# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Run configuration for the mapping pass
# PURPOSE: Database name, naming convention, identifier affixes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Read-only for the duration of a run. Built from:
- dataclass defaults
- environment variables (SchemaConfig.from_env)
- generator options (SchemaConfig.from_options)

Design:
- Values go through setters, so invalid input is reported and the
  previous value is kept rather than failing the run.
- The database name is legalized the same way table and column names are.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from core.contracts import IdentifierKind, NamingConvention
from core.logging import get_logger
from core.schema.identifiers import IdentifierError, legalize

logger = get_logger(__name__)


DEFAULT_DATABASE_NAME = "sqlite.db"
DEFAULT_PREFIX = "_"

# Option keys accepted by SchemaConfig.from_options
OPT_DATABASE_NAME = "defaultDatabaseName"
OPT_NAMING_CONVENTION = "identifierNamingConvention"


@dataclass
class SchemaConfig:
    """
    Configuration for one mapping run.

    Prefix/suffix pairs are affixed to digit-only identifiers of their kind;
    the prefix alone goes in front of names that start with a digit.
    """
    database_name: str = DEFAULT_DATABASE_NAME
    identifier_naming_convention: NamingConvention = NamingConvention.ORIGINAL

    database_prefix: str = DEFAULT_PREFIX
    database_suffix: str = ""
    table_prefix: str = DEFAULT_PREFIX
    table_suffix: str = ""
    column_prefix: str = DEFAULT_PREFIX
    column_suffix: str = ""

    def __post_init__(self):
        self.identifier_naming_convention = NamingConvention(self.identifier_naming_convention)
        self._check_prefixes()

    def _check_prefixes(self) -> None:
        """
        A prefix starting with a digit would be prefixed again on the next
        pass; such prefixes are reported and replaced by the default.
        """
        for field_name in ("database_prefix", "table_prefix", "column_prefix"):
            prefix = getattr(self, field_name)
            if prefix[:1].isdigit():
                logger.warning(
                    f"\"{prefix}\" is invalid \"{field_name}\" argument: a prefix cannot start "
                    f"with a digit. Default \"{DEFAULT_PREFIX}\" used instead."
                )
                setattr(self, field_name, DEFAULT_PREFIX)

    def affixes(self, kind: IdentifierKind) -> Tuple[str, str]:
        """(prefix, suffix) for an identifier kind."""
        if kind is IdentifierKind.DATABASE:
            return self.database_prefix, self.database_suffix
        if kind is IdentifierKind.TABLE:
            return self.table_prefix, self.table_suffix
        return self.column_prefix, self.column_suffix

    def set_identifier_naming_convention(self, naming: str) -> None:
        """
        Set the naming convention for table and column names.

        Unknown values are reported and the current convention is kept.
        """
        try:
            self.identifier_naming_convention = NamingConvention(naming)
        except ValueError:
            logger.warning(
                f"\"{naming}\" is invalid \"{OPT_NAMING_CONVENTION}\" argument. "
                f"Current \"{self.identifier_naming_convention.value}\" used instead."
            )

    def set_database_name(self, database_name: str) -> None:
        """
        Set the database name, legalized as a Database identifier.

        An empty value, or one with no legal form, keeps the current name.
        """
        if not database_name:
            return
        prefix, suffix = self.affixes(IdentifierKind.DATABASE)
        try:
            escaped = legalize(database_name, IdentifierKind.DATABASE, prefix=prefix, suffix=suffix).value
        except IdentifierError as e:
            logger.error(f"Invalid database name. {e}. Current '{self.database_name}' used instead.")
            return
        if escaped != database_name:
            logger.error(
                f"Invalid database name. '{database_name}' cannot be used as identifier. "
                f"Escaped value '{escaped}' will be used instead."
            )
        self.database_name = escaped

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "SchemaConfig":
        """
        Create from generator options.

        Recognized keys: defaultDatabaseName, identifierNamingConvention,
        and {database,table,column}{Prefix,Suffix} via their snake_case names.
        """
        config = cls()
        for field_name in (
            "database_prefix", "database_suffix",
            "table_prefix", "table_suffix",
            "column_prefix", "column_suffix",
        ):
            if options.get(field_name) is not None:
                setattr(config, field_name, str(options[field_name]))
        config._check_prefixes()

        if options.get(OPT_NAMING_CONVENTION) is not None:
            config.set_identifier_naming_convention(str(options[OPT_NAMING_CONVENTION]))
        if options.get(OPT_DATABASE_NAME) is not None:
            config.set_database_name(str(options[OPT_DATABASE_NAME]))
        return config

    @classmethod
    def from_env(cls) -> "SchemaConfig":
        """Create from environment variables."""
        options = {
            "database_prefix": os.getenv("SCHEMA_DATABASE_PREFIX"),
            "database_suffix": os.getenv("SCHEMA_DATABASE_SUFFIX"),
            "table_prefix": os.getenv("SCHEMA_TABLE_PREFIX"),
            "table_suffix": os.getenv("SCHEMA_TABLE_SUFFIX"),
            "column_prefix": os.getenv("SCHEMA_COLUMN_PREFIX"),
            "column_suffix": os.getenv("SCHEMA_COLUMN_SUFFIX"),
            OPT_NAMING_CONVENTION: os.getenv("SCHEMA_IDENTIFIER_NAMING_CONVENTION"),
            OPT_DATABASE_NAME: os.getenv("SCHEMA_DATABASE_NAME"),
        }
        return cls.from_options(options)


# ============================================================================
# GLOBAL CONFIG INSTANCE
# ============================================================================

_config: Optional[SchemaConfig] = None


def get_config() -> SchemaConfig:
    """Get global config instance."""
    global _config
    if _config is None:
        _config = SchemaConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (for testing)."""
    global _config
    _config = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DEFAULT_DATABASE_NAME",
    "DEFAULT_PREFIX",
    "OPT_DATABASE_NAME",
    "OPT_NAMING_CONVENTION",
    "SchemaConfig",
    "get_config",
    "reset_config",
]

# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides the run configuration for the schema mapping pass.
"""

from core.config.defaults import (
    DEFAULT_DATABASE_NAME,
    DEFAULT_PREFIX,
    OPT_DATABASE_NAME,
    OPT_NAMING_CONVENTION,
    SchemaConfig,
    get_config,
    reset_config,
)

__all__ = [
    "DEFAULT_DATABASE_NAME",
    "DEFAULT_PREFIX",
    "OPT_DATABASE_NAME",
    "OPT_NAMING_CONVENTION",
    "SchemaConfig",
    "get_config",
    "reset_config",
]

#!/usr/bin/env python3
# ============================================================================
# CLI SCHEMA GENERATION TOOL
# ============================================================================
# STATUS: Tool - Map a model document to SQLite table definitions
# PURPOSE: Run the mapping pass outside of a generator pipeline
# CREATED: 19 OCT 2026
# ============================================================================
"""
Map API models to SQLite table/column definitions.

Reads an entity document or an OpenAPI document (YAML or JSON), runs the
mapping pass and prints either the annotated entities as JSON or a
SQLite DDL script.

Usage:
    # Annotated entities as JSON
    python tools/generate_schema.py petstore.yaml

    # DDL script with snake_case identifiers
    python tools/generate_schema.py petstore.yaml --format sql --naming snake_case

    # Fail the run if any model or property could not be mapped
    python tools/generate_schema.py petstore.yaml --strict

Exit codes:
    0  success
    1  --strict and at least one item could not be mapped
    2  the document could not be loaded

Environment:
    SCHEMA_* variables seed the configuration (see core.config),
    command line options take precedence.
"""

import argparse
import json
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import OPT_DATABASE_NAME, OPT_NAMING_CONVENTION, SchemaConfig
from core.contracts import NamingConvention
from core.logging import configure_logging, get_logger, ComponentType
from core.schema import SchemaToSQL
from services import ModelLoadError, SchemaMappingResult, SchemaMappingService, load_entities
from __version__ import __version__

logger = get_logger(__name__, ComponentType.CLI)


def build_config(args: argparse.Namespace) -> SchemaConfig:
    """Environment config with command line overrides applied."""
    config = SchemaConfig.from_env()
    if args.naming:
        config.set_identifier_naming_convention(args.naming)
    if args.database_name:
        config.set_database_name(args.database_name)
    return config


def result_to_json(result: SchemaMappingResult) -> str:
    """Serialize a mapping result for stdout."""
    payload = {
        "database_name": result.database_name,
        "entities": [e.model_dump(mode="json") for e in result.entities],
        "failures": [
            {
                "entity": f.entity,
                "property": f.property,
                "error_type": f.error_type,
                "message": f.message,
            }
            for f in result.failures
        ],
    }
    return json.dumps(payload, indent=2)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Map API models to SQLite table and column definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s petstore.yaml
  %(prog)s petstore.yaml --format sql --naming snake_case
  %(prog)s openapi.json --database-name petstore --strict
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("models", help="Entity or OpenAPI document (.yaml, .yml, .json)")
    parser.add_argument(
        "--naming", "-n",
        choices=[c.value for c in NamingConvention],
        help=f"Identifier naming convention ({OPT_NAMING_CONVENTION})",
    )
    parser.add_argument(
        "--database-name", "-d",
        help=f"Database name ({OPT_DATABASE_NAME})",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["json", "sql"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--strict", "-s",
        action="store_true",
        help="Exit with status 1 if any model or property could not be mapped",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )

    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "INFO")

    try:
        entities = load_entities(args.models)
    except ModelLoadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    config = build_config(args)
    logger.debug(
        f"Naming convention: {config.identifier_naming_convention.value}, "
        f"database: {config.database_name}"
    )
    result = SchemaMappingService(config).map_entities(entities)

    if args.format == "sql":
        print(SchemaToSQL(database_name=result.database_name).render(result.entities))
    else:
        print(result_to_json(result))

    if args.strict and not result.ok:
        for failure in result.failures:
            print(f"ERROR: {failure}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

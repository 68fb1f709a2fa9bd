# ============================================================================
# SCHEMA TO SQL RENDERER
# ============================================================================
# STATUS: Core - Reference DDL rendering of annotated entities
# PURPOSE: Render TableDefinition/ColumnDefinition records as a SQLite script
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: SchemaToSQL
# DEPENDENCIES: jinja2
# ============================================================================
"""
Annotated Entities to SQLite DDL.

The mapping pass only annotates entities; this renderer turns the
annotations into one CREATE TABLE statement per entity.

Rendering rules:
    - Every identifier is double-quoted, so reserved words are safe
    - NOT NULL for required columns, DEFAULT for resolved defaults
    - CHECK clauses for bounds that are not the representation extremes
    - Comments as /* */ with nested comment markers neutralised
    - Entities/properties carrying a schema override are left out;
      the override belongs to the user's own template

Usage:
    renderer = SchemaToSQL(database_name="petstore")
    script = renderer.render(result.entities)
"""

from typing import Any, Dict, Iterable, List, Optional

from jinja2 import BaseLoader, Environment, StrictUndefined

from core.logging import ComponentType, get_logger
from core.models import ColumnDefault, ColumnDefinition, Entity
from core.schema.ranges import INT64_MAX, INT64_MIN, REAL_MAX, REAL_MIN

logger = get_logger(__name__, ComponentType.RENDERER)


SCHEMA_TEMPLATE = """\
-- SQLite schema{% if database_name %} for database {{ database_name | comment }}{% endif %}

{% for table in tables %}

{% if table.comment %}
/* {{ table.comment | comment }} */
{% endif %}
CREATE TABLE IF NOT EXISTS {{ table.name | ident }} (
{% for column in table.columns %}
  {{ column.clause }}{{ "," if not loop.last else "" }}{% if column.comment %} /* {{ column.comment | comment }} */{% endif %}

{% endfor %}
);
{% endfor %}
"""


# ============================================================================
# ESCAPING
# ============================================================================

def quote_identifier(name: str) -> str:
    """Double-quote an identifier, doubling embedded quotes."""
    return '"' + name.replace('"', '""') + '"'


def quote_literal(value: str) -> str:
    """Single-quote a string literal, doubling embedded quotes."""
    return "'" + value.replace("'", "''") + "'"


def escape_comment(text: str) -> str:
    """Keep comment text from closing or opening a block comment."""
    text = " ".join(str(text).split())
    return text.replace("*/", "*_/").replace("/*", "/_*")


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


def default_literal(default: ColumnDefault) -> str:
    """
    SQL literal for a resolved default.

    NULL stays a keyword, numbers stay bare, booleans become 1/0,
    everything else is quoted.
    """
    if default.is_null:
        return "NULL"
    value = default.value
    if default.flags.is_boolean and value.lower() in ("true", "false"):
        return "1" if value.lower() == "true" else "0"
    if default.flags.is_numeric and _is_number(value):
        return value
    return quote_literal(value)


# ============================================================================
# RENDERER
# ============================================================================

class SchemaToSQL:
    """
    Render annotated entities into a SQLite DDL script.
    """

    def __init__(self, database_name: Optional[str] = None):
        """
        Initialize the renderer.

        Args:
            database_name: Legalized database name, used in the script header
        """
        self.database_name = database_name
        self._env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["ident"] = quote_identifier
        self._env.filters["comment"] = escape_comment
        self._template = self._env.from_string(SCHEMA_TEMPLATE)

    # =========================================================================
    # COLUMN CLAUSES
    # =========================================================================

    @staticmethod
    def check_clause(column: ColumnDefinition) -> Optional[str]:
        """
        CHECK expression for a column's bounds, or None.

        Bounds at the representation extremes are not worth a constraint.
        """
        ident = quote_identifier(column.name)
        parts: List[str] = []
        flags = column.flags

        if flags.is_integer:
            if column.minimum is not None and column.minimum > INT64_MIN:
                parts.append(f"{ident} >= {column.minimum}")
            if column.maximum is not None and column.maximum < INT64_MAX:
                parts.append(f"{ident} <= {column.maximum}")
        elif flags.is_float or flags.is_decimal:
            if column.minimum is not None and column.minimum > REAL_MIN:
                parts.append(f"{ident} >= {column.minimum!r}")
            if column.maximum is not None and column.maximum < REAL_MAX:
                parts.append(f"{ident} <= {column.maximum!r}")
        elif flags.is_string or flags.is_blob:
            if column.minimum is not None:
                parts.append(f"length({ident}) >= {column.minimum}")
            if column.maximum is not None:
                parts.append(f"length({ident}) <= {column.maximum}")

        if not parts:
            return None
        return " AND ".join(parts)

    def column_clause(self, column: ColumnDefinition) -> str:
        """Full column definition: name, type, NOT NULL, DEFAULT, CHECK."""
        clause = f"{quote_identifier(column.name)} {column.sql_type.value}"
        if column.not_null:
            clause += " NOT NULL"
        if column.default is not None:
            clause += f" DEFAULT {default_literal(column.default)}"
        check = self.check_clause(column)
        if check:
            clause += f" CHECK ({check})"
        return clause

    # =========================================================================
    # SCRIPT
    # =========================================================================

    def table_context(self, entity: Entity) -> Optional[Dict[str, Any]]:
        """Template context for one entity, None when it renders nothing."""
        if entity.has_override or entity.table_definition is None:
            return None

        columns = []
        for prop in entity.properties:
            if prop.has_override or prop.column_definition is None:
                continue
            column = prop.column_definition
            columns.append({
                "clause": self.column_clause(column),
                "comment": column.comment,
            })

        if not columns:
            logger.warning(f"Table '{entity.table_definition.name}' has no generated columns, skipped")
            return None

        return {
            "name": entity.table_definition.name,
            "comment": entity.table_definition.comment,
            "columns": columns,
        }

    def render(self, entities: Iterable[Entity]) -> str:
        """
        Render CREATE TABLE statements for every annotated entity.

        Args:
            entities: Entities annotated by the mapping pass

        Returns:
            SQLite DDL script
        """
        tables = []
        for entity in entities:
            table = self.table_context(entity)
            if table is not None:
                tables.append(table)

        logger.info(f"Rendered {len(tables)} CREATE TABLE statements")
        return self._template.render(database_name=self.database_name, tables=tables)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'SchemaToSQL',
    'quote_identifier',
    'quote_literal',
    'escape_comment',
    'default_literal',
]

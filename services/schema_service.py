# ============================================================================
# SCHEMA MAPPING SERVICE
# ============================================================================
# STATUS: Service - Assembly of table and column definitions
# PURPOSE: Drive classifier, normalizers, legalizer and default resolver
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Mapping Service

Walks entities, then the properties of each entity, and attaches:
    Entity.table_definition     (TableDefinition)
    Property.column_definition  (ColumnDefinition)

Per property:
    classify -> legalize name -> normalize bounds -> resolve default -> assemble

Rules:
    - A schema_override on an entity or property is authoritative; that
      item is skipped. Entity and property skips are independent.
    - Input entities are never mutated; annotated copies are returned.
    - A hard failure (empty identifier, malformed bound) drops only the
      entity or property it occurred in and is recorded in the result.
    - A rejected BLOB/JSON default is logged and replaced by no default.

Usage:
    service = SchemaMappingService(SchemaConfig(identifier_naming_convention="snake_case"))
    result = service.map_entities(entities)
    for entity in result.entities:
        print(entity.table_definition)
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from core.config import SchemaConfig, get_config
from core.contracts import IdentifierKind, NamingConvention
from core.logging import ComponentType, get_logger, log_context
from core.models import ColumnDefinition, Entity, Property, TableDefinition
from core.schema.defaults import resolve_default
from core.schema.identifiers import LegalIdentifier, legalize
from core.schema.ranges import normalize_length_range, normalize_numeric_range
from core.schema.type_classifier import category_flags, classify, physical_type

logger = get_logger(__name__, ComponentType.ASSEMBLY)


# ============================================================================
# RESULT
# ============================================================================

@dataclass
class MappingFailure:
    """A hard failure isolated to one entity or one property."""
    entity: str
    property: Optional[str]
    error_type: str
    message: str

    def __str__(self) -> str:
        where = f"'{self.entity}'" if self.property is None else f"'{self.entity}.{self.property}'"
        return f"{where}: {self.error_type}: {self.message}"


class SchemaMappingError(Exception):
    """Raised by SchemaMappingResult.raise_for_failures()."""
    def __init__(self, failures: List[MappingFailure]):
        self.failures = failures
        details = "; ".join(str(f) for f in failures)
        super().__init__(f"{len(failures)} item(s) could not be mapped: {details}")


@dataclass
class SchemaMappingResult:
    """
    Outcome of one mapping run.

    entities holds every input entity, annotated where mapping succeeded.
    failures lists the items that were dropped.
    """
    database_name: str
    entities: List[Entity] = field(default_factory=list)
    failures: List[MappingFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def table_count(self) -> int:
        return sum(1 for e in self.entities if e.table_definition is not None)

    @property
    def column_count(self) -> int:
        return sum(
            1
            for e in self.entities
            for p in e.properties
            if p.column_definition is not None
        )

    def raise_for_failures(self) -> None:
        if self.failures:
            raise SchemaMappingError(self.failures)


# ============================================================================
# SERVICE
# ============================================================================

class SchemaMappingService:
    """Annotate entities with table and column definitions."""

    def __init__(self, config: Optional[SchemaConfig] = None):
        """
        Initialize the service.

        Args:
            config: Run configuration. Defaults to the process-wide config.
        """
        self.config = config or get_config()

    # =========================================================================
    # IDENTIFIERS
    # =========================================================================

    def _legalize(self, name: str, kind: IdentifierKind) -> LegalIdentifier:
        prefix, suffix = self.config.affixes(kind)
        return legalize(
            name,
            kind,
            naming_convention=self.config.identifier_naming_convention,
            prefix=prefix,
            suffix=suffix,
        )

    def table_name(self, name: str) -> LegalIdentifier:
        """Legal table name for a model name."""
        return self._legalize(name, IdentifierKind.TABLE)

    def column_name(self, name: str) -> LegalIdentifier:
        """Legal column name for a property name."""
        return self._legalize(name, IdentifierKind.COLUMN)

    def _comment(self, description: Optional[str], identifier: LegalIdentifier, label: str) -> Optional[str]:
        """Description, plus the pre-rename name when the naming convention changed it."""
        if self.config.identifier_naming_convention is not NamingConvention.SNAKE_CASE:
            return description
        if not identifier.changed:
            return description
        note = f"Original {label} name - {identifier.source}."
        if not description:
            return note
        return f"{description}. {note}"

    # =========================================================================
    # DEFINITIONS
    # =========================================================================

    def build_table_definition(self, entity: Entity) -> TableDefinition:
        """
        Derive the table definition for an entity.

        Raises:
            IdentifierError: If the entity name has no legal form
        """
        table = self.table_name(entity.name)
        return TableDefinition(
            name=table.value,
            comment=self._comment(entity.description, table, "model"),
        )

    def build_column_definition(self, entity: Entity, prop: Property) -> ColumnDefinition:
        """
        Derive the column definition for one property.

        Raises:
            IdentifierError: If the property name has no legal form
            ValueError: If a numeric bound is not a number
        """
        category = classify(prop.data_type, prop.data_format)
        column = self.column_name(prop.name)

        minimum = maximum = unsigned = None
        if category.is_numeric():
            bounds = normalize_numeric_range(
                category,
                prop.minimum,
                prop.maximum,
                prop.exclusive_minimum,
                prop.exclusive_maximum,
            )
            minimum, maximum, unsigned = bounds.minimum, bounds.maximum, bounds.unsigned
        elif category.is_length_bounded():
            lengths = normalize_length_range(prop.min_length, prop.max_length)
            minimum, maximum = lengths.minimum, lengths.maximum

        resolution = resolve_default(prop.required, prop.default, category)
        if not resolution.ok:
            logger.warning(
                f"Property '{prop.name}' of model '{entity.name}' mapped to data type "
                f"which doesn't support default value: {resolution.message}"
            )

        logger.debug(
            f"Column '{column.value}': {prop.data_type} -> {category.value} "
            f"({physical_type(category).value})"
        )

        return ColumnDefinition(
            name=column.value,
            source_type=prop.data_type,
            data_format=prop.data_format,
            category=category,
            sql_type=physical_type(category),
            not_null=resolution.not_null,
            default=resolution.default,
            minimum=minimum,
            maximum=maximum,
            unsigned=unsigned,
            comment=self._comment(prop.description, column, "param"),
            flags=category_flags(category),
        )

    # =========================================================================
    # ASSEMBLY
    # =========================================================================

    def _map_property(
        self,
        entity: Entity,
        prop: Property,
        failures: List[MappingFailure],
    ) -> Property:
        with log_context(property=prop.name):
            if prop.has_override:
                logger.info(f"Found schema override in '{prop.name}' property, autogeneration skipped")
                return prop
            try:
                column = self.build_column_definition(entity, prop)
            except ValueError as e:
                logger.error(f"Property '{prop.name}' of model '{entity.name}' skipped: {e}")
                failures.append(MappingFailure(entity.name, prop.name, type(e).__name__, str(e)))
                return prop
            return prop.model_copy(update={"column_definition": column})

    def map_entity(self, entity: Entity, failures: List[MappingFailure]) -> Entity:
        """
        Annotate one entity and its properties.

        Args:
            entity: Input entity (left untouched)
            failures: Collector for isolated hard failures

        Returns:
            Annotated copy of the entity
        """
        with log_context(entity=entity.name):
            update = {}
            if entity.has_override:
                logger.info(f"Found schema override in '{entity.name}' model, autogeneration skipped")
            else:
                try:
                    update["table_definition"] = self.build_table_definition(entity)
                except ValueError as e:
                    logger.error(f"Model '{entity.name}' skipped: {e}")
                    failures.append(MappingFailure(entity.name, None, type(e).__name__, str(e)))
                    return entity

            update["properties"] = [
                self._map_property(entity, prop, failures)
                for prop in entity.properties
            ]
            return entity.model_copy(update=update)

    def map_entities(self, entities: Iterable[Entity]) -> SchemaMappingResult:
        """
        Annotate every entity.

        Args:
            entities: Resolved entities from the model builder

        Returns:
            SchemaMappingResult with annotated copies and recorded failures
        """
        result = SchemaMappingResult(database_name=self.config.database_name)
        for entity in entities:
            result.entities.append(self.map_entity(entity, result.failures))

        logger.info(
            f"Mapped {result.table_count} tables and {result.column_count} columns "
            f"from {len(result.entities)} models ({len(result.failures)} failures)"
        )
        return result


__all__ = [
    "MappingFailure",
    "SchemaMappingError",
    "SchemaMappingResult",
    "SchemaMappingService",
]

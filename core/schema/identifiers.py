# ============================================================================
# IDENTIFIER LEGALIZER
# ============================================================================
# STATUS: Core - Database/table/column name legalization
# PURPOSE: Turn arbitrary model names into safe SQLite identifiers
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: legalize, LegalIdentifier, IdentifierError, RESERVED_WORDS
# DEPENDENCIES: re, core.contracts, core.logging
# ============================================================================
"""
Identifier Legalizer

Steps, in order:
    1. Strip characters outside [0-9a-zA-Z$_] and U+0080..U+FFFF
    2. Strip trailing whitespace
    3. Affix prefix/suffix to digit-only names, prefix to names
       starting with a digit
    4. Empty result -> IdentifierError
    5. Naming convention (tables and columns only)
    6. Truncate to IDENTIFIER_MAX_LENGTH

Steps 1, 2, 3 and 6 log a warning when they change the name.

Reserved words are detected and reported, never rewritten. Quoting is
up to whoever renders the DDL.

legalize() is idempotent: legalize(legalize(x).value) == legalize(x).
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Union

from core.contracts import IdentifierKind, NamingConvention
from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.LEGALIZER)


IDENTIFIER_MAX_LENGTH = 255

# ASCII NUL and supplementary characters (U+10000 and higher) are never permitted
_UNSAFE_CHARACTERS = re.compile(r"[^0-9a-zA-Z$_\u0080-\uffff]")
_TRAILING_WHITESPACE = re.compile(r"\s+$")
_DIGITS_ONLY = re.compile(r"[0-9]+")
_LEADING_DIGIT = re.compile(r"[0-9]")

# SQLite keywords (sqlite.org tokenreq + parse.y), lower-cased
RESERVED_WORDS: FrozenSet[str] = frozenset(word.lower() for word in (
    "ABORT", "ACTION", "ADD", "AFTER", "ALL", "ALTER", "ALWAYS",
    "ANALYZE", "AND", "ANY", "AS", "ASC", "ATTACH", "AUTOINCR",
    "AUTOINCREMENT", "BEFORE", "BEGIN", "BETWEEN", "BITAND", "BITNOT",
    "BITOR", "BLOB", "BY", "CASCADE", "CASE", "CAST", "CHECK",
    "COLLATE", "COLUMN", "COMMA", "COMMIT", "CONCAT", "CONFLICT",
    "CONSTRAINT", "CREATE", "CROSS", "CURRENT", "CURRENT_DATE",
    "CURRENT_TIME", "CURRENT_TIMESTAMP", "DATABASE", "DEFAULT",
    "DEFERRABLE", "DEFERRED", "DELETE", "DESC", "DETACH", "DISTINCT",
    "DO", "DOT", "DROP", "EACH", "ELSE", "END", "EQ", "ESCAPE",
    "EXCEPT", "EXCLUDE", "EXCLUSIVE", "EXISTS", "EXPLAIN", "FAIL",
    "FILTER", "FIRST", "FLOAT", "FOLLOWING", "FOR", "FOREIGN", "FROM",
    "FULL", "GE", "GENERATED", "GLOB", "GROUP", "GROUPS", "GT",
    "HAVING", "ID", "IF", "IGNORE", "IMMEDIATE", "IN", "INDEX",
    "INDEXED", "INITIALLY", "INNER", "INSERT", "INSTEAD", "INTEGER",
    "INTERSECT", "INTO", "IS", "ISNULL", "JOIN", "KEY", "LAST", "LE",
    "LEFT", "LIKE", "LIMIT", "LP", "LSHIFT", "LT", "MATCH", "MINUS",
    "NATURAL", "NE", "NO", "NOT", "NOTHING", "NOTNULL", "NULL", "NULLS",
    "OF", "OFFSET", "ON", "OR", "ORDER", "OTHERS", "OUTER", "OVER",
    "PARTITION", "PLAN", "PLUS", "PRAGMA", "PRECEDING", "PRIMARY",
    "QUERY", "RAISE", "RANGE", "RECURSIVE", "REFERENCES", "REGEXP",
    "REINDEX", "RELEASE", "REM", "RENAME", "REPLACE", "RESTRICT",
    "RIGHT", "ROLLBACK", "ROW", "ROWS", "RP", "RSHIFT", "SAVEPOINT",
    "SELECT", "SET", "SLASH", "STAR", "STRING", "TABLE", "TEMP",
    "TEMPORARY", "THEN", "TIES", "TO", "TRANSACTION", "TRIGGER",
    "UNBOUNDED", "UNION", "UNIQUE", "UPDATE", "USING", "VACUUM",
    "VALUES", "VARIABLE", "VIEW", "VIRTUAL", "WHEN", "WHERE",
    "WINDOW", "WITH", "WITHOUT",
))


class IdentifierError(ValueError):
    """Raised when no legal identifier can be derived from a name."""
    def __init__(self, name: str, kind: IdentifierKind):
        self.name = name
        self.kind = kind
        super().__init__(f"Empty {kind.value} name for '{name}' not allowed")


@dataclass(frozen=True)
class LegalIdentifier:
    """A legalized identifier and where it came from."""
    value: str
    source: str
    kind: IdentifierKind
    reserved: bool = False

    @property
    def changed(self) -> bool:
        return self.value != self.source

    def __str__(self) -> str:
        return self.value


# ============================================================================
# HELPERS
# ============================================================================

def is_reserved_word(name: str) -> bool:
    """Case-insensitive check against the SQLite keyword list."""
    return name.lower() in RESERVED_WORDS


def to_snake_case(word: str) -> str:
    """
    Underscore a camel-cased word: "userName" -> "user_name",
    "HTTPRequestLog" -> "http_request_log".
    """
    word = word.replace("$", "__")
    word = re.sub(r"([A-Z]+)([A-Z][a-z][a-z]+)", r"\1_\2", word)
    word = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", word)
    word = word.replace("-", "_")
    return word.lower()


def strip_unsafe_characters(identifier: str) -> str:
    """Remove every character not allowed in a quoted or unquoted identifier."""
    if _UNSAFE_CHARACTERS.search(identifier):
        logger.warning(
            f"Identifier '{identifier}' contains unsafe characters out of "
            f"[0-9,a-z,A-Z$_] and U+0080..U+FFFF range"
        )
        identifier = _UNSAFE_CHARACTERS.sub("", identifier)
    return identifier


def _strip_trailing_whitespace(identifier: str, label: str, name: str) -> str:
    if _TRAILING_WHITESPACE.search(identifier):
        logger.warning(f"{label} names cannot end with space characters. Check '{name}' name")
        identifier = _TRAILING_WHITESPACE.sub("", identifier)
    return identifier


# ============================================================================
# LEGALIZATION
# ============================================================================

def legalize(
    name: str,
    kind: Union[IdentifierKind, str] = IdentifierKind.COLUMN,
    naming_convention: Union[NamingConvention, str] = NamingConvention.ORIGINAL,
    prefix: str = "_",
    suffix: str = "",
) -> LegalIdentifier:
    """
    Convert a name into a legal database, table or column identifier.

    Args:
        name: Source name as authored
        kind: What the identifier names
        naming_convention: Applied to table and column names only
        prefix: Prepended to names that start with a digit; must not
            start with a digit itself
        suffix: Appended to digit-only names

    Returns:
        LegalIdentifier

    Raises:
        IdentifierError: If nothing legal is left of the name
    """
    kind = IdentifierKind(kind)
    naming_convention = NamingConvention(naming_convention)
    label = kind.value.capitalize()

    identifier = strip_unsafe_characters(name)
    identifier = _strip_trailing_whitespace(identifier, label, name)

    # digit-only names are legal when quoted, but keep them unambiguous;
    # unquoted identifiers cannot start with a digit either
    if _DIGITS_ONLY.fullmatch(identifier):
        logger.warning(f"{label} names cannot consist solely of digits. Check '{name}' name")
        identifier = f"{prefix}{identifier}{suffix}"
    elif _LEADING_DIGIT.match(identifier):
        logger.warning(f"{label} names should not start with a digit. Check '{name}' name")
        identifier = f"{prefix}{identifier}"

    if not identifier:
        raise IdentifierError(name, kind)

    if kind.follows_naming_convention() and naming_convention is NamingConvention.SNAKE_CASE:
        identifier = to_snake_case(identifier)

    if len(identifier) > IDENTIFIER_MAX_LENGTH:
        logger.warning(f"{label} name too long. Name '{name}' will be truncated")
        identifier = identifier[:IDENTIFIER_MAX_LENGTH]
        # the cut can land right after a non-ASCII space
        identifier = _strip_trailing_whitespace(identifier, label, name)
        if not identifier:
            raise IdentifierError(name, kind)

    reserved = is_reserved_word(identifier)
    if reserved:
        logger.warning(
            f"'{identifier}' is reserved word. Do not use that word or "
            f"properly quote it when rendering the schema"
        )

    return LegalIdentifier(value=identifier, source=name, kind=kind, reserved=reserved)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "IDENTIFIER_MAX_LENGTH",
    "RESERVED_WORDS",
    "IdentifierError",
    "LegalIdentifier",
    "is_reserved_word",
    "to_snake_case",
    "strip_unsafe_characters",
    "legalize",
]

# ============================================================================
# SCHEMA MODULE
# ============================================================================
# STATUS: Core - Schema mapping components
# PURPOSE: Classify, normalize, legalize and resolve defaults; render DDL
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.schema.type_classifier import (
    TYPE_MAP,
    CATEGORY_MAP,
    classify,
    physical_type,
    category_flags,
)
from core.schema.ranges import (
    NumericRange,
    LengthRange,
    normalize_numeric_range,
    normalize_length_range,
)
from core.schema.identifiers import (
    IDENTIFIER_MAX_LENGTH,
    RESERVED_WORDS,
    IdentifierError,
    LegalIdentifier,
    is_reserved_word,
    legalize,
)
from core.schema.defaults import (
    DefaultErrorKind,
    DefaultResolution,
    resolve_default,
)
from core.schema.sql_generator import SchemaToSQL

__all__ = [
    # Classifier
    "TYPE_MAP",
    "CATEGORY_MAP",
    "classify",
    "physical_type",
    "category_flags",
    # Normalizers
    "NumericRange",
    "LengthRange",
    "normalize_numeric_range",
    "normalize_length_range",
    # Legalizer
    "IDENTIFIER_MAX_LENGTH",
    "RESERVED_WORDS",
    "IdentifierError",
    "LegalIdentifier",
    "is_reserved_word",
    "legalize",
    # Defaults
    "DefaultErrorKind",
    "DefaultResolution",
    "resolve_default",
    # Renderer
    "SchemaToSQL",
]

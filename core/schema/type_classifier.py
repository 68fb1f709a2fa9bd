# ============================================================================
# TYPE CLASSIFIER
# ============================================================================
# STATUS: Core - Semantic type to storage category mapping
# PURPOSE: Map (type, format) to one StorageCategory and one SQLite type
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: classify, physical_type, category_flags, TYPE_MAP, CATEGORY_MAP
# DEPENDENCIES: core.contracts, core.models
# ============================================================================
"""
Type Classifier.

Two lookups, both case-insensitive:

1. TYPE_MAP folds upstream semantic names ("integer", "string",
   "DateTime", "array", ...) into a storage tag ("int", "text", "date",
   "blob", ...). Tags already in storage form pass straight through.
2. CATEGORY_MAP turns a storage tag into a StorageCategory.

Anything not recognized is StorageCategory.UNKNOWN.

Usage:
    from core.schema.type_classifier import classify, physical_type

    category = classify("integer", "int64")   # StorageCategory.INTEGER
    physical_type(category)                   # PhysicalType.INTEGER
"""

from typing import Dict, Optional

from core.contracts import PhysicalType, StorageCategory
from core.models.definitions import CategoryFlags


# ============================================================================
# TYPE MAPPING
# ============================================================================

TYPE_MAP: Dict[str, str] = {
    # Collections and free-form objects
    'array': 'blob',
    'set': 'blob',
    'map': 'blob',
    'list': 'blob',
    'object': 'blob',
    'anytype': 'blob',

    # Binary
    'bytearray': 'blob',
    'binary': 'blob',
    'file': 'blob',

    # Numbers
    'integer': 'int',
    'byte': 'int',
    'short': 'int',
    'number': 'double',
    'real': 'double',
    'bigdecimal': 'decimal',

    # Strings
    'string': 'text',
    'char': 'text',
    'uuid': 'text',
    'uri': 'text',

    # Dates
    'time': 'date',
    'datetime': 'date',
}

CATEGORY_MAP: Dict[str, StorageCategory] = {
    'boolean': StorageCategory.BOOLEAN,
    'int': StorageCategory.INTEGER,
    'long': StorageCategory.INTEGER,
    'float': StorageCategory.REAL,
    'double': StorageCategory.REAL,
    'decimal': StorageCategory.DECIMAL,
    'text': StorageCategory.TEXT,
    'varchar': StorageCategory.TEXT,
    'date': StorageCategory.DATE,
    'blob': StorageCategory.BLOB,
    'bytes': StorageCategory.BLOB,
    'json': StorageCategory.JSON,
}

PHYSICAL_TYPE_MAP: Dict[StorageCategory, PhysicalType] = {
    StorageCategory.BOOLEAN: PhysicalType.INTEGER,
    StorageCategory.INTEGER: PhysicalType.INTEGER,
    StorageCategory.REAL: PhysicalType.REAL,
    StorageCategory.DECIMAL: PhysicalType.REAL,
    StorageCategory.TEXT: PhysicalType.TEXT,
    StorageCategory.DATE: PhysicalType.TEXT,
    StorageCategory.BLOB: PhysicalType.BLOB,
    StorageCategory.JSON: PhysicalType.BLOB,
    StorageCategory.UNKNOWN: PhysicalType.BLOB,
}

_FLAGS: Dict[StorageCategory, CategoryFlags] = {
    StorageCategory.BOOLEAN: CategoryFlags(is_primitive=True, is_numeric=True, is_boolean=True),
    StorageCategory.INTEGER: CategoryFlags(is_primitive=True, is_numeric=True, is_integer=True),
    StorageCategory.REAL: CategoryFlags(is_primitive=True, is_numeric=True, is_float=True),
    StorageCategory.DECIMAL: CategoryFlags(is_primitive=True, is_numeric=True, is_decimal=True),
    StorageCategory.TEXT: CategoryFlags(is_primitive=True, is_string=True),
    StorageCategory.DATE: CategoryFlags(is_primitive=True, is_date=True),
    StorageCategory.BLOB: CategoryFlags(is_blob=True),
    StorageCategory.JSON: CategoryFlags(is_json=True),
    StorageCategory.UNKNOWN: CategoryFlags(is_null=True),
}


# ============================================================================
# CLASSIFICATION
# ============================================================================

def storage_tag(source_type: str) -> str:
    """
    Fold a semantic type name into its storage tag.

    Args:
        source_type: Semantic type from the model builder

    Returns:
        Lower-cased storage tag (unrecognized names are returned lower-cased)
    """
    tag = (source_type or "").strip().lower()
    return TYPE_MAP.get(tag, tag)


def classify(source_type: str, data_format: Optional[str] = None) -> StorageCategory:
    """
    Map a semantic type to its storage category.

    data_format is accepted for the int32/int64 and float/double split
    but does not change the category today.

    Args:
        source_type: Semantic type tag (case-insensitive)
        data_format: Optional format modifier

    Returns:
        StorageCategory, UNKNOWN when the type is not recognized
    """
    return CATEGORY_MAP.get(storage_tag(source_type), StorageCategory.UNKNOWN)


def physical_type(category: StorageCategory) -> PhysicalType:
    """Map a storage category to the SQLite type a column is declared with."""
    return PHYSICAL_TYPE_MAP[category]


def category_flags(category: StorageCategory) -> CategoryFlags:
    """Flag set mirroring a storage category."""
    return _FLAGS[category]


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'TYPE_MAP',
    'CATEGORY_MAP',
    'PHYSICAL_TYPE_MAP',
    'storage_tag',
    'classify',
    'physical_type',
    'category_flags',
]

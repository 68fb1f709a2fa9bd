# ============================================================================
# DEFAULT VALUE RESOLVER
# ============================================================================
# STATUS: Core - Column NOT NULL / DEFAULT resolution
# PURPOSE: Decide, per storage category, whether a default may be expressed
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: resolve_default, DefaultResolution, DefaultErrorKind
# DEPENDENCIES: core.contracts, core.schema.type_classifier
# ============================================================================
"""
Default Value Resolver

    required          -> NOT NULL, no default computed
    raw is None/NULL  -> nullable, DEFAULT NULL (resolved under UNKNOWN)
    BLOB / JSON       -> DEFAULT_NOT_SUPPORTED error in the result
    UNKNOWN           -> nullable, DEFAULT NULL
    primitive         -> nullable, raw literal passed through unchanged

A rejected default is a result, not an exception: the caller logs it and
carries on with a null default.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.contracts import StorageCategory
from core.models.definitions import ColumnDefault
from core.schema.type_classifier import category_flags


class DefaultErrorKind(str, Enum):
    """Why a default could not be resolved."""
    DEFAULT_NOT_SUPPORTED = "default_not_supported"


@dataclass(frozen=True)
class DefaultResolution:
    """
    Outcome of default resolution.

    error is None on success. On DEFAULT_NOT_SUPPORTED, default is None
    and message explains which category refused it.
    """
    not_null: bool
    default: Optional[ColumnDefault] = None
    error: Optional[DefaultErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


NULL_LITERAL = "NULL"


def null_default() -> ColumnDefault:
    """The storage-level NULL default."""
    return ColumnDefault(
        value=NULL_LITERAL,
        category=StorageCategory.UNKNOWN,
        flags=category_flags(StorageCategory.UNKNOWN),
    )


def resolve_default(
    required: bool,
    raw_default: Optional[str],
    category: StorageCategory,
) -> DefaultResolution:
    """
    Resolve nullability and the DEFAULT literal for a column.

    Args:
        required: Property is required by the model
        raw_default: Default as authored, or None
        category: Storage category of the column

    Returns:
        DefaultResolution
    """
    if required:
        return DefaultResolution(not_null=True)

    if raw_default is None or raw_default.upper() == NULL_LITERAL:
        return DefaultResolution(not_null=False, default=null_default())

    if not category.accepts_default():
        return DefaultResolution(
            not_null=False,
            error=DefaultErrorKind.DEFAULT_NOT_SUPPORTED,
            message=f"The BLOB and JSON data types cannot be assigned a default value "
                    f"(got '{raw_default}' for a {category.value} column)",
        )

    if category is StorageCategory.UNKNOWN:
        return DefaultResolution(not_null=False, default=null_default())

    return DefaultResolution(
        not_null=False,
        default=ColumnDefault(
            value=raw_default,
            category=category,
            flags=category_flags(category),
        ),
    )


__all__ = [
    "DefaultErrorKind",
    "DefaultResolution",
    "NULL_LITERAL",
    "null_default",
    "resolve_default",
]

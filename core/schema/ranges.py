# ============================================================================
# RANGE NORMALIZERS
# ============================================================================
# STATUS: Core - Numeric and length bound resolution
# PURPOSE: Turn raw min/max constraints into ordered column bounds
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: NumericRange, LengthRange, normalize_numeric_range, normalize_length_range
# DEPENDENCIES: core.contracts, core.logging
# ============================================================================
"""
Range Normalizers

Numeric (Integer / Real / Decimal):
    1. Parse bounds; a missing bound takes the representation's extreme.
       Integer bounds must fit in int64, Real/Decimal bounds must be finite.
    2. exclusiveMinimum: +1, exclusiveMaximum: -1 (same unit for floats).
       An Integer bound pushed past int64 by this step is clamped and reported.
    3. Swap-correct: lower = min(a, b), upper = max(a, b), always.
    4. Integer only: unsigned = lower >= 0.

Length (Text / Blob):
    Defaults 0 / MAX_LENGTH, same swap-correction. Bounds equal to the
    defaults are dropped from the result.

Malformed numeric strings raise ValueError from int()/float() untouched;
out-of-range and non-finite bounds raise ValueError as well.
"""

import math
import sys
from dataclasses import dataclass
from typing import Optional, Union

from core.contracts import StorageCategory
from core.logging import ComponentType, get_logger

logger = get_logger(__name__, ComponentType.NORMALIZER)


# ============================================================================
# REPRESENTATION LIMITS
# ============================================================================

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
REAL_MIN = -sys.float_info.max
REAL_MAX = sys.float_info.max
MAX_LENGTH = 2 ** 31 - 1

Number = Union[int, float]


@dataclass(frozen=True)
class NumericRange:
    """Resolved numeric bounds. unsigned is None outside the Integer category."""
    minimum: Number
    maximum: Number
    unsigned: Optional[bool] = None


@dataclass(frozen=True)
class LengthRange:
    """Resolved length bounds; None means the bound is the default and is omitted."""
    minimum: Optional[int] = None
    maximum: Optional[int] = None


# ============================================================================
# NUMERIC
# ============================================================================

def _parse_bound(raw: str, category: StorageCategory) -> Number:
    """Parse one raw bound, rejecting values the column type cannot hold."""
    if category is StorageCategory.INTEGER:
        value = int(raw)
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"Bound '{raw}' does not fit in a 64-bit integer")
        return value
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"Bound '{raw}' is not a finite number")
    return value


def _clamp_int64(value: int) -> int:
    clamped = max(INT64_MIN, min(INT64_MAX, value))
    if clamped != value:
        logger.warning(f"Exclusive bound {value} is out of the 64-bit integer range, {clamped} used instead")
    return clamped


def normalize_numeric_range(
    category: StorageCategory,
    minimum: Optional[str] = None,
    maximum: Optional[str] = None,
    exclusive_minimum: bool = False,
    exclusive_maximum: bool = False,
) -> NumericRange:
    """
    Resolve numeric bounds for an Integer, Real or Decimal column.

    Args:
        category: Storage category (must be numeric)
        minimum: Raw minimum, numeric-parseable string
        maximum: Raw maximum, numeric-parseable string
        exclusive_minimum: Minimum itself is not allowed
        exclusive_maximum: Maximum itself is not allowed

    Returns:
        NumericRange with minimum <= maximum

    Raises:
        ValueError: category is not numeric, or a bound is malformed,
            out of the int64 range (Integer) or not finite (Real/Decimal)
    """
    if not category.is_numeric():
        raise ValueError(f"Numeric range does not apply to {category.value} columns")

    if category is StorageCategory.INTEGER:
        lowest, highest = INT64_MIN, INT64_MAX
    else:
        lowest, highest = REAL_MIN, REAL_MAX

    cmin = _parse_bound(minimum, category) if minimum is not None else None
    cmax = _parse_bound(maximum, category) if maximum is not None else None

    if exclusive_minimum and cmin is not None:
        cmin += 1
    if exclusive_maximum and cmax is not None:
        cmax -= 1

    low = cmin if cmin is not None else lowest
    high = cmax if cmax is not None else highest

    # min and max are sometimes authored in reverse, or only one is given at an odd polarity
    actual_min = min(low, high)
    actual_max = max(low, high)

    if category is StorageCategory.INTEGER:
        actual_min = _clamp_int64(actual_min)
        actual_max = _clamp_int64(actual_max)
        return NumericRange(actual_min, actual_max, unsigned=actual_min >= 0)

    return NumericRange(actual_min, actual_max)


# ============================================================================
# LENGTH
# ============================================================================

def normalize_length_range(
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> LengthRange:
    """
    Resolve length bounds for a Text or Blob column.

    Args:
        min_length: Raw minLength
        max_length: Raw maxLength

    Returns:
        LengthRange; a bound equal to 0 / MAX_LENGTH comes back as None
    """
    low = min_length if min_length is not None else 0
    high = max_length if max_length is not None else MAX_LENGTH

    actual_min = min(low, high)
    actual_max = max(low, high)

    return LengthRange(
        minimum=actual_min if actual_min != 0 else None,
        maximum=actual_max if actual_max != MAX_LENGTH else None,
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "REAL_MIN",
    "REAL_MAX",
    "MAX_LENGTH",
    "NumericRange",
    "LengthRange",
    "normalize_numeric_range",
    "normalize_length_range",
]

"""Normalization of numeric columns to visual scale factors.

A column of measurements is rescaled linearly into ``[lo, hi]`` so that
each value can drive one proportion of a glyph. Missing values never
raise: they fall back to ``lo``, and a constant column maps entirely to
the midpoint of the range.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_SCALE_MIN = 0.7
DEFAULT_SCALE_MAX = 1.3

# Text values that mean "no measurement"
MISSING_TOKENS = frozenset({"", "NA", "NaN", "nan", "None"})


def is_missing(value: Any) -> bool:
    """True if ``value`` is a missing observation (None, NaN, NA token)."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() in MISSING_TOKENS
    if isinstance(value, float):
        return not math.isfinite(value)
    return False


def to_float(value: Any) -> float:
    """Coerce a raw cell to float, with NaN for missing or unparsable values."""
    if is_missing(value):
        return math.nan
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("non_numeric_value", value=repr(value))
        return math.nan
    return result if math.isfinite(result) else math.nan


def normalize(
    values: Sequence[Any],
    lo: float = DEFAULT_SCALE_MIN,
    hi: float = DEFAULT_SCALE_MAX,
) -> list[float]:
    """Rescale a column linearly into ``[lo, hi]``.

    Args:
        values: Raw column values. None, NaN and NA tokens count as missing.
        lo: Scale factor assigned to the column minimum.
        hi: Scale factor assigned to the column maximum. ``lo > hi`` is
            accepted and inverts the mapping.

    Returns:
        List of scale factors, one per input value:
        - every position is ``lo`` when all values are missing
        - every position is ``(lo + hi) / 2`` when the non-missing values
          are all equal
        - otherwise missing positions get ``lo`` and the rest are mapped
          linearly from ``[min, max]``
    """
    arr = np.array([to_float(v) for v in values], dtype=float)
    if arr.size == 0:
        return []

    present = ~np.isnan(arr)
    if not present.any():
        return [float(lo)] * arr.size

    v_min = float(np.min(arr[present]))
    v_max = float(np.max(arr[present]))
    if v_max == v_min:
        return [(lo + hi) / 2] * arr.size

    if math.isfinite(v_max - v_min):
        t = (arr - v_min) / (v_max - v_min)
    else:
        # Span overflows near the float limits; halved operands stay finite
        t = (arr / 2 - v_min / 2) / (v_max / 2 - v_min / 2)
    scaled = lo + t * (hi - lo)
    scaled[~present] = lo
    return [float(s) for s in scaled]

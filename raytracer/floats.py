"""Floating-point tolerance and rounding helpers shared by the value types."""

from __future__ import annotations

from typing import Union

import numpy as np

# Absolute tolerance used by every equality test on matrices and tuples
EPSILON = 0.001

# Decimal places kept after matrix products and inversion
ROUNDING_PLACES = 5


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Check that two floats differ by at most ``epsilon`` (absolute)."""
    return abs(a - b) <= epsilon


def round_half_away(
    value: Union[float, np.ndarray], places: int = ROUNDING_PLACES
) -> Union[float, np.ndarray]:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    Python's built-in ``round`` and ``np.round`` round ties to even, which
    gives different results on exact halves (``round(0.5) == 0``). Matrix
    products and inverses must round ties away from zero.

    Works entrywise on arrays. Entries that are not finite, or too large
    to scale without overflowing, are returned unchanged.

    Args:
        value: Number or array to round
        places: Number of decimal places to keep

    Returns:
        Rounded value, a float for scalar input
    """
    scale = 10.0 ** places
    value = np.asarray(value, dtype=np.float64)

    with np.errstate(over="ignore", invalid="ignore"):
        scaled = np.abs(value) * scale
        rounded = np.copysign(np.floor(scaled + 0.5), value) / scale
    result = np.where(np.isfinite(scaled), rounded, value)

    if result.ndim == 0:
        return float(result)
    return result

"""Quantile estimation by linear interpolation between closest ranks."""

from __future__ import annotations

import math
from typing import Sequence

QUARTILES = (0.25, 0.5, 0.75)


def quantile(sorted_values: Sequence[float], p: float) -> float:
    """Return the ``p``-quantile of an ascending sample.

    Uses the R-7 convention: with ``h = (n - 1) * p`` the result interpolates
    linearly between ``sorted_values[floor(h)]`` and the next rank. ``p`` is
    clamped to ``[0, 1]``, so ``p <= 0`` yields the minimum and ``p >= 1`` the
    maximum.

    Args:
        sorted_values: Non-empty sample, already sorted ascending.
        p: Probability in ``[0, 1]``.

    Returns:
        The interpolated quantile as a float.
    """
    n = len(sorted_values)
    if n == 0:
        raise ValueError("Cannot compute a quantile of an empty sample.")
    if math.isnan(p):
        raise ValueError("Quantile probability must be a number, received NaN.")

    if p <= 0 or n == 1:
        return float(sorted_values[0])
    if p >= 1:
        return float(sorted_values[-1])

    h = (n - 1) * p
    lower = math.floor(h)
    fraction = h - lower
    value0 = float(sorted_values[lower])
    if fraction == 0:
        return value0

    value1 = float(sorted_values[lower + 1])
    gap = value1 - value0
    if math.isfinite(gap):
        interpolated = value0 + fraction * gap
    else:
        # The gap overflows for ranks near +/-float max; weight the endpoints instead.
        interpolated = value0 * (1 - fraction) + value1 * fraction
    # Rounding must not push the estimate outside its bracketing ranks.
    return min(max(interpolated, value0), value1)


__all__ = ["QUARTILES", "quantile"]

"""Domain reducers used when preparing chart series."""

from __future__ import annotations

from typing import Iterable, Tuple, TypeVar

import numpy as np

OrderedT = TypeVar("OrderedT")


def extent(values: Iterable[OrderedT]) -> Tuple[OrderedT, OrderedT]:
    """Return ``(minimum, maximum)`` of any orderable values such as floats or dates."""
    items = list(values)
    if not items:
        raise ValueError("Cannot compute the extent of an empty sequence.")
    return min(items), max(items)  # type: ignore[type-var]


def maximum(values: Iterable[float]) -> float:
    """Return the largest finite value, rejecting empty or non-finite input."""
    array = np.asarray(list(values), dtype=float)
    if array.size == 0:
        raise ValueError("Cannot compute the maximum of an empty sequence.")
    if not np.all(np.isfinite(array)):
        raise ValueError("Values contain non-finite entries.")
    return float(array.max())


__all__ = ["extent", "maximum"]

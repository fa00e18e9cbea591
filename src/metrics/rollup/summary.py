"""Five-number summaries computed by an explicit partition-then-reduce pass."""

from __future__ import annotations

from typing import Dict, Iterable

import numpy as np

from src.datahub.records import Observation
from src.metrics.quantile import QUARTILES, quantile

from .grouping import partition_by_group
from .records import GroupSummary


def five_number_summary(values: Iterable[float]) -> GroupSummary:
    """Summarize a single non-empty sample as min, quartiles and max."""
    ordered = np.sort(np.asarray(list(values), dtype=float))
    if ordered.ndim != 1 or ordered.size == 0:
        raise ValueError("A five-number summary needs at least one value.")
    if not np.all(np.isfinite(ordered)):
        raise ValueError("Values contain non-finite entries.")

    q1, median, q3 = (quantile(ordered, p) for p in QUARTILES)
    return GroupSummary(
        minimum=float(ordered[0]),
        q1=q1,
        median=median,
        q3=q3,
        maximum=float(ordered[-1]),
    )


def summarize(observations: Iterable[Observation]) -> Dict[str, GroupSummary]:
    """Compute one GroupSummary per label present in ``observations``.

    Labels that never occur are absent from the result; an empty input yields an
    empty mapping. Order follows the first appearance of each label.
    """
    groups = partition_by_group(observations)
    return {group: five_number_summary(values) for group, values in groups.items()}

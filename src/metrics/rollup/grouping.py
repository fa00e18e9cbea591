from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from src.datahub.records import Observation


def partition_by_group(observations: Iterable[Observation]) -> Dict[str, List[float]]:
    """Group observation values by label, keeping labels in first-appearance order."""
    groups: Dict[str, List[float]] = defaultdict(list)
    for observation in observations:
        groups[observation.group].append(observation.value)
    return dict(groups)

"""Shared data records for the per-group statistics rollup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class GroupSummary:
    """Five-number summary of one group's values."""

    minimum: float
    q1: float
    median: float
    q3: float
    maximum: float

    def __post_init__(self) -> None:
        if not self.minimum <= self.q1 <= self.median <= self.q3 <= self.maximum:
            raise ValueError(
                "GroupSummary requires min <= q1 <= median <= q3 <= max, received "
                f"{self.minimum}, {self.q1}, {self.median}, {self.q3}, {self.maximum}."
            )

    def as_dict(self) -> Dict[str, float]:
        return {
            "min": self.minimum,
            "q1": self.q1,
            "median": self.median,
            "q3": self.q3,
            "max": self.maximum,
        }

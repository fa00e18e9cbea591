"""Per-group statistics rollup feeding boxplot summaries."""

from .grouping import partition_by_group
from .records import GroupSummary
from .summary import five_number_summary, summarize

__all__ = [
    "GroupSummary",
    "five_number_summary",
    "partition_by_group",
    "summarize",
]

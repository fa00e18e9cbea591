"""Export utilities for experiment results."""

from .save_config import ExportDestinations, ExportSaveConfig
from .tables import export_group_summaries, export_grouped_bars, export_time_series

__all__ = [
    "export_group_summaries",
    "export_grouped_bars",
    "export_time_series",
    "ExportDestinations",
    "ExportSaveConfig",
]

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Optional, Sequence

import pandas as pd

DATASET_HINT = (
    "Hint: expected the {dataset} export under {path}. "
    "Pass --csv with the correct location or copy the file into the data directory."
)


def clean_label(value: Any) -> Optional[str]:
    """Return a stripped category label, or None when the cell is blank."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    label = str(value).strip()
    return label or None


def to_float(value: Any) -> Optional[float]:
    """Convert a CSV cell to a finite float, returning None for anything else."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_day(value: Any, date_format: str) -> Optional[date]:
    """Parse the leading date token of a cell such as ``"3/1/2024 (Friday)"``."""
    label = clean_label(value)
    if label is None:
        return None
    token = label.split()[0]
    try:
        return datetime.strptime(token, date_format).date()
    except ValueError:
        return None


def require_columns(frame: pd.DataFrame, columns: Sequence[str], source: str) -> None:
    """Raise when ``frame`` lacks any of the requested columns."""
    missing = [column for column in columns if column not in frame.columns]
    if missing:
        available = ", ".join(str(column) for column in frame.columns) or "<none>"
        raise ValueError(
            f"{source} is missing required column(s): {', '.join(missing)}. Available: {available}"
        )

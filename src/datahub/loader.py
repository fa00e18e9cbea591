from __future__ import annotations

from pathlib import Path
from typing import Iterator, Sequence

import pandas as pd

from .config import SOCIAL_MEDIA, SOCIAL_MEDIA_AVG, SOCIAL_MEDIA_TIME
from .helpers import DATASET_HINT, clean_label, parse_day, require_columns, to_float
from .records import DatedAverage, Observation, PlatformAverage


def _read_frame(path: Path, columns: Sequence[str], dataset: str) -> pd.DataFrame:
    """Read a CSV as strings and make sure the requested columns exist."""
    path = Path(path)
    if not path.exists():
        hint = DATASET_HINT.format(dataset=dataset, path=path)
        raise FileNotFoundError(f"Missing CSV file {path}.\n\n{hint}")
    frame = pd.read_csv(path, dtype=str, skipinitialspace=True)
    frame.columns = [str(column).strip() for column in frame.columns]
    require_columns(frame, columns, source=str(path))
    return frame


def _report(dataset: str, kept: int, skipped: int) -> None:
    message = f"[datahub] Loaded {kept} {dataset} rows"
    if skipped:
        message += f" (skipped {skipped} malformed)"
    print(message)


def load_observations(
    path: Path,
    group_column: str = SOCIAL_MEDIA["group_column"],
    value_column: str = SOCIAL_MEDIA["value_column"],
) -> Iterator[Observation]:
    """Yield grouped observations, dropping rows without a label or numeric value."""
    frame = _read_frame(path, (group_column, value_column), SOCIAL_MEDIA["file_name"])

    kept = skipped = 0
    for row in frame.to_dict(orient="records"):
        group = clean_label(row.get(group_column))
        value = to_float(row.get(value_column))
        if group is None or value is None:
            skipped += 1
            continue
        kept += 1
        yield Observation(group=group, value=value)
    _report(SOCIAL_MEDIA["file_name"], kept, skipped)


def load_platform_averages(
    path: Path,
    platform_column: str = SOCIAL_MEDIA_AVG["platform_column"],
    post_type_column: str = SOCIAL_MEDIA_AVG["post_type_column"],
    value_column: str = SOCIAL_MEDIA_AVG["value_column"],
) -> Iterator[PlatformAverage]:
    """Yield per-platform, per-post-type average like counts."""
    frame = _read_frame(
        path,
        (platform_column, post_type_column, value_column),
        SOCIAL_MEDIA_AVG["file_name"],
    )

    kept = skipped = 0
    for row in frame.to_dict(orient="records"):
        platform = clean_label(row.get(platform_column))
        post_type = clean_label(row.get(post_type_column))
        value = to_float(row.get(value_column))
        if platform is None or post_type is None or value is None:
            skipped += 1
            continue
        kept += 1
        yield PlatformAverage(platform=platform, post_type=post_type, avg_likes=value)
    _report(SOCIAL_MEDIA_AVG["file_name"], kept, skipped)


def load_dated_averages(
    path: Path,
    date_column: str = SOCIAL_MEDIA_TIME["date_column"],
    value_column: str = SOCIAL_MEDIA_TIME["value_column"],
    date_format: str = SOCIAL_MEDIA_TIME["date_format"],
) -> Iterator[DatedAverage]:
    """Yield daily averages; only the leading date token of each cell is parsed."""
    frame = _read_frame(path, (date_column, value_column), SOCIAL_MEDIA_TIME["file_name"])

    kept = skipped = 0
    for row in frame.to_dict(orient="records"):
        raw_date = clean_label(row.get(date_column))
        day = parse_day(raw_date, date_format)
        value = to_float(row.get(value_column))
        if raw_date is None or day is None or value is None:
            skipped += 1
            continue
        kept += 1
        yield DatedAverage(day=day, avg_likes=value, raw_date=raw_date)
    _report(SOCIAL_MEDIA_TIME["file_name"], kept, skipped)

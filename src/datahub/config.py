"""Static configuration for the social-media CSV datasets."""

from __future__ import annotations

from pathlib import Path
from typing import TypedDict


class LikesConfig(TypedDict):
    file_name: str
    group_column: str
    value_column: str


class PlatformAvgConfig(TypedDict):
    file_name: str
    platform_column: str
    post_type_column: str
    value_column: str


class TimeSeriesConfig(TypedDict):
    file_name: str
    date_column: str
    value_column: str
    date_format: str


# Default directories used by the Typer CLI; callers may override these.
DEFAULT_DATA_ROOT = Path("data")
DEFAULT_EXPORT_ROOT = Path("exports")

# ---------------------------------------------------------------------------
# Dataset-specific configuration payloads.

SOCIAL_MEDIA: LikesConfig = {
    "file_name": "socialMedia.csv",
    "group_column": "AgeGroup",
    "value_column": "Likes",
}

SOCIAL_MEDIA_AVG: PlatformAvgConfig = {
    "file_name": "socialMediaAvg.csv",
    "platform_column": "Platform",
    "post_type_column": "PostType",
    "value_column": "AvgLikes",
}

SOCIAL_MEDIA_TIME: TimeSeriesConfig = {
    "file_name": "socialMediaTime.csv",
    "date_column": "Date",
    "value_column": "AvgLikes",
    "date_format": "%m/%d/%Y",
}


__all__ = [
    "DEFAULT_DATA_ROOT",
    "DEFAULT_EXPORT_ROOT",
    "SOCIAL_MEDIA",
    "SOCIAL_MEDIA_AVG",
    "SOCIAL_MEDIA_TIME",
    "LikesConfig",
    "PlatformAvgConfig",
    "TimeSeriesConfig",
]

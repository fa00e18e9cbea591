"""Tests for export destinations and table writers."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
import sys

import pandas as pd
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from experiments.exports import (
    ExportSaveConfig,
    export_group_summaries,
    export_grouped_bars,
    export_time_series,
)
from experiments.exports.tables import grouped_bars_frame
from src.datahub.records import DatedAverage, Observation, PlatformAverage
from src.metrics.rollup import summarize
from src.series import build_grouped_bars, build_time_series


def test_save_config_resolves_paths(tmp_path: Path) -> None:
    config = ExportSaveConfig(base_dir=tmp_path / "boxplot", run_tag="run1", save_json=False)
    dest = config.for_export("group_summaries")
    assert dest.directory == tmp_path / "boxplot" / "run1"
    assert dest.csv_path.name == "group_summaries.csv"
    assert dest.json_path.name == "group_summaries.json"
    assert dest.save_csv and not dest.save_json


def test_export_group_summaries_writes_csv_and_json(tmp_path: Path) -> None:
    summaries = summarize(
        [Observation("A", value) for value in (1.0, 2.0, 3.0, 4.0)] + [Observation("B", 9.0)]
    )
    dest = ExportSaveConfig(base_dir=tmp_path, run_tag="tag").for_export("group_summaries")
    export_group_summaries(summaries, save_to=dest)

    frame = pd.read_csv(dest.csv_path)
    assert list(frame.columns) == ["group", "min", "q1", "median", "q3", "max"]
    assert frame["group"].tolist() == ["A", "B"]
    assert frame.loc[0, "median"] == pytest.approx(2.5)

    payload = json.loads(dest.json_path.read_text())
    assert payload[1] == {"group": "B", "min": 9.0, "q1": 9.0, "median": 9.0, "q3": 9.0, "max": 9.0}


def test_export_respects_disabled_formats(tmp_path: Path) -> None:
    summaries = summarize([Observation("A", 1.0)])
    dest = ExportSaveConfig(base_dir=tmp_path, run_tag="tag", save_csv=False).for_export("only_json")
    export_group_summaries(summaries, save_to=dest)
    assert not dest.csv_path.exists()
    assert dest.json_path.exists()


def test_export_without_destination_prints(capsys: pytest.CaptureFixture[str]) -> None:
    export_group_summaries(summarize([Observation("18-24", 5.0)]))
    out = capsys.readouterr().out
    assert "18-24" in out
    assert "median" in out


def test_export_empty_summaries_writes_header_only_table(tmp_path: Path) -> None:
    dest = ExportSaveConfig(base_dir=tmp_path, run_tag="tag").for_export("group_summaries")
    export_group_summaries({}, save_to=dest)

    frame = pd.read_csv(dest.csv_path)
    assert list(frame.columns) == ["group", "min", "q1", "median", "q3", "max"]
    assert frame.empty
    assert json.loads(dest.json_path.read_text()) == []


def test_destinations_write_reports_written_files(tmp_path: Path) -> None:
    dest = ExportSaveConfig(base_dir=tmp_path, run_tag="tag", save_json=False).for_export("table")
    written = dest.write(pd.DataFrame({"a": [1, 2]}))
    assert written == [tmp_path / "tag" / "table.csv"]
    assert pd.read_csv(written[0])["a"].tolist() == [1, 2]


def test_for_run_groups_by_dataset_and_defaults_tag(tmp_path: Path) -> None:
    tagged = ExportSaveConfig.for_run(tmp_path, "boxplot", run_tag="run1")
    assert tagged.run_dir == tmp_path / "boxplot" / "run1"

    untagged = ExportSaveConfig.for_run(tmp_path, "boxplot")
    assert untagged.base_dir == tmp_path / "boxplot"
    assert len(untagged.run_tag) == len("20240301-120000")


def test_for_run_requires_a_format(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ExportSaveConfig.for_run(tmp_path, "boxplot", save_csv=False, save_json=False)


def test_grouped_bars_frame_skips_missing_pairs() -> None:
    bars = build_grouped_bars(
        [PlatformAverage("Facebook", "Image", 10.0), PlatformAverage("Twitter", "Link", 4.0)]
    )
    frame = grouped_bars_frame(bars)
    assert frame.to_dict(orient="records") == [
        {"platform": "Facebook", "post_type": "Image", "avg_likes": 10.0},
        {"platform": "Twitter", "post_type": "Link", "avg_likes": 4.0},
    ]


def test_export_series_tables(tmp_path: Path) -> None:
    config = ExportSaveConfig(base_dir=tmp_path, run_tag="tag", save_json=False)
    export_grouped_bars(
        build_grouped_bars([PlatformAverage("Facebook", "Image", 10.0)]),
        save_to=config.for_export("platform_averages"),
    )
    export_time_series(
        build_time_series([DatedAverage(date(2024, 3, 1), 7.0, "3/1/2024 (Friday)")]),
        save_to=config.for_export("daily_averages"),
    )

    daily = pd.read_csv(tmp_path / "tag" / "daily_averages.csv")
    assert daily["date"].tolist() == ["2024-03-01"]
    assert (tmp_path / "tag" / "platform_averages.csv").exists()

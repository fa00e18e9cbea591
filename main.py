from pathlib import Path
from typing import Optional

import typer

from experiments.exports import (
    ExportSaveConfig,
    export_group_summaries,
    export_grouped_bars,
    export_time_series,
)
from experiments.social_media import run_boxplot_stats, run_grouped_bars, run_time_series
from src.datahub.config import (
    DEFAULT_DATA_ROOT,
    SOCIAL_MEDIA,
    SOCIAL_MEDIA_AVG,
    SOCIAL_MEDIA_TIME,
)

app = typer.Typer()

EXPORT_ROOT_OPTION = typer.Option(
    None,
    "--export-root",
    file_okay=False,
    dir_okay=True,
    writable=True,
    help="Directory where tables should be saved (prints to stdout when omitted).",
)
EXPORT_TAG_OPTION = typer.Option(None, "--export-tag", help="Folder suffix for this run (defaults to timestamp).")
SAVE_CSV_OPTION = typer.Option(True, "--save-csv/--no-save-csv", help="Write CSV tables when saving.")
SAVE_JSON_OPTION = typer.Option(True, "--save-json/--no-save-json", help="Write JSON tables when saving.")


def _save_config(
    export_root: Optional[Path],
    export_tag: Optional[str],
    dataset: str,
    save_csv: bool,
    save_json: bool,
) -> Optional[ExportSaveConfig]:
    if not export_root:
        return None
    try:
        config = ExportSaveConfig.for_run(
            export_root, dataset, run_tag=export_tag, save_csv=save_csv, save_json=save_json
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    print(f"[exports] Saving tables under {config.run_dir}")
    return config


@app.command("boxplot-stats")
def boxplot_stats(
    csv: Path = typer.Option(
        DEFAULT_DATA_ROOT / SOCIAL_MEDIA["file_name"],
        "--csv",
        dir_okay=False,
        help="Per-post CSV with a group label and a like count.",
    ),
    group_column: str = typer.Option(SOCIAL_MEDIA["group_column"], "--group-column", help="Column holding group labels."),
    value_column: str = typer.Option(SOCIAL_MEDIA["value_column"], "--value-column", help="Numeric column to summarize."),
    export_root: Optional[Path] = EXPORT_ROOT_OPTION,
    export_tag: Optional[str] = EXPORT_TAG_OPTION,
    save_csv: bool = SAVE_CSV_OPTION,
    save_json: bool = SAVE_JSON_OPTION,
) -> None:
    """
    Compute min, quartiles and max of the value column for every observed group.
    """
    try:
        summaries = run_boxplot_stats(csv, group_column=group_column, value_column=value_column)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    save_config = _save_config(export_root, export_tag, "boxplot", save_csv, save_json)
    export_group_summaries(
        summaries,
        save_to=save_config.for_export("group_summaries") if save_config else None,
    )


@app.command("grouped-bars")
def grouped_bars(
    csv: Path = typer.Option(
        DEFAULT_DATA_ROOT / SOCIAL_MEDIA_AVG["file_name"],
        "--csv",
        dir_okay=False,
        help="CSV of average likes per platform and post type.",
    ),
    export_root: Optional[Path] = EXPORT_ROOT_OPTION,
    export_tag: Optional[str] = EXPORT_TAG_OPTION,
    save_csv: bool = SAVE_CSV_OPTION,
    save_json: bool = SAVE_JSON_OPTION,
) -> None:
    """
    Arrange platform averages into the platform x post type layout of a grouped bar chart.
    """
    try:
        bars = run_grouped_bars(csv)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    save_config = _save_config(export_root, export_tag, "grouped_bars", save_csv, save_json)
    export_grouped_bars(bars, save_to=save_config.for_export("platform_averages") if save_config else None)


@app.command("time-series")
def time_series(
    csv: Path = typer.Option(
        DEFAULT_DATA_ROOT / SOCIAL_MEDIA_TIME["file_name"],
        "--csv",
        dir_okay=False,
        help="CSV of average likes per date.",
    ),
    date_format: str = typer.Option(
        SOCIAL_MEDIA_TIME["date_format"],
        "--date-format",
        help="strptime format applied to the leading token of the date column.",
    ),
    export_root: Optional[Path] = EXPORT_ROOT_OPTION,
    export_tag: Optional[str] = EXPORT_TAG_OPTION,
    save_csv: bool = SAVE_CSV_OPTION,
    save_json: bool = SAVE_JSON_OPTION,
) -> None:
    """
    Order daily averages by date and report the date and value domains.
    """
    try:
        series = run_time_series(csv, date_format=date_format)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    save_config = _save_config(export_root, export_tag, "time_series", save_csv, save_json)
    export_time_series(series, save_to=save_config.for_export("daily_averages") if save_config else None)


if __name__ == "__main__":
    app()

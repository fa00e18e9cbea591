"""Run-folder layout and writers for exported tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import pandas as pd

RUN_TAG_FORMAT = "%Y%m%d-%H%M%S"


@dataclass(frozen=True)
class ExportDestinations:
    """Where one table lands and which formats it is written in."""

    directory: Path
    slug: str
    save_csv: bool
    save_json: bool

    @property
    def csv_path(self) -> Path:
        return self.directory / f"{self.slug}.csv"

    @property
    def json_path(self) -> Path:
        return self.directory / f"{self.slug}.json"

    def write(self, df: pd.DataFrame) -> List[Path]:
        """Write ``df`` in every enabled format; header-only files are written for empty frames."""
        self.directory.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        if self.save_csv:
            df.to_csv(str(self.csv_path), index=False)
            written.append(self.csv_path)
        if self.save_json:
            df.to_json(str(self.json_path), orient="records", indent=2)
            written.append(self.json_path)
        return written


@dataclass(frozen=True)
class ExportSaveConfig:
    """One export run: ``<base_dir>/<run_tag>/<slug>.{csv,json}``."""

    base_dir: Path
    run_tag: str
    save_csv: bool = True
    save_json: bool = True

    @classmethod
    def for_run(
        cls,
        export_root: Path,
        dataset: str,
        run_tag: Optional[str] = None,
        save_csv: bool = True,
        save_json: bool = True,
    ) -> "ExportSaveConfig":
        """Group runs by dataset; an omitted tag becomes the current UTC timestamp."""
        if not (save_csv or save_json):
            raise ValueError("Enable at least one export format (CSV or JSON).")
        tag = run_tag or datetime.now(timezone.utc).strftime(RUN_TAG_FORMAT)
        return cls(base_dir=Path(export_root) / dataset, run_tag=tag, save_csv=save_csv, save_json=save_json)

    @property
    def run_dir(self) -> Path:
        return self.base_dir / self.run_tag

    def for_export(self, slug: str) -> ExportDestinations:
        return ExportDestinations(
            directory=self.run_dir,
            slug=slug,
            save_csv=self.save_csv,
            save_json=self.save_json,
        )


__all__ = ["ExportSaveConfig", "ExportDestinations", "RUN_TAG_FORMAT"]

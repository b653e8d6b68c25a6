"""Application configuration resolved once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from src.config.constants import (
    BACKUP_FILE,
    CSV_FILE,
    DATA_DIR_ENVVAR,
    DATA_FILE,
    PARQUET_FILE,
    REPORT_FILE,
)


@dataclass(frozen=True)
class AppConfig:
    """Where the session reads and writes its files."""

    data_dir: Path

    @classmethod
    def from_data_dir(cls, data_dir: Optional[Path] = None) -> AppConfig:
        """Build a config rooted at data_dir, the environment, or the cwd."""
        if data_dir is None:
            data_dir = Path(os.environ.get(DATA_DIR_ENVVAR, "."))
        return cls(data_dir=Path(data_dir))

    @property
    def data_file(self) -> Path:
        return self.data_dir / DATA_FILE

    @property
    def report_file(self) -> Path:
        return self.data_dir / REPORT_FILE

    @property
    def csv_file(self) -> Path:
        return self.data_dir / CSV_FILE

    @property
    def parquet_file(self) -> Path:
        return self.data_dir / PARQUET_FILE

    @property
    def backup_file(self) -> Path:
        return self.data_dir / BACKUP_FILE

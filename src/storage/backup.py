"""Lightweight backup snapshot: one `number|driver|total_weight` line per truck."""

import logging
from pathlib import Path
from typing import Sequence

from src.config.constants import BACKUP_SEPARATOR
from src.fleet.truck import TruckRecord

logger = logging.getLogger(__name__)


def write_backup(path: Path, records: Sequence[TruckRecord]) -> Path:
    path = Path(path)
    lines = [
        BACKUP_SEPARATOR.join([str(r.truck_number), r.driver_name, str(r.total_weight)])
        for r in records
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    logger.debug(f"Backup of {len(records)} truck(s) written to {path}")
    return path

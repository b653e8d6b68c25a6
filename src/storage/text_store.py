"""Primary line-oriented truck store.

Layout, one value per line, repeated per truck:

    truck number
    driver name
    license plate
    destination
    empty weight (kg)
    status label
    created timestamp (YYYY-MM-DD HH:MM:SS)
    box count N
    N x (box weight, box description)

Derived fields (total weight, overload flag) are not stored; every loaded
record is passed through recompute before it is returned.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Sequence

from src.config.constants import TIMESTAMP_FORMAT
from src.fleet.status import TruckStatus
from src.fleet.truck import CargoItem, TruckRecord
from src.fleet.weight_model import recompute

logger = logging.getLogger(__name__)


class StoreFormatError(ValueError):
    """The store file does not follow the expected layout."""


def save_trucks(path: Path, records: Sequence[TruckRecord]) -> Path:
    """Write a full snapshot of the fleet. Not atomic."""
    lines: List[str] = []
    for r in records:
        lines.extend([
            str(r.truck_number),
            r.driver_name,
            r.license_plate,
            r.destination,
            str(r.empty_weight),
            r.status.label,
            r.timestamp,
            str(r.box_count),
        ])
        for item in r.cargo:
            lines.append(str(item.weight))
            lines.append(item.description)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\n" as the only record separator on every platform
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write("".join(line + "\n" for line in lines))

    logger.info(f"Saved {len(records)} truck(s) to {path}")
    return path


def load_trucks(path: Path) -> List[TruckRecord]:
    """Read the store; a missing file is an empty fleet."""
    path = Path(path)
    if not path.exists():
        logger.info(f"No store at {path}, starting with an empty fleet")
        return []

    try:
        with path.open(encoding="utf-8", newline="") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise StoreFormatError(f"{path}: not valid UTF-8 text ({exc.reason})") from exc

    reader = _LineReader(path, text)
    records = []
    while reader.has_record():
        records.append(_read_record(reader))

    logger.info(f"Loaded {len(records)} truck(s) from {path}")
    return records


def _read_record(reader: "_LineReader") -> TruckRecord:
    truck_number = reader.next_int("truck number")
    driver_name = reader.next_str("driver name")
    license_plate = reader.next_str("license plate")
    destination = reader.next_str("destination")
    empty_weight = reader.next_int("empty weight")
    status = reader.next_status()
    created_at = reader.next_timestamp()

    n_boxes = reader.next_int("box count")
    cargo = []
    for _ in range(n_boxes):
        weight = reader.next_int("box weight")
        description = reader.next_str("box description")
        cargo.append(CargoItem(weight=weight, description=description))

    record = TruckRecord(
        truck_number=truck_number,
        driver_name=driver_name,
        license_plate=license_plate,
        destination=destination,
        empty_weight=empty_weight,
        cargo=cargo,
        created_at=created_at,
        status=status,
    )
    return recompute(record)


class _LineReader:
    """Sequential line cursor that reports errors with line numbers."""

    def __init__(self, path: Path, text: str):
        self.path = path
        self.lines = text.split("\n")
        if self.lines and self.lines[-1] == "":
            self.lines.pop()
        self.pos = 0

    def has_record(self) -> bool:
        # Trailing blank lines end the store
        return any(line.strip() for line in self.lines[self.pos:])

    def next_str(self, what: str) -> str:
        if self.pos >= len(self.lines):
            raise StoreFormatError(
                f"{self.path}: unexpected end of file, expected {what}"
            )
        line = self.lines[self.pos]
        self.pos += 1
        return line

    def next_int(self, what: str) -> int:
        raw = self.next_str(what)
        try:
            value = int(raw.strip())
        except ValueError:
            raise self._error(f"expected integer {what}, got '{raw}'") from None
        if value < 0:
            raise self._error(f"{what} must be non-negative, got {value}")
        return value

    def next_status(self) -> TruckStatus:
        raw = self.next_str("status")
        try:
            return TruckStatus.parse(raw.strip())
        except ValueError as exc:
            raise self._error(str(exc)) from None

    def next_timestamp(self) -> datetime:
        raw = self.next_str("timestamp")
        try:
            return datetime.strptime(raw.strip(), TIMESTAMP_FORMAT)
        except ValueError:
            raise self._error(f"bad timestamp '{raw}'") from None

    def _error(self, message: str) -> StoreFormatError:
        # pos already points past the offending line
        return StoreFormatError(f"{self.path}:{self.pos}: {message}")

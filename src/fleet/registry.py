"""Ordered in-memory collection of truck records."""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from src.fleet.status import OPERATOR_SETTABLE, TruckStatus
from src.fleet.truck import CargoItem, TruckRecord
from src.fleet.weight_model import recompute

logger = logging.getLogger(__name__)


class TruckNotFoundError(LookupError):
    def __init__(self, truck_number: int):
        super().__init__(f"Truck #{truck_number} not found")
        self.truck_number = truck_number


class SortKey(Enum):
    WEIGHT_ASC = "weight_asc"
    WEIGHT_DESC = "weight_desc"
    DRIVER = "driver"
    CREATED = "created"


class SearchField(Enum):
    DRIVER = "driver_name"
    PLATE = "license_plate"
    DESTINATION = "destination"


class TruckRegistry:
    """Trucks in display order, numbered 1..n by position."""

    def __init__(self, records: Optional[Iterable[TruckRecord]] = None):
        self._records: List[TruckRecord] = []
        if records is not None:
            self.replace_all(records)

    def __iter__(self) -> Iterator[TruckRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    @property
    def records(self) -> List[TruckRecord]:
        return list(self._records)

    def add(
        self,
        driver_name: str,
        license_plate: str,
        destination: str,
        empty_weight: int,
        cargo: Iterable[CargoItem] = (),
    ) -> TruckRecord:
        """Register a truck with all of its cargo and derive its weight figures."""
        record = TruckRecord(
            truck_number=len(self._records) + 1,
            driver_name=driver_name,
            license_plate=license_plate,
            destination=destination,
            empty_weight=empty_weight,
        )
        record.add_cargo(cargo)
        recompute(record)
        self._records.append(record)

        logger.debug(
            f"Added truck #{record.truck_number} ({record.license_plate}): "
            f"{record.total_weight} kg, {record.status}"
        )
        return record

    def get(self, truck_number: int) -> TruckRecord:
        for record in self._records:
            if record.truck_number == truck_number:
                return record
        raise TruckNotFoundError(truck_number)

    def delete(self, truck_number: int) -> TruckRecord:
        """Remove a truck and renumber the rest densely."""
        record = self.get(truck_number)
        self._records.remove(record)
        self._renumber()
        logger.debug(f"Deleted truck #{truck_number} ({record.driver_name})")
        return record

    def set_status(self, truck_number: int, status: TruckStatus) -> TruckRecord:
        """Operator status assignment. Bypasses weight-based derivation."""
        if status not in OPERATOR_SETTABLE:
            raise ValueError(f"Status '{status}' cannot be set by the operator")
        record = self.get(truck_number)
        previous = record.status
        record.status = status
        logger.debug(f"Truck #{truck_number}: {previous} -> {status}")
        return record

    def sort(self, key: SortKey) -> None:
        """Reorder the fleet in place and renumber."""
        if key is SortKey.WEIGHT_ASC:
            self._records.sort(key=lambda r: r.total_weight)
        elif key is SortKey.WEIGHT_DESC:
            self._records.sort(key=lambda r: r.total_weight, reverse=True)
        elif key is SortKey.DRIVER:
            self._records.sort(key=lambda r: r.driver_name)
        elif key is SortKey.CREATED:
            self._records.sort(key=lambda r: r.timestamp)
        else:
            raise ValueError(f"Unknown sort key {key!r}")
        self._renumber()

    def search(self, field: SearchField, term: str) -> List[TruckRecord]:
        """Case-insensitive substring match on one text field."""
        needle = term.upper()
        return [
            r for r in self._records
            if needle in getattr(r, field.value).upper()
        ]

    def filter_by_status(self, status: TruckStatus) -> List[TruckRecord]:
        return [r for r in self._records if r.status is status]

    def replace_all(self, records: Iterable[TruckRecord]) -> None:
        self._records = list(records)
        self._renumber()

    def _renumber(self) -> None:
        for position, record in enumerate(self._records, start=1):
            record.truck_number = position

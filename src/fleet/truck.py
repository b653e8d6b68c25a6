"""Truck record and cargo item dataclasses."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List

from src.config.constants import TIMESTAMP_FORMAT
from src.fleet.status import TruckStatus


def current_timestamp() -> datetime:
    """Now, truncated to the second precision the store keeps."""
    return datetime.now().replace(microsecond=0)


@dataclass(frozen=True)
class CargoItem:
    weight: int               # kg, non-negative
    description: str


@dataclass
class TruckRecord:
    """A registered truck and its cargo.

    truck_number is a positional label (1-based index in the fleet), not a
    durable key: the registry reassigns it after every delete and sort.
    total_weight, overloaded and status are kept consistent by
    src.fleet.weight_model.recompute.
    """

    truck_number: int
    driver_name: str
    license_plate: str
    destination: str
    empty_weight: int         # kg, non-negative
    cargo: List[CargoItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=current_timestamp)
    total_weight: int = 0
    overloaded: bool = False
    status: TruckStatus = TruckStatus.PENDING

    def add_cargo(self, items: Iterable[CargoItem]) -> None:
        """Append cargo. Callers must recompute afterwards."""
        self.cargo.extend(items)

    @property
    def box_count(self) -> int:
        return len(self.cargo)

    @property
    def cargo_weight(self) -> int:
        return sum(item.weight for item in self.cargo)

    @property
    def timestamp(self) -> str:
        return self.created_at.strftime(TIMESTAMP_FORMAT)

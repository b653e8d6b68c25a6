"""Fleet-wide weight and status statistics."""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from src.fleet.status import TruckStatus
from src.fleet.truck import TruckRecord
from src.fleet.weight_model import load_percentage


@dataclass
class FleetStatistics:
    total_trucks: int
    ready: int
    near_limit: int
    overloaded: int
    pending: int
    in_transit: int
    delivered: int
    cancelled: int
    total_weight: int         # kg, sum over the fleet
    average_weight: float     # kg
    max_weight: int           # kg
    min_weight: int           # kg
    average_load_percentage: float


def compute_statistics(records: Sequence[TruckRecord]) -> Optional[FleetStatistics]:
    """Aggregate the fleet; None when there are no trucks."""
    if not records:
        return None

    weights = np.array([r.total_weight for r in records], dtype=np.int64)
    loads = np.array([load_percentage(r) for r in records], dtype=np.float64)

    counts = {status: 0 for status in TruckStatus}
    for record in records:
        counts[record.status] += 1

    return FleetStatistics(
        total_trucks=len(records),
        ready=counts[TruckStatus.READY],
        near_limit=counts[TruckStatus.NEAR_LIMIT],
        overloaded=counts[TruckStatus.OVERLOADED],
        pending=counts[TruckStatus.PENDING],
        in_transit=counts[TruckStatus.IN_TRANSIT],
        delivered=counts[TruckStatus.DELIVERED],
        cancelled=counts[TruckStatus.CANCELLED],
        total_weight=int(weights.sum()),
        average_weight=float(weights.mean()),
        max_weight=int(weights.max()),
        min_weight=int(weights.min()),
        average_load_percentage=float(loads.mean()),
    )

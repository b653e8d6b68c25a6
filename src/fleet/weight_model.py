"""Total weight, overload flag and status derivation for a truck."""

from src.config.constants import NEAR_LIMIT_THRESHOLD, WEIGHT_LIMIT
from src.fleet.status import TruckStatus
from src.fleet.truck import TruckRecord


def classify(total_weight: int) -> TruckStatus:
    """Weight-derived status for a total weight in kg."""
    if total_weight > WEIGHT_LIMIT:
        return TruckStatus.OVERLOADED
    elif total_weight >= NEAR_LIMIT_THRESHOLD:
        return TruckStatus.NEAR_LIMIT
    else:
        return TruckStatus.READY


def recompute(record: TruckRecord) -> TruckRecord:
    """Refresh the derived fields of a record in place.

    The overload flag always follows the weight. The status is re-derived
    only while it is weight-owned; In Transit, Delivered and Cancelled are
    left as the operator set them.
    """
    record.total_weight = record.empty_weight + record.cargo_weight
    record.overloaded = record.total_weight > WEIGHT_LIMIT

    if not record.status.is_sticky:
        record.status = classify(record.total_weight)

    return record


def load_percentage(record: TruckRecord) -> float:
    """Total weight as a percentage of the limit (may exceed 100)."""
    return record.total_weight * 100.0 / WEIGHT_LIMIT


def remaining_capacity(record: TruckRecord) -> int:
    """Headroom in kg; negative when overloaded."""
    return WEIGHT_LIMIT - record.total_weight


def overage(record: TruckRecord) -> int:
    return max(0, record.total_weight - WEIGHT_LIMIT)

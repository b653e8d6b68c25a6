"""Truck lifecycle status and its two categories."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class StatusCategory(Enum):
    """Who owns a status: the weight rule or the operator."""

    DERIVED = "derived"      # recomputed from weight
    OPERATOR = "operator"    # set by hand, never overwritten by recompute


class TruckStatus(Enum):
    PENDING = "Pending"
    READY = "Ready"
    NEAR_LIMIT = "Near Limit"
    OVERLOADED = "Overloaded"
    IN_TRANSIT = "In Transit"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @property
    def label(self) -> str:
        return self.value

    @property
    def category(self) -> StatusCategory:
        if self in _OPERATOR_STATUSES:
            return StatusCategory.OPERATOR
        return StatusCategory.DERIVED

    @property
    def is_sticky(self) -> bool:
        """True when recompute must leave this status untouched."""
        return self.category is StatusCategory.OPERATOR

    @classmethod
    def parse(cls, text: str) -> TruckStatus:
        """Map a stored status label back to its member."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown truck status '{text}'") from None

    def __str__(self) -> str:
        return self.value


_OPERATOR_STATUSES: FrozenSet[TruckStatus] = frozenset({
    TruckStatus.IN_TRANSIT,
    TruckStatus.DELIVERED,
    TruckStatus.CANCELLED,
})

# Statuses the operator may assign from the status-update menu, in menu order
OPERATOR_SETTABLE = (
    TruckStatus.PENDING,
    TruckStatus.IN_TRANSIT,
    TruckStatus.DELIVERED,
    TruckStatus.CANCELLED,
)

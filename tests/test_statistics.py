"""Tests for fleet statistics."""

import pytest

from src.fleet.statistics import compute_statistics
from src.fleet.status import TruckStatus


def test_empty_fleet_has_no_statistics():
    assert compute_statistics([]) is None


def test_fleet_figures(registry):
    stats = compute_statistics(registry.records)

    assert stats.total_trucks == 3
    assert stats.ready == 1
    assert stats.near_limit == 1
    assert stats.overloaded == 1
    assert stats.pending == 0
    assert stats.total_weight == 700 + 1950 + 2100
    assert stats.average_weight == pytest.approx(4750 / 3)
    assert stats.max_weight == 2100
    assert stats.min_weight == 700
    assert stats.average_load_percentage == pytest.approx((35.0 + 97.5 + 105.0) / 3)


def test_counts_follow_status(registry):
    registry.set_status(1, TruckStatus.DELIVERED)
    registry.set_status(3, TruckStatus.CANCELLED)

    stats = compute_statistics(registry.records)

    assert stats.ready == 0
    assert stats.overloaded == 0
    assert stats.delivered == 1
    assert stats.cancelled == 1
    assert stats.near_limit == 1

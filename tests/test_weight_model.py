"""Tests for weight aggregation and status derivation."""

import pytest

from src.config.constants import WEIGHT_LIMIT
from src.fleet.status import TruckStatus
from src.fleet.truck import CargoItem, TruckRecord
from src.fleet.weight_model import (
    classify,
    load_percentage,
    overage,
    recompute,
    remaining_capacity,
)


class TestRecompute:
    @pytest.mark.parametrize("empty_weight,weights", [
        (0, []),
        (500, []),
        (1000, [1, 2, 3]),
        (0, [5000, 5000]),
        (10_000, [0, 0, 0]),
    ])
    def test_total_is_empty_plus_cargo(self, make_truck, empty_weight, weights):
        truck = make_truck(empty_weight, weights)
        assert truck.total_weight == empty_weight + sum(weights)
        assert truck.overloaded == (truck.total_weight > WEIGHT_LIMIT)

    @pytest.mark.parametrize("total,expected", [
        (0, TruckStatus.READY),
        (1799, TruckStatus.READY),
        (1800, TruckStatus.NEAR_LIMIT),
        (2000, TruckStatus.NEAR_LIMIT),
        (2001, TruckStatus.OVERLOADED),
        (9000, TruckStatus.OVERLOADED),
    ])
    def test_status_bands(self, make_truck, total, expected):
        truck = make_truck(total)
        assert truck.status is expected
        assert classify(total) is expected

    def test_limit_itself_is_not_overloaded(self, make_truck):
        truck = make_truck(2000)
        assert not truck.overloaded

    def test_pending_becomes_derived(self):
        truck = TruckRecord(1, "Dana", "XY-1", "Nice", 1900)
        assert truck.status is TruckStatus.PENDING
        assert truck.total_weight == 0

        recompute(truck)

        assert truck.total_weight == 1900
        assert truck.status is TruckStatus.NEAR_LIMIT

    def test_operator_pending_is_rederived(self, make_truck):
        truck = make_truck(2500)
        truck.status = TruckStatus.PENDING
        recompute(truck)
        assert truck.status is TruckStatus.OVERLOADED

    def test_idempotent(self, make_truck):
        truck = make_truck(1500, [300, 150])
        first = (truck.total_weight, truck.overloaded, truck.status)
        recompute(truck)
        assert (truck.total_weight, truck.overloaded, truck.status) == first

    def test_reclassifies_after_cargo_added(self, make_truck):
        truck = make_truck(1000, [200])
        assert truck.status is TruckStatus.READY

        truck.add_cargo([CargoItem(1500, "machinery")])
        recompute(truck)

        assert truck.total_weight == 2700
        assert truck.status is TruckStatus.OVERLOADED

    def test_returns_same_record(self, make_truck):
        truck = make_truck(100)
        assert recompute(truck) is truck


class TestStickyStatus:
    @pytest.mark.parametrize("status", [
        TruckStatus.IN_TRANSIT,
        TruckStatus.DELIVERED,
        TruckStatus.CANCELLED,
    ])
    @pytest.mark.parametrize("empty_weight", [0, 1900, 2500])
    def test_operator_status_survives_recompute(self, make_truck, status, empty_weight):
        truck = make_truck(empty_weight)
        truck.status = status

        recompute(truck)

        assert truck.status is status

    def test_overload_flag_still_follows_weight(self, make_truck):
        truck = make_truck(1000)
        truck.status = TruckStatus.DELIVERED

        truck.empty_weight = 2500
        recompute(truck)

        assert truck.status is TruckStatus.DELIVERED
        assert truck.overloaded
        assert truck.total_weight == 2500


class TestDerivedFigures:
    def test_example_near_limit(self, make_truck):
        truck = make_truck(1500, [300, 150])
        assert truck.total_weight == 1950
        assert not truck.overloaded
        assert truck.status is TruckStatus.NEAR_LIMIT

    def test_example_overloaded(self, make_truck):
        truck = make_truck(1800, [300])
        assert truck.total_weight == 2100
        assert truck.overloaded
        assert truck.status is TruckStatus.OVERLOADED
        assert remaining_capacity(truck) == -100
        assert overage(truck) == 100

    def test_example_empty_cargo(self, make_truck):
        truck = make_truck(500)
        assert truck.total_weight == 500
        assert not truck.overloaded
        assert truck.status is TruckStatus.READY
        assert load_percentage(truck) == pytest.approx(25.0)
        assert remaining_capacity(truck) == 1500
        assert overage(truck) == 0

    def test_load_percentage_not_clamped(self, make_truck):
        truck = make_truck(3000)
        assert load_percentage(truck) == pytest.approx(150.0)

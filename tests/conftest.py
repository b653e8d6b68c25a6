"""Shared test fixtures."""

from datetime import datetime

import pytest

from src.config.schema import AppConfig
from src.fleet.registry import TruckRegistry
from src.fleet.truck import CargoItem, TruckRecord
from src.fleet.weight_model import recompute


def _make_truck(empty_weight=500, weights=(), status=None, **overrides) -> TruckRecord:
    """Build a recomputed record with one cargo item per weight."""
    params = {
        "truck_number": 1,
        "driver_name": "Alice Moreau",
        "license_plate": "AB-123-CD",
        "destination": "Lyon",
        "empty_weight": empty_weight,
        "cargo": [CargoItem(w, f"box {i + 1}") for i, w in enumerate(weights)],
        "created_at": datetime(2025, 1, 1, 8, 0, 0),
    }
    params.update(overrides)
    record = TruckRecord(**params)
    if status is not None:
        record.status = status
    return recompute(record)


@pytest.fixture
def make_truck():
    return _make_truck


@pytest.fixture
def config(tmp_path):
    return AppConfig.from_data_dir(tmp_path)


@pytest.fixture
def registry():
    """Three trucks: Ready, Near Limit and Overloaded."""
    reg = TruckRegistry()
    reg.add("Charlie Brown", "ZZ-900-AA", "Marseille", 500, [CargoItem(200, "tools")])
    reg.add("alice moreau", "AB-123-CD", "Lyon", 1500,
            [CargoItem(300, "bricks"), CargoItem(150, "cement")])
    reg.add("Bob Martin", "CD-456-EF", "Paris Nord", 1800, [CargoItem(300, "steel")])
    reg.records[0].created_at = datetime(2025, 1, 3, 9, 0, 0)
    reg.records[1].created_at = datetime(2025, 1, 1, 9, 0, 0)
    reg.records[2].created_at = datetime(2025, 1, 2, 9, 0, 0)
    return reg

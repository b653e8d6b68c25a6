"""Tests for CSV and Parquet exports."""

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from src.config.constants import CSV_COLUMNS, PARQUET_COLUMNS
from src.fleet.registry import TruckRegistry
from src.fleet.truck import CargoItem
from src.storage import schema_definition
from src.storage.exporter import ExportError, build_export_frame, export_csv, export_parquet
from src.storage.schema_definition import EXPORT_SCHEMA


class TestExportFrame:
    def test_columns_and_rows(self, registry):
        df = build_export_frame(registry.records)
        assert list(df.columns) == PARQUET_COLUMNS
        assert len(df) == 3
        assert df["TotalWeight"].tolist() == [700, 1950, 2100]
        assert df["Overloaded"].tolist() == [False, False, True]
        assert df["LoadPercentage"].tolist() == pytest.approx([35.0, 97.5, 105.0])

    def test_schema_matches_columns(self):
        assert EXPORT_SCHEMA.names == PARQUET_COLUMNS

    def test_weight_columns_are_int64(self):
        assert EXPORT_SCHEMA.field("EmptyWeight").type == pa.int64()
        assert EXPORT_SCHEMA.field("TotalWeight").type == pa.int64()

    def test_schema_out_of_sync_with_columns_raises(self, monkeypatch):
        monkeypatch.setattr(schema_definition, "PARQUET_COLUMNS", PARQUET_COLUMNS[:-1])
        with pytest.raises(ValueError, match="differ from"):
            schema_definition.build_export_schema()


class TestCsvExport:
    def test_read_back(self, tmp_path, registry):
        path = export_csv(tmp_path / "truck_export.csv", registry.records)

        df = pd.read_csv(path)
        assert list(df.columns) == CSV_COLUMNS
        assert df["Driver"].tolist() == ["Charlie Brown", "alice moreau", "Bob Martin"]
        assert df["Status"].tolist() == ["Ready", "Near Limit", "Overloaded"]
        assert df["BoxCount"].tolist() == [1, 2, 1]

    def test_commas_are_quoted(self, tmp_path):
        reg = TruckRegistry()
        reg.add("Doe, John", "P-1", "Lyon, FR", 100, [CargoItem(5, "x")])

        path = export_csv(tmp_path / "out.csv", reg.records)

        df = pd.read_csv(path)
        assert df.loc[0, "Driver"] == "Doe, John"
        assert df.loc[0, "Destination"] == "Lyon, FR"


class TestParquetExport:
    def test_read_back(self, tmp_path, registry):
        path = export_parquet(tmp_path / "truck_export.parquet", registry.records)

        table = pq.read_table(path)
        assert table.schema.names == PARQUET_COLUMNS
        df = table.to_pandas()
        assert len(df) == 3
        assert df["ID"].tolist() == [1, 2, 3]
        assert df["Overloaded"].tolist() == [False, False, True]

    def test_weights_beyond_int32(self, tmp_path):
        reg = TruckRegistry()
        reg.add("Dana", "P-1", "Nice", 3_000_000_000, [CargoItem(500, "x")])

        path = export_parquet(tmp_path / "truck_export.parquet", reg.records)

        df = pd.read_parquet(path)
        assert df["EmptyWeight"].tolist() == [3_000_000_000]
        assert df["TotalWeight"].tolist() == [3_000_000_500]
        assert df["Overloaded"].tolist() == [True]

    def test_unrepresentable_weight_raises_export_error(self, tmp_path):
        reg = TruckRegistry()
        reg.add("Dana", "P-1", "Nice", 10**20)
        path = tmp_path / "truck_export.parquet"

        with pytest.raises(ExportError):
            export_parquet(path, reg.records)
        assert not path.exists()

"""CSV and Parquet exports of the fleet."""

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from src.config.constants import CSV_COLUMNS, PARQUET_COLUMNS
from src.fleet.truck import TruckRecord
from src.fleet.weight_model import load_percentage
from src.storage.schema_definition import EXPORT_SCHEMA

logger = logging.getLogger(__name__)


class ExportError(ValueError):
    """A record could not be converted to the export format."""


def build_export_frame(records: Sequence[TruckRecord]) -> pd.DataFrame:
    """One row per truck, columns in PARQUET_COLUMNS order."""
    rows = []
    for r in records:
        rows.append({
            "ID": r.truck_number,
            "Driver": r.driver_name,
            "Plate": r.license_plate,
            "Destination": r.destination,
            "EmptyWeight": r.empty_weight,
            "TotalWeight": r.total_weight,
            "Status": r.status.label,
            "Timestamp": r.timestamp,
            "BoxCount": r.box_count,
            "LoadPercentage": load_percentage(r),
            "Overloaded": r.overloaded,
        })
    return pd.DataFrame(rows, columns=PARQUET_COLUMNS)


def export_csv(path: Path, records: Sequence[TruckRecord]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = build_export_frame(records)
    df[CSV_COLUMNS].to_csv(path, index=False)

    logger.info(f"Exported {len(df)} truck(s) to {path}")
    return path


def export_parquet(path: Path, records: Sequence[TruckRecord]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = build_export_frame(records)
    try:
        table = pa.Table.from_pandas(df, schema=EXPORT_SCHEMA, preserve_index=False)
    except (pa.ArrowException, OverflowError) as exc:
        raise ExportError(f"Cannot convert fleet to Parquet: {exc}") from exc
    pq.write_table(table, path, compression="snappy")

    logger.info(f"Exported {len(df)} truck(s) to {path}")
    return path

"""PyArrow schema definition for the Parquet fleet export."""

import pyarrow as pa

from src.config.constants import PARQUET_COLUMNS


def build_export_schema() -> pa.Schema:
    """Build the PyArrow schema for fleet export files.

    11 columns: the 9 CSV columns plus LoadPercentage and Overloaded.
    Timestamp stays a formatted string so both exports carry identical text.
    Weights are int64; the store accepts any non-negative integer.
    """
    fields = [
        pa.field("ID", pa.int32()),
        pa.field("Driver", pa.string()),
        pa.field("Plate", pa.string()),
        pa.field("Destination", pa.string()),
        pa.field("EmptyWeight", pa.int64()),
        pa.field("TotalWeight", pa.int64()),
        pa.field("Status", pa.string()),
        pa.field("Timestamp", pa.string()),
        pa.field("BoxCount", pa.int32()),
        pa.field("LoadPercentage", pa.float64()),
        pa.field("Overloaded", pa.bool_()),
    ]
    schema = pa.schema(fields)
    if schema.names != PARQUET_COLUMNS:
        raise ValueError(f"Export schema columns {schema.names} differ from {PARQUET_COLUMNS}")
    return schema


EXPORT_SCHEMA = build_export_schema()

"""Human-readable text report of the fleet."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from src.config.constants import TIMESTAMP_FORMAT
from src.fleet.truck import TruckRecord, current_timestamp

logger = logging.getLogger(__name__)

REPORT_TITLE = "TRUCK WEIGHT MANAGEMENT SYSTEM - REPORT"


def write_report(
    path: Path,
    records: Sequence[TruckRecord],
    generated_at: Optional[datetime] = None,
) -> Path:
    """Write one block per truck under a dated header.

    Args:
        path: Report file to (over)write.
        records: Trucks in display order.
        generated_at: Header timestamp, defaults to now.

    Returns:
        Path to the written report.
    """
    if generated_at is None:
        generated_at = current_timestamp()

    lines = [
        REPORT_TITLE,
        f"Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        "-" * 39,
        "",
    ]
    for r in records:
        lines.extend([
            f"Truck #{r.truck_number}",
            f"Driver: {r.driver_name}",
            f"Plate: {r.license_plate}",
            f"Destination: {r.destination}",
            f"Total Weight: {r.total_weight} kg",
            f"Status: {r.status}",
            f"Timestamp: {r.timestamp}",
            f"Boxes: {r.box_count}",
            "",
        ])

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    logger.info(f"Report for {len(records)} truck(s) written to {path}")
    return path

"""Plain-text rendering of trucks, statistics and search results."""

from typing import List, Sequence

from src.config.constants import WEIGHT_LIMIT
from src.fleet.statistics import FleetStatistics
from src.fleet.truck import TruckRecord
from src.fleet.weight_model import load_percentage, overage, remaining_capacity

RULE_WIDTH = 70
TABLE_WIDTH = 114

# (header, width) for the fleet summary table
SUMMARY_COLUMNS = [
    ("ID", 6),
    ("Driver", 20),
    ("License", 15),
    ("Destination", 18),
    ("Weight", 10),
    ("Load %", 10),
    ("Status", 15),
    ("Timestamp", 20),
]


def _truncate(text: str, limit: int, keep: int) -> str:
    return text[:keep] + "..." if len(text) > limit else text


def _row(values: Sequence[str]) -> str:
    return "".join(
        f"{value:<{width}}" for value, (_, width) in zip(values, SUMMARY_COLUMNS)
    ).rstrip()


def format_summary_table(records: Sequence[TruckRecord]) -> str:
    lines = [
        "=" * TABLE_WIDTH,
        _row([header for header, _ in SUMMARY_COLUMNS]),
        "-" * TABLE_WIDTH,
    ]
    for r in records:
        lines.append(_row([
            str(r.truck_number),
            _truncate(r.driver_name, 18, 15),
            r.license_plate,
            _truncate(r.destination, 16, 13),
            str(r.total_weight),
            f"{load_percentage(r):.1f}",
            r.status.label,
            r.timestamp,
        ]))
    lines.append("=" * TABLE_WIDTH)
    lines.append(f"  Total Trucks: {len(records)}")
    return "\n".join(lines)


def format_weight_verdict(record: TruckRecord) -> str:
    if record.overloaded:
        return f"WARNING: OVERLOADED BY {overage(record)} kg!"
    return f"Remaining Capacity: {remaining_capacity(record)} kg"


def format_registration_summary(record: TruckRecord) -> str:
    return "\n".join([
        "=" * RULE_WIDTH,
        "  TRUCK SUMMARY",
        "-" * RULE_WIDTH,
        f"  Driver: {record.driver_name}",
        f"  License: {record.license_plate}",
        f"  Destination: {record.destination}",
        f"  Total Weight: {record.total_weight} kg",
        f"  Load Percentage: {load_percentage(record):.1f}%",
        f"  Status: {record.status}",
        f"  {format_weight_verdict(record)}",
        "=" * RULE_WIDTH,
    ])


def format_truck_detail(record: TruckRecord) -> str:
    lines = [
        "=" * RULE_WIDTH,
        f"  TRUCK #{record.truck_number}",
        "-" * RULE_WIDTH,
        f"  Driver Name    : {record.driver_name}",
        f"  License Plate  : {record.license_plate}",
        f"  Destination    : {record.destination}",
        f"  Added On       : {record.timestamp}",
        f"  Status         : {record.status}",
        "-" * RULE_WIDTH,
        f"  Empty Weight   : {record.empty_weight} kg",
        f"  Number of Boxes: {record.box_count}",
        "=" * RULE_WIDTH,
    ]

    if record.cargo:
        lines.append("")
        lines.append("  Box Details:")
        lines.append("  " + "-" * 66)
        lines.append(f"  {'Box #':<8}{'Weight (kg)':<15}Description")
        lines.append("  " + "-" * 66)
        for i, item in enumerate(record.cargo, start=1):
            lines.append(f"  {i:<8}{item.weight:<15}{item.description[:41]}".rstrip())
        lines.append("  " + "-" * 66)
        lines.append(f"  Total Cargo Weight: {record.cargo_weight} kg")

    lines.extend([
        "",
        "=" * RULE_WIDTH,
        "  WEIGHT ANALYSIS",
        "-" * RULE_WIDTH,
        f"  Total Weight      : {record.total_weight} kg",
        f"  Maximum Allowed   : {WEIGHT_LIMIT} kg",
        f"  Load Percentage   : {int(load_percentage(record))}%",
    ])
    if record.overloaded:
        lines.append(f"  OVERWEIGHT BY     : {overage(record)} kg")
    else:
        lines.append(f"  Available Space   : {remaining_capacity(record)} kg")
    lines.append("=" * RULE_WIDTH)
    return "\n".join(lines)


def format_search_results(records: Sequence[TruckRecord], empty_message: str) -> str:
    lines: List[str] = ["  Search Results:", "  " + "-" * 68]
    if not records:
        lines.append(f"  {empty_message}")
    for r in records:
        lines.append(
            f"  ID: {r.truck_number} | Driver: {r.driver_name} | Plate: {r.license_plate}"
            f" | Dest: {r.destination} | Weight: {r.total_weight} kg | Status: {r.status}"
        )
    lines.append("  " + "-" * 68)
    return "\n".join(lines)


def format_statistics(stats: FleetStatistics) -> str:
    return "\n".join([
        "=" * RULE_WIDTH,
        "  STATISTICAL ANALYSIS",
        "-" * RULE_WIDTH,
        f"  Total Trucks           : {stats.total_trucks}",
        f"  Ready for Dispatch     : {stats.ready}",
        f"  Near Limit             : {stats.near_limit}",
        f"  Overloaded             : {stats.overloaded}",
        f"  Pending                : {stats.pending}",
        f"  In Transit             : {stats.in_transit}",
        f"  Delivered              : {stats.delivered}",
        f"  Cancelled              : {stats.cancelled}",
        "-" * RULE_WIDTH,
        f"  Total Weight           : {stats.total_weight} kg",
        f"  Average Weight         : {int(stats.average_weight)} kg",
        f"  Maximum Weight         : {stats.max_weight} kg",
        f"  Minimum Weight         : {stats.min_weight} kg",
        f"  Avg Load Percentage    : {int(stats.average_load_percentage)}%",
        "=" * RULE_WIDTH,
    ])

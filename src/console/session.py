"""Interactive menu session over a truck registry."""

import logging
from pathlib import Path
from typing import Callable, List, Tuple

import click

from src.config.constants import (
    BOX_COUNT_RANGE,
    BOX_WEIGHT_RANGE,
    EMPTY_WEIGHT_RANGE,
    TRUCK_NUMBER_RANGE,
    TRUCKS_PER_BATCH_RANGE,
)
from src.config.schema import AppConfig
from src.console.prompts import prompt_int, prompt_menu, prompt_text
from src.console.render import (
    format_registration_summary,
    format_search_results,
    format_statistics,
    format_summary_table,
    format_truck_detail,
)
from src.fleet.registry import SearchField, SortKey, TruckNotFoundError, TruckRegistry
from src.fleet.statistics import compute_statistics
from src.fleet.status import OPERATOR_SETTABLE, TruckStatus
from src.fleet.truck import CargoItem, TruckRecord, current_timestamp
from src.storage.backup import write_backup
from src.storage.exporter import ExportError, export_csv, export_parquet
from src.storage.report_writer import write_report
from src.storage.text_store import save_trucks

logger = logging.getLogger(__name__)

TITLE = "TRUCK WEIGHT MANAGEMENT SYSTEM"

NO_TRUCKS = "No trucks in the system!"
NOT_FOUND = "Truck not found!"
NO_DATA = "No data available!"

# (menu label, field, prompt noun)
SEARCH_FIELDS: List[Tuple[str, SearchField, str]] = [
    ("Search by Driver Name", SearchField.DRIVER, "driver name"),
    ("Search by License Plate", SearchField.PLATE, "license plate"),
    ("Search by Destination", SearchField.DESTINATION, "destination"),
]
SEARCH_OPTIONS = [label for label, _, _ in SEARCH_FIELDS] + [
    "Filter by Status",
    "Back to Main Menu",
]

SORT_OPTIONS: List[Tuple[str, SortKey]] = [
    ("Weight (Asc)", SortKey.WEIGHT_ASC),
    ("Weight (Desc)", SortKey.WEIGHT_DESC),
    ("Driver", SortKey.DRIVER),
    ("Timestamp", SortKey.CREATED),
]


class ConsoleSession:
    """Menu loop. Each action returns True when it changed the fleet."""

    def __init__(self, config: AppConfig, registry: TruckRegistry):
        self.config = config
        self.registry = registry
        self.modified = False

        # (label, action, pause afterwards)
        self.menu: List[Tuple[str, Callable[[], bool], bool]] = [
            ("Add New Trucks", self.add_trucks, True),
            ("View All Trucks (Summary)", self.view_all, True),
            ("View Detailed Truck Information", self.view_detail, True),
            ("Search Trucks", self.search, False),
            ("Update Truck Status", self.update_status, True),
            ("Delete Truck", self.delete_truck, True),
            ("Sort Trucks", self.sort_trucks, True),
            ("Generate Statistics", self.show_statistics, True),
            ("Generate Report (Text File)", self.generate_report, True),
            ("Export to CSV", self.export_csv_file, True),
            ("Export to Parquet", self.export_parquet_file, True),
            ("Save Data", self.save, True),
            ("Exit System", self.exit_system, False),
        ]

    def run(self) -> None:
        exit_choice = len(self.menu)
        while True:
            click.clear()
            self._header()
            choice = prompt_menu("MAIN MENU", [label for label, _, _ in self.menu])
            label, action, pause = self.menu[choice - 1]
            logger.debug(f"Menu action: {label}")

            changed = action()
            if changed:
                self.modified = True
                self._backup()

            if choice == exit_choice:
                break
            if pause:
                click.pause()

    def _header(self) -> None:
        click.echo("=" * 70)
        click.echo(f"  {TITLE}")
        click.echo(f"  Current Session: {current_timestamp()}")
        click.echo("=" * 70)

    def _backup(self) -> None:
        try:
            write_backup(self.config.backup_file, self.registry.records)
        except OSError as exc:
            logger.warning(f"Backup to {self.config.backup_file} failed: {exc}")

    def _pick_truck(self, action: str) -> TruckRecord:
        """Show the fleet and ask for a truck id. Raises TruckNotFoundError."""
        click.echo(format_summary_table(self.registry.records))
        truck_number = prompt_int(f"\nEnter Truck ID to {action}", TRUCK_NUMBER_RANGE)
        return self.registry.get(truck_number)

    def _prompt_cargo(self, n_boxes: int) -> List[CargoItem]:
        cargo: List[CargoItem] = []
        if not n_boxes:
            return cargo
        with click.progressbar(length=n_boxes, label="  Loading boxes", show_pos=True) as bar:
            for j in range(n_boxes):
                click.echo(f"\n  Box #{j + 1}:")
                weight = prompt_int("  Weight (kg)", BOX_WEIGHT_RANGE)
                description = prompt_text("  Description")
                cargo.append(CargoItem(weight=weight, description=description))
                bar.update(1)
        return cargo

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_trucks(self) -> bool:
        n_trucks = prompt_int("\nEnter number of trucks to add", TRUCKS_PER_BATCH_RANGE)

        for _ in range(n_trucks):
            click.echo("\n" + "-" * 70)
            click.echo(f"  TRUCK #{len(self.registry) + 1} - Registration")
            click.echo("-" * 70)

            driver = prompt_text("Driver Name")
            plate = prompt_text("License Plate")
            destination = prompt_text("Destination")
            empty_weight = prompt_int("Empty Truck Weight (kg)", EMPTY_WEIGHT_RANGE)

            cargo = self._prompt_cargo(prompt_int("Number of Boxes", BOX_COUNT_RANGE))

            record = self.registry.add(driver, plate, destination, empty_weight, cargo)
            click.echo("\n" + format_registration_summary(record))

        click.echo(f"\n  Successfully added {n_trucks} truck(s)!")
        return True

    def view_all(self) -> bool:
        if self.registry.is_empty():
            click.echo(f"\n  {NO_TRUCKS}")
            return False
        click.echo(format_summary_table(self.registry.records))
        return False

    def view_detail(self) -> bool:
        if self.registry.is_empty():
            click.echo(f"\n  {NO_TRUCKS}")
            return False
        try:
            record = self._pick_truck("view details")
        except TruckNotFoundError:
            click.echo(f"\n  {NOT_FOUND}")
            return False
        click.echo(format_truck_detail(record))
        return False

    def search(self) -> bool:
        back = len(SEARCH_OPTIONS)
        while True:
            choice = prompt_menu("SEARCH OPTIONS", SEARCH_OPTIONS)
            if choice == back:
                return False

            if choice <= len(SEARCH_FIELDS):
                _, field, noun = SEARCH_FIELDS[choice - 1]
                term = prompt_text(f"\nEnter {noun} to search")
                matches = self.registry.search(field, term)
                click.echo(format_search_results(matches, "No matches found."))
            else:
                statuses = list(TruckStatus)
                picked = prompt_menu(
                    "Status Options", [s.label for s in statuses], "Select status",
                )
                status = statuses[picked - 1]
                matches = self.registry.filter_by_status(status)
                click.echo(f"\n  Trucks with status '{status}':")
                click.echo(format_search_results(matches, "No trucks with this status."))
            click.pause()

    def update_status(self) -> bool:
        if self.registry.is_empty():
            click.echo(f"\n  {NO_TRUCKS}")
            return False
        try:
            record = self._pick_truck("update")
        except TruckNotFoundError:
            click.echo(f"\n  {NOT_FOUND}")
            return False

        click.echo(f"\n  Current Status: {record.status}")
        picked = prompt_menu(
            "New Status Options", [s.label for s in OPERATOR_SETTABLE], "Select new status",
        )
        self.registry.set_status(record.truck_number, OPERATOR_SETTABLE[picked - 1])
        click.echo("\n  Status updated successfully!")
        return True

    def delete_truck(self) -> bool:
        if self.registry.is_empty():
            click.echo(f"\n  {NO_TRUCKS}")
            return False
        try:
            record = self._pick_truck("delete")
        except TruckNotFoundError:
            click.echo(f"\n  {NOT_FOUND}")
            return False

        click.echo(f"\n  Delete Truck #{record.truck_number} ({record.driver_name})?")
        if not click.confirm("  Confirm", default=False):
            click.echo("\n  Deletion cancelled.")
            return False
        self.registry.delete(record.truck_number)
        click.echo("\n  Truck deleted successfully!")
        return True

    def sort_trucks(self) -> bool:
        if self.registry.is_empty():
            click.echo("\n  No trucks to sort!")
            return False
        picked = prompt_menu("Sort By", [label for label, _ in SORT_OPTIONS], "Select sort option")
        self.registry.sort(SORT_OPTIONS[picked - 1][1])
        click.echo("\n  Trucks sorted!")
        click.echo(format_summary_table(self.registry.records))
        return True

    def show_statistics(self) -> bool:
        stats = compute_statistics(self.registry.records)
        if stats is None:
            click.echo(f"\n  {NO_DATA}")
            return False
        click.echo(format_statistics(stats))
        return False

    def generate_report(self) -> bool:
        return self._write_file("Report generated", write_report, self.config.report_file)

    def export_csv_file(self) -> bool:
        return self._write_file("Exported to", export_csv, self.config.csv_file)

    def export_parquet_file(self) -> bool:
        return self._write_file("Exported to", export_parquet, self.config.parquet_file)

    def _write_file(self, done: str, writer: Callable, path: Path) -> bool:
        if self.registry.is_empty():
            click.echo(f"\n  {NO_DATA}")
            return False
        try:
            writer(path, self.registry.records)
        except (OSError, ExportError) as exc:
            logger.error(f"Writing {path} failed: {exc}")
            click.echo(f"\n  Error creating {path}: {exc}")
            return False
        click.echo(f"\n  {done}: {path}")
        return False

    def save(self) -> bool:
        try:
            save_trucks(self.config.data_file, self.registry.records)
        except OSError as exc:
            logger.error(f"Saving to {self.config.data_file} failed: {exc}")
            click.echo(f"\n  Error saving data: {exc}")
            return False
        self.modified = False
        click.echo("\n  Data saved successfully.")
        return False

    def exit_system(self) -> bool:
        if self.modified and click.confirm(
            "\nYou have unsaved changes. Save before exiting?", default=False,
        ):
            self.save()
        click.echo(f"\n  Thank you for using the {TITLE.title()}!")
        click.echo(f"  Session ended: {current_timestamp():%H:%M:%S}")
        return False

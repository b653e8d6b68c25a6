"""Command-line entry point for the truck weight management system."""

import logging
from pathlib import Path

import click

from src.config.constants import DATA_DIR_ENVVAR
from src.config.schema import AppConfig
from src.console.render import format_statistics, format_summary_table
from src.console.session import ConsoleSession
from src.fleet.registry import TruckRegistry
from src.fleet.statistics import compute_statistics
from src.storage.exporter import ExportError, export_csv, export_parquet
from src.storage.report_writer import write_report
from src.storage.text_store import StoreFormatError, load_trucks

logger = logging.getLogger(__name__)


def _load_registry(config: AppConfig) -> TruckRegistry:
    """Load the primary store; refuse to start on an unreadable one."""
    try:
        records = load_trucks(config.data_file)
    except StoreFormatError as exc:
        raise click.ClickException(f"Cannot load truck data: {exc}") from exc
    except OSError as exc:
        raise click.ClickException(f"Cannot read {config.data_file}: {exc}") from exc
    return TruckRegistry(records)


@click.group(invoke_without_command=True)
@click.option(
    "--data-dir", default=None, envvar=DATA_DIR_ENVVAR,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the store, report, exports and backup.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
@click.pass_context
def main(ctx, data_dir, verbose):
    """Truck weight management system.

    Without a command, starts the interactive menu.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = AppConfig.from_data_dir(data_dir)
    ctx.obj = config
    logger.info(f"Data directory: {config.data_dir}")

    if ctx.invoked_subcommand is None:
        registry = _load_registry(config)
        ConsoleSession(config, registry).run()


@main.command("list")
@click.pass_obj
def list_trucks(config):
    """Print the fleet summary table."""
    registry = _load_registry(config)
    if registry.is_empty():
        click.echo("No trucks in the system!")
        return
    click.echo(format_summary_table(registry.records))


@main.command()
@click.pass_obj
def stats(config):
    """Print fleet statistics."""
    fleet_stats = compute_statistics(_load_registry(config).records)
    if fleet_stats is None:
        click.echo("No data available!")
        return
    click.echo(format_statistics(fleet_stats))


@main.command()
@click.pass_obj
def report(config):
    """Write the text report."""
    registry = _load_registry(config)
    if registry.is_empty():
        raise click.ClickException("No data available!")
    try:
        path = write_report(config.report_file, registry.records)
    except OSError as exc:
        raise click.ClickException(f"Error creating report: {exc}") from exc
    click.echo(f"Report generated: {path}")


@main.command()
@click.option(
    "--format", "fmt", type=click.Choice(["csv", "parquet"]), default="csv",
    show_default=True, help="Export file format.",
)
@click.pass_obj
def export(config, fmt):
    """Export the fleet to CSV or Parquet."""
    registry = _load_registry(config)
    if registry.is_empty():
        raise click.ClickException("No data available!")
    writer, path = (
        (export_parquet, config.parquet_file) if fmt == "parquet"
        else (export_csv, config.csv_file)
    )
    try:
        writer(path, registry.records)
    except (OSError, ExportError) as exc:
        raise click.ClickException(f"Error creating {path}: {exc}") from exc
    click.echo(f"Exported to: {path}")


if __name__ == "__main__":
    main()

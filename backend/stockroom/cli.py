"""
Stockroom CLI

Ages an inventory day by day and prints the state of every item.
"""

import click
from pydantic import ValidationError

from .config import settings
from .exceptions import StockroomError
from .fixtures import default_inventory
from .reporting import json_report, text_report
from .schemas import load_inventory
from .services import Inventory
from .services.factory import get_registry
from .utils.logging import setup_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(settings.VERSION, prog_name=settings.PROJECT_NAME)
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=settings.LOG_LEVEL, show_default=True)
def main(log_level: str):
    """Stockroom - daily revaluation of inventory items"""
    setup_logging(log_level=log_level, json_logs=settings.LOG_JSON)


@main.command()
@click.option("--days", type=click.IntRange(min=0), default=settings.DEFAULT_DAYS, show_default=True,
              help="Number of days to simulate")
@click.option("--inventory", "inventory_file", type=click.Path(exists=True, dir_okay=False),
              help="JSON inventory file (defaults to the demonstration stock)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              show_default=True)
def simulate(days: int, inventory_file, output_format: str):
    """
    Print the inventory for today and each of the following days.
    """
    try:
        items = load_inventory(inventory_file) if inventory_file else default_inventory()
    except ValidationError as e:
        raise click.ClickException(f"Invalid inventory file {inventory_file}: {e}")

    logger.info("Starting simulation", items=len(items), days=days, source=inventory_file or "fixture")

    inventory = Inventory(items)
    try:
        if output_format == "json":
            report = json_report(inventory, days)
        else:
            report = text_report(inventory, days)
    except (StockroomError, ValidationError) as e:
        logger.error("Simulation aborted", error=str(e))
        raise click.ClickException(str(e))

    click.echo(report, nl=False)
    logger.info("Simulation finished", day=inventory.day)


@main.command()
def categories():
    """List item categories and their update strategies."""

    for entry in get_registry().summary():
        frozen = " (countdown frozen)" if entry["freezes_countdown"] else ""
        click.echo(f"{entry['category']}: {entry['strategy']}{frozen}")

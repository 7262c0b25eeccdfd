"""Day-by-day inventory reports"""

import json
from typing import Iterator, List

from .services import Inventory

TEXT_HEADER = "name, sellIn, quality"


def simulate(inventory: Inventory, days: int) -> Iterator[Inventory]:
    """Yield the inventory at the current day and after each of the following days"""

    yield inventory
    for _ in range(days):
        inventory.advance_day()
        yield inventory


def render_text_day(inventory: Inventory) -> str:
    lines = [f"-------- day {inventory.day} --------", TEXT_HEADER]
    lines.extend(str(item) for item in inventory.items)
    lines.append("")
    return "\n".join(lines)


def text_report(inventory: Inventory, days: int) -> str:
    """
    Plain text report, one block per day starting with the current day

    Args:
        inventory: Inventory to age, mutated in place
        days: Number of days to simulate after the current one

    Returns:
        Report text ending with a newline
    """
    return "\n".join(render_text_day(state) for state in simulate(inventory, days)) + "\n"


def json_report(inventory: Inventory, days: int) -> str:
    """JSON report: a list of snapshots, one per day starting with the current day"""

    snapshots: List[dict] = [
        state.snapshot().model_dump(mode="json") for state in simulate(inventory, days)
    ]
    return json.dumps(snapshots, indent=2)

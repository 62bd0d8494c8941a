"""List the tracked components without inspecting them."""

import click

from update_watchdog.cli.output import machine_output
from update_watchdog.core.catalog import list_update_items


@click.command("catalog")
def catalog_cmd() -> None:
    """List tracked components with their version key and plist path."""
    for item in list_update_items():
        machine_output(f"{item.name:<24} {item.metadata_key:<26} {item.path}")

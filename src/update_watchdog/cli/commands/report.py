"""Print the security-update table."""

import click

from update_watchdog.cli.output import machine_output
from update_watchdog.core.catalog import list_update_items
from update_watchdog.core.context import WatchdogContext
from update_watchdog.core.inspector import inspect_catalog
from update_watchdog.core.report import format_report


@click.command("report")
@click.option(
    "--hide-missing",
    is_flag=True,
    default=False,
    help="Skip components whose plist is not present instead of showing N/A.",
)
@click.pass_obj
def report_cmd(ctx: WatchdogContext, hide_missing: bool) -> None:
    """Show modification date and version of each security component."""
    rows = inspect_catalog(
        list_update_items(),
        filesystem=ctx.filesystem,
        runner=ctx.runner,
        reader_command=ctx.config.reader_command,
    )
    lines = format_report(
        rows,
        placeholder=ctx.config.placeholder,
        show_missing=ctx.config.show_missing and not hide_missing,
    )
    machine_output("\n".join(lines))

import logging
from pathlib import Path

import click

from update_watchdog.cli.commands.catalog import catalog_cmd
from update_watchdog.cli.commands.report import report_cmd
from update_watchdog.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="update-watchdog")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of ~/.update-watchdog/config.toml.",
)
@click.option("-v", "--verbose", is_flag=True, help="Print each reader command before running it.")
@click.option("--debug", is_flag=True, help="Log inspection details to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool, debug: bool) -> None:
    """Report versions of macOS background security updates."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(config_path=config_path, verbose=verbose)

    if ctx.invoked_subcommand is None:
        ctx.invoke(report_cmd)


cli.add_command(catalog_cmd)
cli.add_command(report_cmd)


def main() -> None:
    """CLI entry point used by the `update-watchdog` console script."""
    cli()

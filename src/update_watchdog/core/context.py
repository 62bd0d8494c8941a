"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

import click

from update_watchdog.cli.output import user_output
from update_watchdog.core.command_runner import (
    CommandRunner,
    PrintingCommandRunner,
    RealCommandRunner,
)
from update_watchdog.core.config import WatchdogConfig, default_config_path, load_config
from update_watchdog.core.filesystem import Filesystem, RealFilesystem


@dataclass(frozen=True)
class WatchdogContext:
    """Immutable context holding all dependencies for a report run.

    Created at CLI entry point and threaded through the application.
    Tests build one directly with fake implementations.
    """

    filesystem: Filesystem
    runner: CommandRunner
    config: WatchdogConfig


def create_context(*, config_path: Path | None, verbose: bool) -> WatchdogContext:
    """Create production context with real implementations.

    Args:
        config_path: Config file to load, or None for the default location
        verbose: If True, echo each reader command to stderr before running it

    Returns:
        WatchdogContext with real implementations
    """
    # 1. Load config; a broken file is the one fatal condition
    path = config_path if config_path is not None else default_config_path()
    try:
        config = load_config(path)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    # 2. Create integrations
    runner: CommandRunner = RealCommandRunner()
    if verbose:
        runner = PrintingCommandRunner(runner)

    return WatchdogContext(
        filesystem=RealFilesystem(),
        runner=runner,
        config=config,
    )

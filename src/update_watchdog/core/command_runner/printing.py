"""Printing command runner wrapper for verbose output."""

import shlex

import click

from update_watchdog.cli.output import user_output
from update_watchdog.core.command_runner.abc import CommandResult, CommandRunner


class PrintingCommandRunner(CommandRunner):
    """Wrapper that echoes each command to stderr before delegating.

    Usage:
        runner = PrintingCommandRunner(RealCommandRunner())
    """

    def __init__(self, wrapped: CommandRunner) -> None:
        self._wrapped = wrapped

    def run(self, command: list[str]) -> CommandResult:
        user_output(click.style(f"$ {shlex.join(command)}", dim=True))
        return self._wrapped.run(command)

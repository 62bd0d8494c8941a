"""Command execution subpackage.

Runs external commands synchronously and captures their output. Tests use an
in-memory fake; verbose mode wraps the real runner in PrintingCommandRunner.
"""

from update_watchdog.core.command_runner.abc import CommandResult, CommandRunner
from update_watchdog.core.command_runner.printing import PrintingCommandRunner
from update_watchdog.core.command_runner.real import RealCommandRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "PrintingCommandRunner",
    "RealCommandRunner",
]

"""Production command runner using subprocess."""

from update_watchdog.core.command_runner.abc import CommandResult, CommandRunner
from update_watchdog.core.subprocess import run_subprocess_with_context


class RealCommandRunner(CommandRunner):
    """Runs commands as child processes with no timeout.

    Pipes are drained and the child is reaped before run() returns.
    """

    def run(self, command: list[str]) -> CommandResult:
        result = run_subprocess_with_context(
            command,
            operation_context=f"run {command[0]}",
        )
        return CommandResult(
            stdout=result.stdout,
            stderr=result.stderr,
            returncode=result.returncode,
        )

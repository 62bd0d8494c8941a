"""Command runner interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one finished child process."""

    stdout: bytes
    stderr: bytes
    returncode: int


class CommandRunner(ABC):
    """Abstract interface for running an external command to completion.

    Real implementations spawn a child process and block until it exits. Fake
    implementations return canned results for unit tests.
    """

    @abstractmethod
    def run(self, command: list[str]) -> CommandResult:
        """Run command and capture stdout, stderr and exit status.

        A non-zero exit status is reported in the result, not raised.

        Args:
            command: Executable followed by its arguments

        Returns:
            CommandResult for the finished process

        Raises:
            RuntimeError: If the command cannot be launched
        """
        ...

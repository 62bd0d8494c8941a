"""Subprocess execution with rich error context.

Integration classes call run_subprocess_with_context() instead of
subprocess.run() so that launch failures surface as RuntimeError carrying the
operation being attempted and the full command line.
"""

import subprocess
from collections.abc import Sequence


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
) -> subprocess.CompletedProcess[bytes]:
    """Run cmd to completion, capturing stdout and stderr as raw bytes.

    A non-zero exit status is returned in the CompletedProcess, not raised.
    Decoding is left to the caller because the child's output is not
    guaranteed to be UTF-8.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command cannot be launched
    """
    try:
        return subprocess.run(cmd, capture_output=True, check=False)

    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e

    except OSError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Could not launch command while trying to {operation_context}: {e}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e

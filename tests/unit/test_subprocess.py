"""Tests for subprocess wrapper with rich error context."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from update_watchdog.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that subprocess execution returns CompletedProcess without checking."""
    with patch("update_watchdog.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = b"135\n"
        mock_result.stderr = b""
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["defaults", "read", "/a.plist", "Version"],
            operation_context="run defaults",
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["defaults", "read", "/a.plist", "Version"],
            capture_output=True,
            check=False,
        )


def test_file_not_found_becomes_runtime_error() -> None:
    """Test that a missing executable is reported with the full command."""
    with patch("update_watchdog.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("No such file or directory")

        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                ["/usr/bin/defaults", "read", "/a.plist", "Version"],
                operation_context="run /usr/bin/defaults",
            )

        error_message = str(exc_info.value)
        assert "Command not found while trying to run /usr/bin/defaults" in error_message
        assert "Full command: /usr/bin/defaults read /a.plist Version" in error_message
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_permission_error_becomes_runtime_error() -> None:
    with patch("update_watchdog.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = PermissionError("Permission denied")

        with pytest.raises(RuntimeError, match="Could not launch command"):
            run_subprocess_with_context(["/etc/passwd"], operation_context="run it")

"""Configuration loading from ~/.update-watchdog/config.toml.

The file is optional. Every key has a default, so a missing file yields the
same behavior as an empty one.

Example config:
  reader_command = "/usr/bin/defaults"
  placeholder = "N/A"
  show_missing = true
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

DEFAULT_READER_COMMAND = "/usr/bin/defaults"
DEFAULT_PLACEHOLDER = "N/A"

T = TypeVar("T")


@dataclass(frozen=True)
class WatchdogConfig:
    """Immutable configuration, loaded once at CLI entry point."""

    reader_command: str = DEFAULT_READER_COMMAND
    placeholder: str = DEFAULT_PLACEHOLDER
    show_missing: bool = True


def default_config_path() -> Path:
    return Path.home() / ".update-watchdog" / "config.toml"


def _require_type(
    data: dict[str, object], key: str, kind: type[T], default: T, path: Path
) -> T:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"'{key}' in {path} must be a {kind.__name__}, got {value!r}")
    return value


def load_config(config_path: Path) -> WatchdogConfig:
    """Load config from config_path if present; otherwise return defaults.

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    if not config_path.exists():
        return WatchdogConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    reader_command = _require_type(
        data, "reader_command", str, DEFAULT_READER_COMMAND, config_path
    )
    if not reader_command:
        raise ValueError(f"'reader_command' in {config_path} must not be empty")
    if "\0" in reader_command:
        raise ValueError(f"'reader_command' in {config_path} must not contain NUL characters")

    return WatchdogConfig(
        reader_command=reader_command,
        placeholder=_require_type(data, "placeholder", str, DEFAULT_PLACEHOLDER, config_path),
        show_missing=_require_type(data, "show_missing", bool, True, config_path),
    )

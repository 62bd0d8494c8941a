"""Per-item inspection: existence, modification time and version lookup.

inspect_item() is the error boundary for a single catalog item. Every failure
(missing plist, unreadable attributes, reader launch failure, empty or
undecodable output) degrades to an absent field on the returned row.
"""

import logging
from collections.abc import Iterable

from update_watchdog.core.catalog import UpdateItem
from update_watchdog.core.command_runner import CommandRunner
from update_watchdog.core.filesystem import Filesystem
from update_watchdog.core.report import ReportRow

logger = logging.getLogger(__name__)


def parse_version_output(stdout: bytes) -> str | None:
    """Extract the version from the reader's stdout.

    Surrounding line breaks are dropped and the first remaining line is the
    version. Empty or non-UTF-8 output yields None.
    """
    try:
        text = stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None

    text = text.strip("\r\n")
    if not text:
        return None
    return text.split("\n")[0].rstrip("\r")


def read_version(item: UpdateItem, *, runner: CommandRunner, reader_command: str) -> str | None:
    """Ask the reader utility for the item's version key."""
    command = [reader_command, "read", str(item.path), item.metadata_key]
    try:
        result = runner.run(command)
    except RuntimeError as e:
        logger.debug("Reader launch failed for %s: %s", item.name, e)
        return None

    if result.returncode != 0:
        logger.debug(
            "Reader exited with %d for %s: %s",
            result.returncode,
            item.name,
            result.stderr.decode("utf-8", errors="replace").strip(),
        )

    return parse_version_output(result.stdout)


def inspect_item(
    item: UpdateItem,
    *,
    filesystem: Filesystem,
    runner: CommandRunner,
    reader_command: str,
) -> ReportRow:
    """Produce the report row for one catalog item.

    No subprocess is spawned for an item whose plist does not exist.
    """
    try:
        present = filesystem.exists(item.path)
    except OSError as e:
        logger.debug("Could not check %s: %s", item.path, e)
        present = False

    if not present:
        logger.debug("%s not present at %s", item.name, item.path)
        return ReportRow(name=item.name, present=False, modified_at=None, version=None)

    try:
        modified_at = filesystem.modified_at(item.path)
    except OSError as e:
        logger.debug("Could not read attributes of %s: %s", item.path, e)
        modified_at = None

    version = read_version(item, runner=runner, reader_command=reader_command)
    return ReportRow(name=item.name, present=True, modified_at=modified_at, version=version)


def inspect_catalog(
    items: Iterable[UpdateItem],
    *,
    filesystem: Filesystem,
    runner: CommandRunner,
    reader_command: str,
) -> list[ReportRow]:
    """Inspect items one at a time, preserving their order."""
    return [
        inspect_item(item, filesystem=filesystem, runner=runner, reader_command=reader_command)
        for item in items
    ]

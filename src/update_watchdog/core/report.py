"""Report rows and fixed-width table rendering."""

from dataclasses import dataclass
from datetime import datetime

NAME_WIDTH = 24
DATE_WIDTH = 24
VERSION_WIDTH = 12
SEPARATOR = "-" * 57


@dataclass(frozen=True)
class ReportRow:
    """Data behind one table line.

    present is False when the item's plist was not found; modified_at and
    version are then both None.
    """

    name: str
    present: bool
    modified_at: datetime | None
    version: str | None


def format_medium_datetime(value: datetime) -> str:
    """Format as a medium date with a short time, e.g. "May 3, 2017, 4:05 PM"."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value:%b} {value.day}, {value.year}, {hour}:{value:%M} {meridiem}"


def _cell(text: str, width: int) -> str:
    return text[:width].ljust(width)


def format_line(name: str, date: str, version: str) -> str:
    """Lay out one line in three left-aligned columns."""
    line = " ".join(
        [
            _cell(name, NAME_WIDTH),
            _cell(date, DATE_WIDTH),
            _cell(version, VERSION_WIDTH),
        ]
    )
    return line.rstrip()


def format_row(row: ReportRow, *, placeholder: str) -> str:
    date = format_medium_datetime(row.modified_at) if row.modified_at is not None else placeholder
    version = row.version if row.version is not None else placeholder
    return format_line(row.name, date, version)


def format_report(rows: list[ReportRow], *, placeholder: str, show_missing: bool) -> list[str]:
    """Render header, separator and one line per row, in the order given.

    Args:
        rows: Rows in catalog order
        placeholder: Text shown for an unavailable date or version
        show_missing: If False, rows for items that are not present are skipped

    Returns:
        Lines of the table, without trailing newlines
    """
    lines = [format_line("Name", "Date", "Version"), SEPARATOR]
    for row in rows:
        if not row.present and not show_missing:
            continue
        lines.append(format_row(row, placeholder=placeholder))
    return lines

"""Tests for table formatting."""

from datetime import datetime

from update_watchdog.core.report import (
    SEPARATOR,
    ReportRow,
    format_line,
    format_medium_datetime,
    format_report,
)

HEADER = f"{'Name':<24} {'Date':<24} Version"


def test_medium_datetime_afternoon() -> None:
    assert format_medium_datetime(datetime(2017, 5, 3, 16, 5)) == "May 3, 2017, 4:05 PM"


def test_medium_datetime_midnight_and_noon() -> None:
    assert format_medium_datetime(datetime(2020, 1, 15, 0, 30)) == "Jan 15, 2020, 12:30 AM"
    assert format_medium_datetime(datetime(2020, 1, 15, 12, 0)) == "Jan 15, 2020, 12:00 PM"


def test_format_line_pads_columns() -> None:
    line = format_line("SIP", "N/A", "N/A")

    assert line == "SIP" + " " * 21 + " " + "N/A" + " " * 21 + " " + "N/A"


def test_format_line_truncates_long_values() -> None:
    line = format_line("A" * 30, "B" * 30, "C" * 20)

    assert line == "A" * 24 + " " + "B" * 24 + " " + "C" * 12


def test_format_report_header_and_separator() -> None:
    lines = format_report([], placeholder="N/A", show_missing=True)

    assert lines == [HEADER, SEPARATOR]
    assert SEPARATOR == "-" * 57


def test_format_report_renders_placeholders() -> None:
    rows = [
        ReportRow(
            name="XProtect",
            present=True,
            modified_at=datetime(2017, 5, 3, 16, 5),
            version="135",
        ),
        ReportRow(name="SIP", present=False, modified_at=None, version=None),
    ]

    lines = format_report(rows, placeholder="N/A", show_missing=True)

    assert lines[2] == f"{'XProtect':<24} {'May 3, 2017, 4:05 PM':<24} 135"
    assert lines[3] == f"{'SIP':<24} {'N/A':<24} N/A"


def test_format_report_hides_only_missing_items() -> None:
    rows = [
        ReportRow(name="XProtect", present=False, modified_at=None, version=None),
        ReportRow(name="MRT", present=True, modified_at=None, version=None),
    ]

    lines = format_report(rows, placeholder="N/A", show_missing=False)

    assert lines[2:] == [f"{'MRT':<24} {'N/A':<24} N/A"]


def test_format_report_keeps_row_order() -> None:
    rows = [
        ReportRow(name=name, present=True, modified_at=None, version=version)
        for name, version in [("Zeta", "1"), ("Alpha", "3"), ("Mid", "2")]
    ]

    lines = format_report(rows, placeholder="-", show_missing=True)

    assert [line.split()[0] for line in lines[2:]] == ["Zeta", "Alpha", "Mid"]

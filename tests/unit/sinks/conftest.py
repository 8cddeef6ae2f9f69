"""Fixtures shared by sink tests."""

import pytest

from android_test_report.report import Cell, Heading, RawText, Report, Table


@pytest.fixture
def report() -> Report:
    """Small report exercising every block type and a link pair."""
    return Report(
        blocks=[
            Heading(level=1, text="Android Test Report"),
            Table(
                rows=[
                    [Cell(data="Suite", header=True), Cell(data="Failures", header=True)],
                    [
                        Cell(data="a|b"),
                        Cell(
                            data="1",
                            anchor="back-to-bad-failures",
                            href="#bad-failures",
                        ),
                    ],
                ]
            ),
            Heading(
                level=3,
                text="bad (failures)",
                anchor="bad-failures",
                href="#back-to-bad-failures",
            ),
            Table(
                rows=[
                    [Cell(data="Stack Trace", header=True)],
                    [Cell(data="Error: <boom>\n\tat Foo")],
                ]
            ),
            RawText(text="Done."),
        ],
        suite_count=1,
    )

"""Transform a single suite record into a summary row and detail tables."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from android_test_report.anchors import anchor_id, jump_link
from android_test_report.models.suite import Failed, Skipped, SuiteRecord, TestCase
from android_test_report.report import Cell, Row

type Postfix = Literal["failures", "skipped"]

EXCLUDED_FIELDS = frozenset({"hostname", "source", "cases"})
SUMMARY_FIELDS = ("name", "tests", "skipped", "failures", "errors", "timestamp", "time")
COUNT_FIELDS = frozenset({"tests", "skipped", "failures", "errors"})

SUMMARY_HEADER: Row = tuple(
    Cell(data=title, header=True)
    for title in ("Suite", "Tests", "Skipped", "Failures", "Errors", "Timestamp", "Time")
)
FAILURE_HEADER: Row = tuple(
    Cell(data=title, header=True)
    for title in ("Test", "Message", "Type", "Time", "Stack Trace")
)


@dataclass(frozen=True, kw_only=True)
class DetailTable:
    """Per-case detail rows filed under the first offending case's name."""

    postfix: Postfix
    rows: Sequence[Row]
    source: str | None = None

    @property
    def where(self) -> str:
        """First column of the first data row, the key the table is filed under."""
        return self.rows[1][0].data

    @property
    def anchor(self) -> str:
        """Id of the detail section heading."""
        return anchor_id(self.where, self.postfix)

    @property
    def back_link(self) -> str:
        """Id of the summary cell linking to this table."""
        return anchor_id(self.where, self.postfix, back_link=True)


@dataclass(frozen=True, kw_only=True)
class TransformedSuite:
    """Summary row and optional detail tables for one suite."""

    record: SuiteRecord
    summary_row: Row
    failures: DetailTable | None = None
    skipped: DetailTable | None = None

    @property
    def detail_tables(self) -> Sequence[DetailTable]:
        """Detail tables that were produced, failures first."""
        return [t for t in (self.failures, self.skipped) if t is not None]


def transform_suite(record: SuiteRecord, *, show_skipped: bool) -> TransformedSuite:
    """Build the summary row and detail tables for ``record``.

    Args:
        record: Decoded suite report
        show_skipped: Whether to produce a table of skipped cases

    Returns:
        Transformed suite with anchors wired between row and tables

    """
    failure_rows: list[Row] = []
    skipped_rows: list[Row] = []
    skipped_columns: list[str] = []

    for case in record.cases:
        if isinstance(case.outcome, Failed):
            if not failure_rows:
                failure_rows.append(FAILURE_HEADER)
            failure_rows.append(_failure_row(case, case.outcome))
        elif isinstance(case.outcome, Skipped) and show_skipped:
            attributes = _skipped_attributes(case)
            if not skipped_rows:
                skipped_columns = list(attributes)
                skipped_rows.append(
                    tuple(Cell(data=name, header=True) for name in skipped_columns)
                )
            skipped_rows.append(
                tuple(Cell(data=attributes.get(name, "")) for name in skipped_columns)
            )

    source = str(record.source) if record.source is not None else None
    failures = (
        DetailTable(postfix="failures", rows=failure_rows, source=source)
        if failure_rows
        else None
    )
    skipped = (
        DetailTable(postfix="skipped", rows=skipped_rows, source=source)
        if skipped_rows
        else None
    )

    return TransformedSuite(
        record=record,
        summary_row=summary_row(record, failures=failures, skipped=skipped),
        failures=failures,
        skipped=skipped,
    )


def summary_row(
    record: SuiteRecord,
    *,
    failures: DetailTable | None = None,
    skipped: DetailTable | None = None,
) -> Row:
    """Render the declared suite attributes as one row of the summary table.

    Nonzero counts link to the matching detail table when one exists. The
    first count cell of each table carries its back-link landing id, even
    when the declared count is zero.
    """
    values = record.model_dump(exclude=set(EXCLUDED_FIELDS))
    targets: dict[str, DetailTable | None] = {
        "failures": failures,
        "errors": failures,
        "skipped": skipped,
    }
    landed: set[str] = set()
    row: list[Cell] = []

    for field in SUMMARY_FIELDS:
        value = values[field]
        if field not in COUNT_FIELDS:
            row.append(Cell(data=str(value)))
            continue

        count = int(value)
        table = targets.get(field)
        if table is None:
            row.append(Cell(data=str(count)))
            continue

        landing = None
        if table.back_link not in landed:
            landing = table.back_link
            landed.add(landing)
        row.append(
            Cell(
                data=str(count),
                anchor=landing,
                href=jump_link(table.where, table.postfix) if count else None,
            )
        )

    return row


def _failure_row(case: TestCase, failure: Failed) -> Row:
    return (
        Cell(data=case.name),
        Cell(data=failure.message or ""),
        Cell(data=failure.type or ""),
        Cell(data=str(case.time)),
        Cell(data=failure.stack_trace or ""),
    )


def _skipped_attributes(case: TestCase) -> Mapping[str, str]:
    if case.attributes:
        return case.attributes
    return {
        "name": case.name,
        "classname": case.classname or "",
        "time": str(case.time),
    }

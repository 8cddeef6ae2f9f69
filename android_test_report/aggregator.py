"""Fold transformed suites into one consolidated report."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from android_test_report.models.suite import SuiteRecord
from android_test_report.report import Block, Cell, Heading, RawText, Report, Row, Table
from android_test_report.transformer import (
    SUMMARY_HEADER,
    DetailTable,
    Postfix,
    transform_suite,
)

log = logging.getLogger(__name__)

REPORT_TITLE = "Android Test Report"
NO_REPORTS_NOTICE = (
    "No test reports found. Please verify the tests were executed successfully. "
    "Android Test Report Action failed the job."
)
TOTALS_LABEL = "Total"


@dataclass(frozen=True, kw_only=True)
class Totals:
    """Running sums of the declared counts across suites."""

    tests: int = 0
    skipped: int = 0
    failures: int = 0
    errors: int = 0
    time: float = 0.0

    def plus(self, record: SuiteRecord) -> "Totals":
        """Return the totals with ``record``'s declared counts added."""
        return Totals(
            tests=self.tests + record.tests,
            skipped=self.skipped + record.skipped,
            failures=self.failures + record.failures,
            errors=self.errors + record.errors,
            time=self.time + float(record.time),
        )

    def to_row(self) -> Row:
        """Render as a summary row with the same columns as suite rows."""
        return (
            Cell(data=TOTALS_LABEL),
            Cell(data=str(self.tests)),
            Cell(data=str(self.skipped)),
            Cell(data=str(self.failures)),
            Cell(data=str(self.errors)),
            Cell(data=""),
            Cell(data=f"{self.time:.3f}"),
        )


@dataclass(kw_only=True)
class Aggregator:
    """Accumulates suites for a single run.

    Detail tables are keyed by their ``(where, postfix)`` pair; a later suite
    resolving to the same key replaces the earlier table.
    """

    show_skipped: bool = False
    totals: Totals = field(default_factory=Totals)
    rows: list[Row] = field(default_factory=list)
    details: dict[tuple[str, Postfix], DetailTable] = field(default_factory=dict)

    @property
    def suite_count(self) -> int:
        """Number of suites added so far."""
        return len(self.rows)

    def add(self, record: SuiteRecord) -> None:
        """Transform ``record`` and fold it into the running report."""
        transformed = transform_suite(record, show_skipped=self.show_skipped)

        self.rows.append(transformed.summary_row)
        self.totals = self.totals.plus(record)

        for table in transformed.detail_tables:
            key = (table.where, table.postfix)
            if key in self.details:
                log.warning(
                    "Detail table %s for %r replaced by suite %s",
                    table.postfix,
                    table.where,
                    record.name,
                )
            self.details[key] = table

    def build(self, header_postfix: str = "", *, failure: str | None = None) -> Report:
        """Assemble the report from everything added so far.

        Args:
            header_postfix: Text appended to the top-level heading
            failure: Reason the run stopped early, appended as a final notice
                instead of the empty-result notice

        """
        title = f"{REPORT_TITLE}{header_postfix}"
        blocks: list[Block] = [Heading(level=1, text=title)]

        if self.rows:
            blocks.append(Heading(level=2, text="Summary"))
            blocks.append(
                Table(rows=[SUMMARY_HEADER, *self.rows, self.totals.to_row()])
            )
            for table in self.details.values():
                blocks.extend(detail_section(table))
        elif failure is None:
            log.warning("No suites were aggregated")
            blocks.append(RawText(text=NO_REPORTS_NOTICE))

        if failure is not None:
            blocks.append(RawText(text=failure))

        return Report(blocks=blocks, suite_count=self.suite_count)


def detail_section(table: DetailTable) -> Sequence[Block]:
    """Heading linking back to the summary row, followed by the table."""
    blocks: list[Block] = [
        Heading(
            level=3,
            text=f"{table.where} ({table.postfix})",
            anchor=table.anchor,
            href=f"#{table.back_link}",
        )
    ]
    if table.source is not None:
        blocks.append(RawText(text=f"Reported in {table.source}"))
    blocks.append(Table(rows=table.rows))
    return blocks


def aggregate(
    records: Iterable[SuiteRecord],
    *,
    show_skipped: bool = False,
    header_postfix: str = "",
) -> Report:
    """Aggregate ``records`` in the given order into a report."""
    aggregator = Aggregator(show_skipped=show_skipped)
    for record in records:
        aggregator.add(record)
    return aggregator.build(header_postfix)

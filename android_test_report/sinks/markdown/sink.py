"""Markdown sink implementation."""

import html
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from android_test_report.report import Block, Cell, Heading, RawText, Report, Row, Table
from android_test_report.sinks.base import ReportSink, SinkWriteError
from android_test_report.sinks.markdown.config import MarkdownConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class MarkdownSink(ReportSink):
    """Writes the report as GitHub-flavoured Markdown to a file or stdout."""

    config: MarkdownConfig

    @classmethod
    def from_config(cls, config: MarkdownConfig) -> "MarkdownSink":
        """Create sink from its configuration."""
        return cls(config=config)

    def render(self, report: Report) -> str:
        """Render ``report`` as Markdown, anchors as inline HTML."""
        return "\n".join(f"{_render_block(block)}\n" for block in report.blocks)

    def write(self, report: Report) -> None:
        """Write the rendered report, replacing any existing file."""
        content = self.render(report)
        if self.config.path is None:
            sys.stdout.write(content)
            return

        log.info("Writing Markdown report to %s", self.config.path)
        try:
            self.config.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise SinkWriteError(
                f"Unable to write report {self.config.path}: {e}"
            ) from e


def _render_block(block: Block) -> str:
    match block:
        case Heading(level=level, text=text, anchor=anchor, href=href):
            level = min(max(level, 1), 6)
            return f"{'#' * level} {_link(_escape(text), anchor, href)}"
        case Table(rows=rows):
            return _render_table(rows)
        case RawText(text=text):
            return text


def _render_table(rows: Sequence[Row]) -> str:
    if not rows:
        return ""

    # Markdown tables need exactly one header row
    header, *body = rows
    lines = [
        _render_row(header),
        "|" + "|".join(" --- " for _ in header) + "|",
    ]
    lines.extend(_render_row(row) for row in body)
    return "\n".join(lines)


def _render_row(row: Row) -> str:
    return "| " + " | ".join(_render_cell(cell) for cell in row) + " |"


def _render_cell(cell: Cell) -> str:
    return _link(_escape(cell.data), cell.anchor, cell.href)


def _escape(text: str) -> str:
    return html.escape(text).replace("|", "\\|").replace("\n", "<br>")


def _link(content: str, anchor: str | None, href: str | None) -> str:
    if anchor is None and href is None:
        return content
    attributes = ""
    if anchor is not None:
        attributes += f' id="{anchor}"'
    if href is not None:
        attributes += f' href="{href}"'
    return f"<a{attributes}>{content}</a>"

"""GitHub Actions job summary sink implementation."""

import html
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from android_test_report.report import Block, Cell, Heading, RawText, Report, Table
from android_test_report.sinks.base import ReportSink, SinkWriteError
from android_test_report.sinks.github_summary.config import GitHubSummaryConfig

log = logging.getLogger(__name__)

SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"


@dataclass(frozen=True, kw_only=True)
class GitHubSummarySink(ReportSink):
    """Writes the report as HTML into the job summary file."""

    config: GitHubSummaryConfig

    @classmethod
    def from_config(cls, config: GitHubSummaryConfig) -> "GitHubSummarySink":
        """Create sink from its configuration."""
        return cls(config=config)

    def resolve_path(self) -> Path:
        """Configured path, or the one GitHub Actions exposes to the step."""
        if self.config.path is not None:
            return self.config.path

        if not (env_path := os.environ.get(SUMMARY_ENV_VAR)):
            raise SinkWriteError(
                f"Unable to find environment variable for ${SUMMARY_ENV_VAR}. "
                "Check if your runtime environment supports job summaries."
            )
        return Path(env_path)

    def render(self, report: Report) -> str:
        """Render ``report`` as an HTML fragment."""
        return "".join(f"{_render_block(block)}\n" for block in report.blocks)

    def write(self, report: Report) -> None:
        """Append (or overwrite with) the rendered report."""
        path = self.resolve_path()
        mode = "w" if self.config.overwrite else "a"
        log.info("Writing job summary to %s", path)
        try:
            with path.open(mode, encoding="utf-8") as summary:
                summary.write(self.render(report))
        except OSError as e:
            raise SinkWriteError(f"Unable to write job summary {path}: {e}") from e


def _render_block(block: Block) -> str:
    match block:
        case Heading(level=level, text=text, anchor=anchor, href=href):
            level = min(max(level, 1), 6)
            return f"<h{level}>{_link(html.escape(text), anchor, href)}</h{level}>"
        case Table(rows=rows):
            body = "".join(
                f"<tr>{''.join(_render_cell(cell) for cell in row)}</tr>"
                for row in rows
            )
            return f"<table>{body}</table>"
        case RawText(text=text):
            return html.escape(text)


def _render_cell(cell: Cell) -> str:
    tag = "th" if cell.header else "td"
    return f"<{tag}>{_link(html.escape(cell.data), cell.anchor, cell.href)}</{tag}>"


def _link(content: str, anchor: str | None, href: str | None) -> str:
    if anchor is None and href is None:
        return content
    attributes = ""
    if anchor is not None:
        attributes += f' id="{html.escape(anchor)}"'
    if href is not None:
        attributes += f' href="{html.escape(href)}"'
    return f"<a{attributes}>{content}</a>"

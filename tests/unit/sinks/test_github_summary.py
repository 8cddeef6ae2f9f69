"""Tests for the GitHub Actions job summary sink."""

from pathlib import Path

import pytest

from android_test_report.report import Report
from android_test_report.sinks.base import SinkWriteError
from android_test_report.sinks.github_summary import (
    GitHubSummaryConfig,
    GitHubSummarySink,
)


def test_render_html(report: Report) -> None:
    """Renders headings, tables and anchors as HTML, escaping text."""
    sink = GitHubSummarySink(config=GitHubSummaryConfig())

    html = sink.render(report)

    assert "<h1>Android Test Report</h1>" in html
    assert "<tr><th>Suite</th><th>Failures</th></tr>" in html
    assert '<td><a id="back-to-bad-failures" href="#bad-failures">1</a></td>' in html
    assert (
        '<h3><a id="bad-failures" href="#back-to-bad-failures">bad (failures)</a></h3>'
        in html
    )
    assert "Error: &lt;boom&gt;" in html
    assert html.endswith("Done.\n")


def test_write_appends_to_env_path(
    report: Report, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Appends to the file named by GITHUB_STEP_SUMMARY."""
    summary = tmp_path / "summary.md"
    summary.write_text("previous step\n")
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", str(summary))
    sink = GitHubSummarySink.from_config(GitHubSummaryConfig())

    sink.write(report)

    content = summary.read_text()
    assert content.startswith("previous step\n<h1>")
    assert content.endswith(sink.render(report))


def test_write_overwrites_configured_path(report: Report, tmp_path: Path) -> None:
    """Overwrites the configured path when requested."""
    summary = tmp_path / "summary.html"
    summary.write_text("stale")
    sink = GitHubSummarySink(
        config=GitHubSummaryConfig(path=summary, overwrite=True)
    )

    sink.write(report)

    assert summary.read_text() == sink.render(report)


def test_write_without_path_raises(
    report: Report, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Fails when no path is configured and the env var is missing."""
    monkeypatch.delenv("GITHUB_STEP_SUMMARY", raising=False)
    sink = GitHubSummarySink(config=GitHubSummaryConfig())

    with pytest.raises(SinkWriteError, match="GITHUB_STEP_SUMMARY"):
        sink.write(report)


def test_write_failure_raises(report: Report, tmp_path: Path) -> None:
    """I/O errors surface as SinkWriteError."""
    sink = GitHubSummarySink(
        config=GitHubSummaryConfig(path=tmp_path / "missing" / "summary.html")
    )

    with pytest.raises(SinkWriteError, match="Unable to write job summary"):
        sink.write(report)

"""Tests for the Markdown sink."""

from pathlib import Path

import pytest

from android_test_report.report import Report
from android_test_report.sinks.base import SinkWriteError
from android_test_report.sinks.markdown import MarkdownConfig, MarkdownSink


def test_render_markdown(report: Report) -> None:
    """Renders a Markdown document with inline HTML anchors."""
    sink = MarkdownSink(config=MarkdownConfig())

    markdown = sink.render(report)

    assert markdown.startswith("# Android Test Report\n")
    assert "| Suite | Failures |\n| --- | --- |\n" in markdown
    assert (
        '| a\\|b | <a id="back-to-bad-failures" href="#bad-failures">1</a> |'
        in markdown
    )
    assert '### <a id="bad-failures" href="#back-to-bad-failures">' in markdown
    assert "Error: &lt;boom&gt;<br>\tat Foo" in markdown


def test_write_to_stdout(report: Report, capsys: pytest.CaptureFixture[str]) -> None:
    """Writes to stdout when no path is configured."""
    sink = MarkdownSink.from_config(MarkdownConfig())

    sink.write(report)

    assert capsys.readouterr().out == sink.render(report)


def test_write_to_file(report: Report, tmp_path: Path) -> None:
    """Writes the rendered report to the configured path."""
    path = tmp_path / "report.md"
    sink = MarkdownSink(config=MarkdownConfig(path=path))

    sink.write(report)

    assert path.read_text() == sink.render(report)


def test_write_failure_raises(report: Report, tmp_path: Path) -> None:
    """I/O errors surface as SinkWriteError."""
    sink = MarkdownSink(config=MarkdownConfig(path=tmp_path / "nope" / "report.md"))

    with pytest.raises(SinkWriteError):
        sink.write(report)

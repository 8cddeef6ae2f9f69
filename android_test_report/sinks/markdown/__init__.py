"""Markdown sink module."""

from android_test_report.sinks.markdown.config import MarkdownConfig
from android_test_report.sinks.markdown.manifest import markdown_manifest
from android_test_report.sinks.markdown.sink import MarkdownSink

__all__ = ["MarkdownConfig", "MarkdownSink", "markdown_manifest"]

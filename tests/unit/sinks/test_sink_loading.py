"""Tests for sink loading module."""

import pytest

from android_test_report.sinks.github_summary import github_summary_manifest
from android_test_report.sinks.loading import SinkNotFoundError, load_sink_manifest
from android_test_report.sinks.markdown import markdown_manifest


def test_load_sink_manifest_returns_manifest() -> None:
    """Loads sink manifests by key."""
    assert load_sink_manifest("github-summary") is github_summary_manifest
    assert load_sink_manifest("markdown") is markdown_manifest


def test_load_sink_manifest_raises_for_unknown_sink() -> None:
    """Raises SinkNotFoundError for unknown sink key."""
    with pytest.raises(SinkNotFoundError) as exc_info:
        load_sink_manifest("unknown-sink")

    assert "unknown-sink" in str(exc_info.value)
    assert "installed sinks" in str(exc_info.value)
    assert "markdown" in str(exc_info.value)

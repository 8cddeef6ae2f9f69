"""Markdown sink manifest."""

from android_test_report.sinks.manifest import SinkManifest
from android_test_report.sinks.markdown.config import MarkdownConfig
from android_test_report.sinks.markdown.sink import MarkdownSink

markdown_manifest = SinkManifest(
    config_cls=MarkdownConfig,
    sink_factory=MarkdownSink.from_config,
)

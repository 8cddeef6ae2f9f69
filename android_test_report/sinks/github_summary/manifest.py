"""GitHub Actions job summary sink manifest."""

from android_test_report.sinks.github_summary.config import GitHubSummaryConfig
from android_test_report.sinks.github_summary.sink import GitHubSummarySink
from android_test_report.sinks.manifest import SinkManifest

github_summary_manifest = SinkManifest(
    config_cls=GitHubSummaryConfig,
    sink_factory=GitHubSummarySink.from_config,
)

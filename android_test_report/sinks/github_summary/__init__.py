"""GitHub Actions job summary sink module."""

from android_test_report.sinks.github_summary.config import GitHubSummaryConfig
from android_test_report.sinks.github_summary.manifest import github_summary_manifest
from android_test_report.sinks.github_summary.sink import GitHubSummarySink

__all__ = ["GitHubSummaryConfig", "GitHubSummarySink", "github_summary_manifest"]

"""CLI entry point for the Android test report action."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from android_test_report.aggregator import Aggregator, Totals
from android_test_report.config import ReportConfig
from android_test_report.loader import ParseError, discover_reports, load_suites
from android_test_report.sinks.base import ReportSink, SinkWriteError
from android_test_report.sinks.loading import SinkNotFoundError, load_sink_manifest

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
    "empty": "⚠️",
}


def log_totals_summary(
    log: logging.Logger, suite_count: int, totals: Totals, *, aborted: bool = False
) -> None:
    """Log a formatted summary of the aggregated counts."""
    if aborted:
        status = "error"
    elif suite_count == 0:
        status = "empty"
    elif totals.failures or totals.errors:
        status = "failure"
    else:
        status = "success"

    log.info("=" * 80)
    log.info("Test Report Summary:")
    log.info("=" * 80)
    log.info(
        "%s %d suite(s): tests=%d skipped=%d failures=%d errors=%d (%.2fs)",
        STATUS_SYMBOLS[status],
        suite_count,
        totals.tests,
        totals.skipped,
        totals.failures,
        totals.errors,
        totals.time,
    )


def create_sink(sink_key: str, sink_config_json: str) -> ReportSink:
    """Load the sink plugin registered under ``sink_key`` and configure it.

    Raises:
        SinkNotFoundError: If no sink is registered under ``sink_key``
        json.JSONDecodeError: If the configuration is not valid JSON
        ValidationError: If the configuration does not fit the sink

    """
    manifest = load_sink_manifest(sink_key)
    config = manifest.config_cls.model_validate(json.loads(sink_config_json))
    return manifest.sink_factory(config)


def run(config: ReportConfig, sink: ReportSink) -> int:
    """Aggregate reports under the working directory and return exit code.

    The report is written even when the run fails, containing whatever was
    aggregated before the failure.
    """
    log = logging.getLogger("android_test_report")

    log.info("Getting Reports In: %s", config.working_directory)
    paths = discover_reports(config.working_directory)
    log.info("Found %d report file(s)", len(paths))

    aggregator = Aggregator(show_skipped=config.show_skipped)
    exit_code = 0
    error_message: str | None = None

    try:
        for record in load_suites(paths):
            aggregator.add(record)
    except ParseError as e:
        log.error("%s", e)
        error_message = str(e)
        exit_code = 1

    if not paths:
        log.error("No test reports found in %s", config.working_directory)
        exit_code = 1

    report = aggregator.build(config.report_header_postfix, failure=error_message)
    log_totals_summary(
        log,
        aggregator.suite_count,
        aggregator.totals,
        aborted=error_message is not None,
    )

    try:
        sink.write(report)
    except SinkWriteError as e:
        log.error("%s", e)
        return 1

    return exit_code


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Aggregate Android test reports into a single summary"
    )
    parser.add_argument(
        "--working-directory",
        type=Path,
        default=Path("."),
        help="Root directory to search for TEST-*.xml report files",
    )
    parser.add_argument(
        "--show-skipped",
        default="false",
        help="Whether to list skipped tests (true/false)",
    )
    parser.add_argument(
        "--report-header-postfix",
        default="",
        help="Text appended to the report heading",
    )
    parser.add_argument(
        "--sink",
        default="github-summary",
        help="Sink key (github-summary, markdown)",
    )
    parser.add_argument(
        "--sink-config",
        default="{}",
        help="JSON configuration for the sink",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("android_test_report")

    try:
        config = ReportConfig(
            working_directory=args.working_directory,
            show_skipped=args.show_skipped,
            report_header_postfix=args.report_header_postfix,
        )
        sink = create_sink(args.sink, args.sink_config)
    except (ValidationError, SinkNotFoundError, json.JSONDecodeError) as e:
        log.error("Invalid configuration: %s", e)
        sys.exit(2)

    sys.exit(run(config, sink))


if __name__ == "__main__":  # pragma: no cover
    main()

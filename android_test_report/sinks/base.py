"""Abstract base class for report sinks."""

from abc import ABC, abstractmethod

from android_test_report.report import Report


class SinkWriteError(Exception):
    """Raised when a sink cannot persist a report."""


class ReportSink(ABC):
    """Renders a report and persists it somewhere."""

    @abstractmethod
    def render(self, report: Report) -> str:
        """Render ``report`` into the sink's text format."""

    @abstractmethod
    def write(self, report: Report) -> None:
        """Persist ``report``.

        Raises:
            SinkWriteError: If the report could not be written

        """

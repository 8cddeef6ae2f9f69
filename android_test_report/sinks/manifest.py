"""Description of an installable report sink."""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from android_test_report.sinks.base import ReportSink


@dataclass(frozen=True, kw_only=True)
class SinkManifest[ConfigT: BaseModel]:
    """What the CLI needs to turn ``--sink``/``--sink-config`` into a sink.

    ``config_cls`` validates the JSON given on the command line and
    ``sink_factory`` builds the sink from the validated configuration.
    """

    config_cls: type[ConfigT]
    sink_factory: Callable[[ConfigT], ReportSink]

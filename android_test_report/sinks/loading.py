"""Lookup of report sinks registered by installed packages."""

from importlib.metadata import entry_points
from typing import Any

from android_test_report.sinks.manifest import SinkManifest

ENTRY_POINT_GROUP = "android_test_report.sinks"


class SinkNotFoundError(Exception):
    """Raised when ``--sink`` names no registered sink."""


def load_sink_manifest(key: str) -> SinkManifest[Any]:
    """Resolve the manifest registered under ``key``.

    Sinks are declared in the ``android_test_report.sinks`` entry point group,
    so other distributions can contribute renderers without touching the CLI.

    Raises:
        SinkNotFoundError: If ``key`` matches no entry point

    """
    registered = entry_points(group=ENTRY_POINT_GROUP)
    if key in registered.names:
        manifest: SinkManifest[Any] = registered[key].load()
        return manifest

    known = ", ".join(sorted(registered.names)) or "none"
    raise SinkNotFoundError(f"Unknown sink '{key}' (installed sinks: {known})")

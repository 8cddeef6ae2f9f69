"""Discover and decode JUnit-style report files."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from pydantic import ValidationError

from android_test_report.models.suite import (
    Failed,
    Outcome,
    Passed,
    Skipped,
    SuiteRecord,
    TestCase,
)

log = logging.getLogger(__name__)

REPORT_PATTERN = "TEST-*.xml"
SUITE_ATTRIBUTES = (
    "name",
    "tests",
    "skipped",
    "failures",
    "errors",
    "timestamp",
    "time",
    "hostname",
)


class ParseError(Exception):
    """Raised when a report file cannot be decoded into a suite record."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


def discover_reports(root: Path) -> Sequence[Path]:
    """Find report files anywhere below ``root``.

    Returns:
        Absolute paths of ``TEST-*.xml`` files, sorted

    """
    return sorted(
        path.resolve() for path in root.rglob(REPORT_PATTERN) if path.is_file()
    )


def parse_suite(path: Path) -> SuiteRecord:
    """Decode one report file.

    Both a bare ``<testsuite>`` root and a ``<testsuites>`` wrapper are
    accepted; with a wrapper only the first suite is read.

    Raises:
        ParseError: If the file cannot be read, is not well-formed XML, has no
            suite element, no test cases, or invalid attribute values

    """
    log.info("Parsing: %s", path)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ParseError(path, f"invalid XML ({e})") from e
    except OSError as e:
        raise ParseError(path, f"cannot read file ({e})") from e

    suite = root if root.tag == "testsuite" else root.find("testsuite")
    if suite is None:
        raise ParseError(path, f"no <testsuite> element under <{root.tag}>")

    testcases = suite.findall("testcase")
    if not testcases:
        raise ParseError(path, "no <testcase> elements")

    attributes = {
        name: value
        for name in SUITE_ATTRIBUTES
        if (value := suite.get(name)) is not None and value != ""
    }
    try:
        return SuiteRecord(
            **attributes,
            source=path,
            cases=[parse_case(element) for element in testcases],
        )
    except ValidationError as e:
        raise ParseError(path, str(e)) from e


def parse_case(element: ET.Element) -> TestCase:
    """Decode a ``<testcase>`` element."""
    attributes = dict(element.attrib)
    fields = {
        name: value
        for name in ("name", "classname", "time")
        if (value := attributes.get(name)) not in (None, "")
    }
    return TestCase(**fields, outcome=parse_outcome(element), attributes=attributes)


def parse_outcome(element: ET.Element) -> Outcome:
    """Classify a ``<testcase>`` by its failure, error, or skipped child."""
    failure = element.find("failure")
    if failure is None:
        failure = element.find("error")
    if failure is not None:
        return Failed(
            message=failure.get("message"),
            type=failure.get("type"),
            stack_trace=failure.text,
        )
    if element.find("skipped") is not None:
        return Skipped()
    return Passed()


def load_suites(paths: Iterable[Path]) -> Iterator[SuiteRecord]:
    """Parse ``paths`` in order, stopping at the first file that fails."""
    for path in paths:
        yield parse_suite(path)

"""Models for test suites decoded from JUnit-style report files."""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field

from android_test_report.models.base import Model


class Passed(Model):
    """Outcome of a test case that neither failed nor was skipped."""

    kind: Literal["passed"] = "passed"


class Failed(Model):
    """Outcome of a test case carrying a failure or error element."""

    kind: Literal["failed"] = "failed"
    message: str | None = Field(default=None, description="Failure message")
    type: str | None = Field(default=None, description="Exception type")
    stack_trace: str | None = Field(default=None, description="Element text")


class Skipped(Model):
    """Outcome of a test case carrying a skipped element."""

    kind: Literal["skipped"] = "skipped"


Outcome = Annotated[Passed | Failed | Skipped, Field(discriminator="kind")]


class TestCase(Model):
    """Single test method result within a suite."""

    __test__ = False

    name: str = Field(default="N/A", description="Test method name")
    classname: str | None = Field(default=None, description="Owning class")
    time: Decimal = Field(default=Decimal(0), ge=0, description="Elapsed seconds")
    outcome: Outcome = Field(default_factory=Passed)
    attributes: Mapping[str, str] = Field(
        default_factory=dict,
        description="Raw testcase attributes in document order",
    )


class SuiteRecord(Model):
    """One test suite report file.

    Declared counts are kept as reported; they may disagree with the number
    of cases that actually carry failure or skip elements.
    """

    name: str = Field(default="N/A", description="Suite identifier")
    tests: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    failures: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0)
    timestamp: str = Field(default="N/A", description="Opaque run timestamp")
    time: Decimal = Field(default=Decimal(0), ge=0, description="Elapsed seconds")
    hostname: str | None = Field(default=None, description="Never reported")
    source: Path | None = Field(
        default=None, description="Report file the suite was read from"
    )
    cases: Sequence[TestCase] = Field(..., min_length=1)

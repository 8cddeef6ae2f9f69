"""Tests for suite record models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from android_test_report.models.suite import Failed, Skipped, SuiteRecord, TestCase


def test_suite_record_defaults() -> None:
    """Absent attributes take their sentinel values."""
    record = SuiteRecord(cases=[TestCase(name="only")])

    assert record.name == "N/A"
    assert record.timestamp == "N/A"
    assert (record.tests, record.skipped, record.failures, record.errors) == (0, 0, 0, 0)
    assert record.time == Decimal(0)
    assert record.hostname is None


def test_suite_record_requires_cases() -> None:
    """A suite without cases is rejected."""
    with pytest.raises(ValidationError):
        SuiteRecord.model_validate({"name": "empty"})

    with pytest.raises(ValidationError):
        SuiteRecord(name="empty", cases=[])


def test_suite_record_rejects_negative_counts() -> None:
    """Counts and elapsed time cannot be negative."""
    with pytest.raises(ValidationError):
        SuiteRecord(failures=-1, cases=[TestCase()])

    with pytest.raises(ValidationError):
        SuiteRecord(time=Decimal("-0.1"), cases=[TestCase()])


def test_suite_record_coerces_strings() -> None:
    """Attribute strings are coerced to their declared types."""
    record = SuiteRecord.model_validate(
        {"tests": "12", "time": "3.25", "cases": [{"name": "a"}]}
    )

    assert record.tests == 12
    assert record.time == Decimal("3.25")


def test_outcome_discriminated_by_kind() -> None:
    """Outcome dictionaries decode into their variant."""
    case = TestCase.model_validate(
        {"name": "a", "outcome": {"kind": "failed", "message": "boom"}}
    )
    skipped = TestCase.model_validate({"name": "b", "outcome": {"kind": "skipped"}})

    assert case.outcome == Failed(message="boom")
    assert isinstance(skipped.outcome, Skipped)

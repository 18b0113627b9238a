# domain/quality/analysers/test_missing_values.py

import pytest

from sheet_quality.domain.quality.analysers.missing_values import check_missing_value
from sheet_quality.domain.quality.cells import MissingCell, NumericCell, TextCell
from sheet_quality.domain.quality.models import IssueKind, QualityIssue, Severity

pytestmark = pytest.mark.unit


def test_check_missing_value_flags_missing_cell() -> None:
    """
    ARRANGE: missing cell in row 2, column Name
    ACT:     check_missing_value
    ASSERT:  WARNING missing_value issue at that position
    """
    expected = QualityIssue(
        severity=Severity.WARNING,
        row=2,
        column="Name",
        message="Missing value",
        kind=IssueKind.MISSING_VALUE,
    )

    actual = check_missing_value(MissingCell(), 2, "Name")

    assert actual == expected


def test_check_missing_value_ignores_text() -> None:
    """
    ARRANGE: populated text cell
    ACT:     check_missing_value
    ASSERT:  returns None
    """
    actual = check_missing_value(TextCell("Bob"), 2, "Name")

    assert actual is None


def test_check_missing_value_ignores_zero() -> None:
    """
    ARRANGE: numeric zero cell
    ACT:     check_missing_value
    ASSERT:  returns None
    """
    actual = check_missing_value(NumericCell(0.0), 2, "Count")

    assert actual is None

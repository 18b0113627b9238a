# domain/quality/test_analyse.py

import dataclasses

import pytest

from sheet_quality.domain.quality.analyse import (
    analyse_quality,
    analyse_sheet_csv,
    compute_quality_score,
)
from sheet_quality.domain.quality.models import (
    IssueKind,
    QualityReport,
    Severity,
    Table,
    default_settings,
)
from sheet_quality.schemas.quality import AnalysisResponse

pytestmark = pytest.mark.unit


def _table(headers: tuple[str, ...], *rows: tuple[str, ...]) -> Table:
    return Table(headers, rows)


def test_analyse_quality_returns_report() -> None:
    """
    ARRANGE: small clean table
    ACT:     analyse_quality
    ASSERT:  returns QualityReport instance
    """
    actual = analyse_quality(_table(("Name",), ("Alice",)))

    assert isinstance(actual, QualityReport)


def test_analyse_quality_none_table() -> None:
    """
    ARRANGE: no table
    ACT:     analyse_quality
    ASSERT:  zero rows, no issues, score 100
    """
    actual = analyse_quality(None)

    assert (actual.total_rows, actual.issues, actual.score) == (0, (), 100)


def test_analyse_quality_headers_without_rows() -> None:
    """
    ARRANGE: headers but no data rows
    ACT:     analyse_quality
    ASSERT:  score 100 with no issues
    """
    actual = analyse_quality(_table(("Price", "Name")))

    assert (actual.score, actual.issues) == (100, ())


def test_analyse_quality_rows_without_headers() -> None:
    """
    ARRANGE: data rows but no headers
    ACT:     analyse_quality
    ASSERT:  every cell ignored, score 100, rows counted clean
    """
    actual = analyse_quality(_table((), ("", "-5"), ("x",)))

    assert (actual.score, actual.issues, actual.clean_rows) == (100, (), 2)


def test_analyse_quality_first_data_row_is_row_two() -> None:
    """
    ARRANGE: one data row with one missing cell
    ACT:     analyse_quality
    ASSERT:  issue reported on row 2
    """
    actual = analyse_quality(_table(("Name",), ("  ",)))

    assert actual.issues[0].row == 2


def test_analyse_quality_missing_value_issue() -> None:
    """
    ARRANGE: blank cell in column City
    ACT:     analyse_quality
    ASSERT:  one WARNING missing_value issue for that column
    """
    actual = analyse_quality(_table(("Name", "City"), ("Alice", "")))

    issue = actual.issues[0]
    assert (issue.severity, issue.kind, issue.column) == (
        Severity.WARNING,
        IssueKind.MISSING_VALUE,
        "City",
    )


def test_analyse_quality_one_issue_per_blank_cell() -> None:
    """
    ARRANGE: whitespace-only cell in a non-negative column
    ACT:     analyse_quality
    ASSERT:  exactly one issue for the cell
    """
    actual = analyse_quality(_table(("Price",), (" \t",)))

    assert len(actual.issues) == 1


def test_analyse_quality_negative_in_total_sales() -> None:
    """
    ARRANGE: Total Sales column holding -5
    ACT:     analyse_quality
    ASSERT:  one ERROR negative_value issue
    """
    actual = analyse_quality(_table(("Total Sales",), ("-5",)))

    assert [(i.severity, i.kind) for i in actual.issues] == [
        (Severity.ERROR, IssueKind.NEGATIVE_VALUE),
    ]


def test_analyse_quality_text_in_total_sales() -> None:
    """
    ARRANGE: Total Sales column holding non-numeric text
    ACT:     analyse_quality
    ASSERT:  no issues
    """
    actual = analyse_quality(_table(("Total Sales",), ("abc",)))

    assert actual.issues == ()


def test_analyse_quality_negative_in_notes() -> None:
    """
    ARRANGE: Notes column holding -5
    ACT:     analyse_quality
    ASSERT:  no issues
    """
    actual = analyse_quality(_table(("Notes",), ("-5",)))

    assert actual.issues == ()


def test_analyse_quality_ignores_cells_beyond_headers() -> None:
    """
    ARRANGE: row with extra blank and negative cells past the headers
    ACT:     analyse_quality
    ASSERT:  no issues and column count from headers
    """
    actual = analyse_quality(_table(("Name",), ("Alice", "", "-5")))

    assert (actual.issues, actual.total_columns) == ((), 1)


def test_analyse_quality_short_row_not_flagged() -> None:
    """
    ARRANGE: row shorter than the header list
    ACT:     analyse_quality
    ASSERT:  absent trailing cells are not reported
    """
    actual = analyse_quality(_table(("Name", "City", "Age"), ("Alice",)))

    assert actual.issues == ()


def test_analyse_quality_issue_order_is_row_major() -> None:
    """
    ARRANGE: issues spread across two rows and two columns
    ACT:     analyse_quality
    ASSERT:  issues ordered by row, then column
    """
    table = _table(
        ("Name", "Price"),
        ("", "-1"),
        ("", ""),
    )

    actual = analyse_quality(table)

    assert [(i.row, i.column) for i in actual.issues] == [
        (2, "Name"),
        (2, "Price"),
        (3, "Name"),
        (3, "Price"),
    ]


def test_analyse_quality_row_with_many_issues_counts_once() -> None:
    """
    ARRANGE: one row with two issues and one clean row
    ACT:     analyse_quality
    ASSERT:  one issue row and one clean row
    """
    table = _table(("Name", "Age"), ("", "-3"), ("Bob", "30"))

    actual = analyse_quality(table)

    assert (actual.issue_rows, actual.clean_rows) == (1, 1)


def test_analyse_quality_score_rounds_down() -> None:
    """
    ARRANGE: 1 issue across 3 cells (33.3% of cells)
    ACT:     analyse_quality
    ASSERT:  score is 67
    """
    actual = analyse_quality(_table(("A", "B", "C"), ("", "x", "y")))

    assert actual.score == 67


def test_analyse_quality_score_clamped_at_zero() -> None:
    """
    ARRANGE: every cell missing
    ACT:     analyse_quality
    ASSERT:  score is 0
    """
    actual = analyse_quality(_table(("A", "B"), ("", ""), ("", "")))

    assert actual.score == 0


def test_analyse_quality_dimensions() -> None:
    """
    ARRANGE: table with 3 headers and 2 rows
    ACT:     analyse_quality
    ASSERT:  totals match the table shape
    """
    table = _table(("A", "B", "C"), ("1", "2", "3"), ("4", "5", "6"))

    actual = analyse_quality(table)

    assert (actual.total_rows, actual.total_columns) == (2, 3)


@pytest.mark.parametrize(
    "rows",
    [
        (),
        (("", "-1", "x"),),
        (("a", "b", "c"), ("", "", "")),
        (("1", "-2", ""), ("x",), ("", "", "", "")),
    ],
)
def test_analyse_quality_row_accounting(rows: tuple[tuple[str, ...], ...]) -> None:
    """
    ARRANGE: assorted tables, including ragged rows
    ACT:     analyse_quality
    ASSERT:  clean and issue rows sum to total, score within 0..100
    """
    actual = analyse_quality(Table(("Name", "Count", "Notes"), rows))

    assert actual.clean_rows + actual.issue_rows == actual.total_rows
    assert 0 <= actual.score <= 100


def test_analyse_quality_is_idempotent() -> None:
    """
    ARRANGE: table with mixed issues
    ACT:     analyse_quality twice
    ASSERT:  identical reports
    """
    table = _table(("Name", "Price"), ("", "-1"), ("Bob", "2"))

    first = analyse_quality(table)
    second = analyse_quality(table)

    assert first == second


def test_analyse_quality_custom_keywords() -> None:
    """
    ARRANGE: settings whose only keyword is "balance"
    ACT:     analyse_quality on Balance and Price columns holding negatives
    ASSERT:  only Balance is flagged
    """
    settings = dataclasses.replace(
        default_settings(),
        non_negative_keywords=("balance",),
    )
    table = _table(("Balance", "Price"), ("-1", "-1"))

    actual = analyse_quality(table, settings)

    assert [issue.column for issue in actual.issues] == ["Balance"]


def test_analyse_quality_custom_parser() -> None:
    """
    ARRANGE: parser accepting thousands separators
    ACT:     analyse_quality on "-1,000" in a Price column
    ASSERT:  negative value flagged
    """
    settings = dataclasses.replace(
        default_settings(),
        numeric_parser=lambda raw: float(raw.replace(",", "")),
    )

    actual = analyse_quality(_table(("Price",), ("-1,000",)), settings)

    assert actual.issues[0].kind is IssueKind.NEGATIVE_VALUE


def test_analyse_quality_outliers_off_by_default() -> None:
    """
    ARRANGE: numeric column with one extreme value
    ACT:     analyse_quality with default settings
    ASSERT:  no issues
    """
    rows = tuple((str(value),) for value in (1, 2, 3, 4, 5, 6, 7, 1000))

    actual = analyse_quality(Table(("Score",), rows))

    assert actual.issues == ()


def test_analyse_quality_outlier_detection_enabled() -> None:
    """
    ARRANGE: numeric column with one extreme value, outliers enabled
    ACT:     analyse_quality
    ASSERT:  single INFO outlier issue on the extreme row
    """
    rows = tuple((str(value),) for value in (1, 2, 3, 4, 5, 6, 7, 1000))
    settings = dataclasses.replace(default_settings(), detect_outliers=True)

    actual = analyse_quality(Table(("Score",), rows), settings)

    assert [(i.severity, i.kind, i.row) for i in actual.issues] == [
        (Severity.INFO, IssueKind.OUTLIER, 9),
    ]


def test_analyse_quality_outliers_follow_negative_check() -> None:
    """
    ARRANGE: extreme negative in a Price column, outliers enabled
    ACT:     analyse_quality
    ASSERT:  negative_value then outlier for the same cell
    """
    rows = tuple((str(value),) for value in (1, 2, 3, 4, 5, 6, 7, -1000))
    settings = dataclasses.replace(default_settings(), detect_outliers=True)

    actual = analyse_quality(Table(("Price",), rows), settings)

    assert [issue.kind for issue in actual.issues] == [
        IssueKind.NEGATIVE_VALUE,
        IssueKind.OUTLIER,
    ]


def test_compute_quality_score_no_cells() -> None:
    """
    ARRANGE: zero rows
    ACT:     compute_quality_score
    ASSERT:  100
    """
    actual = compute_quality_score(0, 0, 5)

    assert actual == 100


def test_compute_quality_score_exact_percentages() -> None:
    """
    ARRANGE: 29 issues across 100 cells
    ACT:     compute_quality_score
    ASSERT:  71
    """
    actual = compute_quality_score(29, 10, 10)

    assert actual == 71


def test_compute_quality_score_more_issues_than_cells() -> None:
    """
    ARRANGE: more issues than cells
    ACT:     compute_quality_score
    ASSERT:  0
    """
    actual = compute_quality_score(5, 1, 2)

    assert actual == 0


def test_analyse_sheet_csv_returns_response() -> None:
    """
    ARRANGE: CSV text with one missing value
    ACT:     analyse_sheet_csv
    ASSERT:  AnalysisResponse with one issue
    """
    actual = analyse_sheet_csv("Name,Price\nAlice,\n")

    assert isinstance(actual, AnalysisResponse)
    assert len(actual.quality.issues) == 1


def test_analyse_sheet_csv_empty_raises() -> None:
    """
    ARRANGE: empty CSV text
    ACT:     analyse_sheet_csv
    ASSERT:  raises ValueError
    """
    with pytest.raises(ValueError, match="sheet is empty"):
        analyse_sheet_csv("")

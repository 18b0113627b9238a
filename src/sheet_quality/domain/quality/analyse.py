# quality/analyse.py

import logging
from collections.abc import Iterator, Sequence

from sheet_quality.adapters import parse_csv_table
from sheet_quality.schemas.quality import AnalysisResponse

from .analysers import (
    ColumnProfile,
    build_column_profiles,
    check_missing_value,
    check_negative_value,
    check_outlier,
)
from .cells import Cell, classify_cell
from .models import (
    QualityIssue,
    QualityReport,
    QualitySettings,
    Table,
    default_settings,
)
from .report import build_analysis_response

logger = logging.getLogger(__name__)

# Sheet row 1 holds the headers, so data row 0 is displayed as row 2
FIRST_DATA_ROW = 2


def analyse_quality(
    table: Table | None,
    settings: QualitySettings | None = None,
) -> QualityReport:
    """
    Run every cell check over a table and summarise the results.

    Each cell is classified once, then checked for a missing value, a negative
    value in a non-negative column and, when enabled, an outlier. Cells beyond
    the last header are ignored. The analysis never fails: an absent or empty
    table produces a report with no issues and a score of 100.

    Args:
        table: Headers and string rows to analyse.
        settings: Optional check configuration (defaults to standard settings).

    Returns:
        QualityReport: Score, row classification and ordered issues.
    """
    active_settings = settings or default_settings()
    active_table = table or Table()

    grid = _classify_grid(active_table, active_settings)
    profiles = build_column_profiles(active_table, grid, active_settings)

    issues = tuple(_scan(active_table, grid, profiles))
    rows_with_issues = {issue.row for issue in issues}

    total_rows = len(active_table.rows)
    total_columns = len(active_table.headers)

    report = QualityReport(
        score=compute_quality_score(len(issues), total_rows, total_columns),
        total_rows=total_rows,
        total_columns=total_columns,
        clean_rows=total_rows - len(rows_with_issues),
        issue_rows=len(rows_with_issues),
        issues=issues,
    )

    logger.info(
        "Quality analysis complete: %d rows, %d columns, %d issues, score %d",
        report.total_rows,
        report.total_columns,
        len(report.issues),
        report.score,
    )

    return report


def analyse_sheet_csv(
    text: str,
    settings: QualitySettings | None = None,
) -> AnalysisResponse:
    """
    Parse exported sheet CSV, analyse it and build the response payload.

    Args:
        text: CSV document text; the first record holds the headers.
        settings: Optional check configuration.

    Returns:
        AnalysisResponse: The sheet paired with its quality report.

    Raises:
        ValueError: If the CSV text is empty or malformed.
    """
    table = parse_csv_table(text)
    return build_analysis_response(table, analyse_quality(table, settings))


def compute_quality_score(
    issue_count: int,
    total_rows: int,
    total_columns: int,
) -> int:
    """
    Convert an issue count into a 0-100 quality score.

    The score drops one point per percent of cells with an issue, rounded
    down, and never goes below zero. A table without cells scores 100.

    Args:
        issue_count: Number of issues detected.
        total_rows: Data rows in the table.
        total_columns: Headers in the table.

    Returns:
        int: Quality score between 0 and 100.
    """
    total_cells = total_rows * total_columns
    if total_cells <= 0:
        return 100

    return max(0, 100 - (issue_count * 100) // total_cells)


def _classify_grid(
    table: Table,
    settings: QualitySettings,
) -> tuple[tuple[Cell, ...], ...]:
    """
    Classify every analysable cell, dropping cells past the last header.

    Returns:
        tuple[tuple[Cell, ...], ...]: Classified cells, row-major.
    """
    width = len(table.headers)
    return tuple(
        tuple(classify_cell(raw, settings.numeric_parser) for raw in row[:width])
        for row in table.rows
    )


def _scan(
    table: Table,
    grid: Sequence[Sequence[Cell]],
    profiles: Sequence[ColumnProfile],
) -> Iterator[QualityIssue]:
    """
    Yield issues in row-major order, then column order, then check order.

    Returns:
        Iterator[QualityIssue]: Issues in scan order.
    """
    for row_index, (raw_row, cells) in enumerate(zip(table.rows, grid)):
        row_number = row_index + FIRST_DATA_ROW

        for raw, cell, profile in zip(raw_row, cells, profiles):
            candidates = (
                check_missing_value(cell, row_number, profile.name),
                check_negative_value(
                    cell,
                    raw,
                    row_number,
                    profile.name,
                    profile.non_negative,
                ),
                check_outlier(cell, raw, row_number, profile.name, profile.bounds),
            )
            yield from (issue for issue in candidates if issue is not None)

# analysers/missing_values.py

from ..cells import Cell, MissingCell
from ..models import IssueKind, QualityIssue, Severity


def check_missing_value(
    cell: Cell,
    row_number: int,
    column: str,
) -> QualityIssue | None:
    """
    Flag a cell that is empty once whitespace is trimmed.

    Args:
        cell: The classified cell.
        row_number: 1-based sheet row of the cell.
        column: Header name of the cell's column.

    Returns:
        QualityIssue | None: WARNING missing-value issue, or None.
    """
    if not isinstance(cell, MissingCell):
        return None

    return QualityIssue(
        severity=Severity.WARNING,
        row=row_number,
        column=column,
        message="Missing value",
        kind=IssueKind.MISSING_VALUE,
    )

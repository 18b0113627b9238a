# analysers/negative_values.py

from ..cells import Cell, NumericCell
from ..models import IssueKind, QualityIssue, Severity


def check_negative_value(
    cell: Cell,
    raw: str,
    row_number: int,
    column: str,
    non_negative: bool,
) -> QualityIssue | None:
    """
    Flag a negative number in a column that should only hold non-negative values.

    Text cells are never flagged; numeric format validation is not this
    check's concern.

    Args:
        cell: The classified cell.
        raw: The cell text, embedded in the message as given.
        row_number: 1-based sheet row of the cell.
        column: Header name of the cell's column.
        non_negative: Whether the column's name marks it as non-negative.

    Returns:
        QualityIssue | None: ERROR negative-value issue, or None.
    """
    if not non_negative or not _is_negative(cell):
        return None

    return QualityIssue(
        severity=Severity.ERROR,
        row=row_number,
        column=column,
        message=f"Negative value {raw} (should be positive)",
        kind=IssueKind.NEGATIVE_VALUE,
    )


def _is_negative(cell: Cell) -> bool:
    """
    Check whether the cell holds a number strictly below zero.

    Returns:
        bool: True for a negative NumericCell.
    """
    return isinstance(cell, NumericCell) and cell.value < 0

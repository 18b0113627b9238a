# analysers/outliers.py

import math
from collections.abc import Iterable
from typing import NamedTuple

from ..cells import Cell, NumericCell
from ..models import IssueKind, QualityIssue, Severity

MIN_SAMPLE_SIZE = 4
DEFAULT_FENCE_FACTOR = 1.5


class OutlierBounds(NamedTuple):
    """
    Tukey fences for a column of numeric values.

    Attributes:
        lower: Values strictly below this are outliers.
        upper: Values strictly above this are outliers.
    """

    lower: float
    upper: float

    def contains(self, value: float) -> bool:
        """
        Check whether a value lies within the fences (inclusive).

        Returns:
            bool: True when lower <= value <= upper.
        """
        return self.lower <= value <= self.upper


UNBOUNDED = OutlierBounds(-math.inf, math.inf)


def compute_outlier_bounds(
    values: Iterable[float],
    fence_factor: float = DEFAULT_FENCE_FACTOR,
    min_sample: int = MIN_SAMPLE_SIZE,
) -> OutlierBounds:
    """
    Compute IQR fences using positional, non-interpolated quartiles.

    Values are sorted ascending; q1 is the value at index n // 4 and q3 the
    value at index 3n // 4. Fences sit fence_factor * IQR beyond each quartile.

    Args:
        values: Numeric values of a single column.
        fence_factor: IQR multiplier for the fences.
        min_sample: Fewest values for which fences are computed.

    Returns:
        OutlierBounds: The fences, or (-inf, inf) when too few values are given.
    """
    ordered = sorted(values)
    count = len(ordered)

    if count < max(min_sample, 1):
        return UNBOUNDED

    q1 = ordered[count // 4]
    q3 = ordered[(count * 3) // 4]
    iqr = q3 - q1

    return OutlierBounds(q1 - fence_factor * iqr, q3 + fence_factor * iqr)


def column_outlier_bounds(
    cells: Iterable[Cell],
    fence_factor: float = DEFAULT_FENCE_FACTOR,
    min_sample: int = MIN_SAMPLE_SIZE,
) -> OutlierBounds:
    """
    Compute fences from the numeric cells of one column.

    Missing and text cells are skipped.

    Returns:
        OutlierBounds: Fences for the column's numeric values.
    """
    values = [cell.value for cell in cells if isinstance(cell, NumericCell)]
    return compute_outlier_bounds(values, fence_factor, min_sample)


def check_outlier(
    cell: Cell,
    raw: str,
    row_number: int,
    column: str,
    bounds: OutlierBounds,
) -> QualityIssue | None:
    """
    Flag a numeric cell lying outside its column's fences.

    Returns:
        QualityIssue | None: INFO outlier issue, or None when within bounds.
    """
    if not isinstance(cell, NumericCell) or bounds.contains(cell.value):
        return None

    return QualityIssue(
        severity=Severity.INFO,
        row=row_number,
        column=column,
        message=(
            f"Outlier value {raw} "
            f"(expected between {bounds.lower:g} and {bounds.upper:g})"
        ),
        kind=IssueKind.OUTLIER,
    )

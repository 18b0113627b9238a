# analysers/_helpers.py

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..cells import Cell, requires_non_negative
from ..models import QualitySettings, Table
from .outliers import UNBOUNDED, OutlierBounds, column_outlier_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnProfile:
    """
    Per-column facts shared by every cell check in that column.
    """

    name: str
    non_negative: bool
    bounds: OutlierBounds = UNBOUNDED


def build_column_profiles(
    table: Table,
    grid: Sequence[Sequence[Cell]],
    settings: QualitySettings,
) -> tuple[ColumnProfile, ...]:
    """
    Derive a profile for every header in the table.

    Outlier fences are only computed when outlier detection is enabled.

    Args:
        table: The table being analysed.
        grid: Classified cells, row-major, truncated to the header count.
        settings: Quality settings in force.

    Returns:
        tuple[ColumnProfile, ...]: One profile per header, in header order.
    """
    return tuple(
        ColumnProfile(
            name=header,
            non_negative=requires_non_negative(
                header,
                settings.non_negative_keywords,
            ),
            bounds=_bounds_for(index, header, grid, settings),
        )
        for index, header in enumerate(table.headers)
    )


def _bounds_for(
    index: int,
    header: str,
    grid: Sequence[Sequence[Cell]],
    settings: QualitySettings,
) -> OutlierBounds:
    """
    Compute outlier fences for one column, or leave it unbounded.

    Returns:
        OutlierBounds: Fences for the column.
    """
    if not settings.detect_outliers:
        return UNBOUNDED

    bounds = column_outlier_bounds(
        (row[index] for row in grid if index < len(row)),
        settings.outlier_fence_factor,
        settings.outlier_min_sample,
    )
    logger.debug(
        "Outlier fences for column %r: [%s, %s]",
        header,
        bounds.lower,
        bounds.upper,
    )
    return bounds

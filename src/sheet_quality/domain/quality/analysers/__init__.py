# quality/analysers/__init__.py

from ._helpers import ColumnProfile, build_column_profiles
from .missing_values import check_missing_value
from .negative_values import check_negative_value
from .outliers import (
    UNBOUNDED,
    OutlierBounds,
    check_outlier,
    column_outlier_bounds,
    compute_outlier_bounds,
)

__all__ = [
    "UNBOUNDED",
    "ColumnProfile",
    "OutlierBounds",
    "build_column_profiles",
    "check_missing_value",
    "check_negative_value",
    "check_outlier",
    "column_outlier_bounds",
    "compute_outlier_bounds",
]

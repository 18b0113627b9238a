# domain/__init__.py

from .quality import (
    analyse_quality,
    analyse_sheet_csv,
    build_analysis_response,
    compute_outlier_bounds,
    save_analysis_response,
)

__all__ = [
    "analyse_quality",
    "analyse_sheet_csv",
    "build_analysis_response",
    "compute_outlier_bounds",
    "save_analysis_response",
]

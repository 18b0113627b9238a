# sheet_quality/__init__.py

from .domain import (
    analyse_quality,
    analyse_sheet_csv,
    build_analysis_response,
    compute_outlier_bounds,
    save_analysis_response,
)
from .domain.quality import QualityReport, QualitySettings, Table, default_settings
from .schemas import AnalysisResponse

__all__ = [
    "analyse_quality",
    "analyse_sheet_csv",
    "build_analysis_response",
    "compute_outlier_bounds",
    "save_analysis_response",
    "QualityReport",
    "QualitySettings",
    "Table",
    "default_settings",
    "AnalysisResponse",
]

# domain/quality/__init__.py

from .analyse import analyse_quality, analyse_sheet_csv, compute_quality_score
from .analysers import OutlierBounds, compute_outlier_bounds
from .cells import (
    Cell,
    MissingCell,
    NumericCell,
    TextCell,
    classify_cell,
    parse_decimal,
    requires_non_negative,
)
from .models import (
    NON_NEGATIVE_KEYWORDS,
    IssueKind,
    QualityIssue,
    QualityReport,
    QualitySettings,
    Severity,
    Table,
    default_settings,
)
from .report import build_analysis_response, save_analysis_response
from .summary import ScoreGrade, count_by_severity, grade_score, is_dashboard_ready

__all__ = [
    # analysis
    "analyse_quality",
    "analyse_sheet_csv",
    "compute_quality_score",
    "compute_outlier_bounds",
    "OutlierBounds",
    # cells
    "Cell",
    "MissingCell",
    "NumericCell",
    "TextCell",
    "classify_cell",
    "parse_decimal",
    "requires_non_negative",
    # models
    "NON_NEGATIVE_KEYWORDS",
    "IssueKind",
    "QualityIssue",
    "QualityReport",
    "QualitySettings",
    "Severity",
    "Table",
    "default_settings",
    # reporting
    "build_analysis_response",
    "save_analysis_response",
    "ScoreGrade",
    "count_by_severity",
    "grade_score",
    "is_dashboard_ready",
]

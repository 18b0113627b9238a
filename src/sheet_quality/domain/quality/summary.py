# quality/summary.py

from enum import Enum

from .models import QualityReport, QualitySettings, Severity, default_settings


class ScoreGrade(Enum):
    """
    Human-facing label for a quality score.
    """

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


def grade_score(
    score: int,
    settings: QualitySettings | None = None,
) -> ScoreGrade:
    """
    Map a quality score onto a grade using the configured cut-offs.

    Args:
        score: Quality score between 0 and 100.
        settings: Optional grading thresholds.

    Returns:
        ScoreGrade: The grade band containing the score.
    """
    active_settings = settings or default_settings()

    if score >= active_settings.excellent_score:
        return ScoreGrade.EXCELLENT
    if score >= active_settings.good_score:
        return ScoreGrade.GOOD
    if score >= active_settings.fair_score:
        return ScoreGrade.FAIR
    return ScoreGrade.POOR


def count_by_severity(report: QualityReport) -> dict[Severity, int]:
    """
    Count issues per severity, including severities with no issues.

    Returns:
        dict[Severity, int]: Issue count keyed by severity, in enum order.
    """
    counts = dict.fromkeys(Severity, 0)
    for issue in report.issues:
        counts[issue.severity] += 1
    return counts


def is_dashboard_ready(
    report: QualityReport,
    settings: QualitySettings | None = None,
) -> bool:
    """
    Decide whether a sheet is clean enough to build dashboards from.

    Requires the score to reach the readiness threshold and no ERROR issues.

    Returns:
        bool: True when the sheet can be used as-is.
    """
    active_settings = settings or default_settings()
    has_errors = any(issue.severity is Severity.ERROR for issue in report.issues)
    return report.score >= active_settings.ready_score and not has_errors

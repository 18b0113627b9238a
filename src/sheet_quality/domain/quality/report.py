# quality/report.py

import json
import logging
from pathlib import Path

from sheet_quality.schemas.quality import (
    AnalysisResponse,
    QualityIssueOutput,
    QualityOutput,
    SheetDataOutput,
)

from .models import QualityIssue, QualityReport, Table

logger = logging.getLogger(__name__)


def build_analysis_response(
    table: Table,
    report: QualityReport,
) -> AnalysisResponse:
    """
    Convert a table and its internal quality report into the wire envelope.

    Args:
        table: The analysed table, echoed back unchanged.
        report: Quality report produced for the table.

    Returns:
        AnalysisResponse: Pydantic-serialisable response payload.
    """
    quality = QualityOutput(
        score=report.score,
        total_rows=report.total_rows,
        total_columns=report.total_columns,
        clean_rows=report.clean_rows,
        issue_rows=report.issue_rows,
        issues=tuple(_convert_issue(issue) for issue in report.issues),
    )
    data = SheetDataOutput(headers=table.headers, rows=table.rows)

    return AnalysisResponse(data=data, quality=quality)


def save_analysis_response(response: AnalysisResponse, dest: Path) -> Path:
    """
    Write the analysis response as JSON, using the wire key names.

    Args:
        response: The response payload to persist.
        dest: Destination file; parent directories are created as needed.

    Returns:
        Path: Path to the written JSON file.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)

    dest.write_text(
        json.dumps(
            response.model_dump(mode="json", by_alias=True),
            indent=2,
            ensure_ascii=False,
        )
        + "\n",
    )

    logger.info("Quality report saved to %s", dest)
    return dest


def _convert_issue(issue: QualityIssue) -> QualityIssueOutput:
    """
    Convert an internal QualityIssue dataclass to its Pydantic output.

    Returns:
        QualityIssueOutput: Issue with enum members flattened to strings.
    """
    return QualityIssueOutput(
        severity=issue.severity.value,
        row=issue.row,
        column=issue.column,
        message=issue.message,
        kind=issue.kind.value,
    )

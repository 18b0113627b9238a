# schemas/__init__.py

from .quality import (
    AnalysisResponse,
    QualityIssueOutput,
    QualityOutput,
    SheetDataOutput,
)

__all__ = [
    "AnalysisResponse",
    "QualityIssueOutput",
    "QualityOutput",
    "SheetDataOutput",
]

# schemas/quality.py

from pydantic import BaseModel, ConfigDict, Field


class QualityIssueOutput(BaseModel):
    """
    A single cell-level issue as sent to report consumers.
    """

    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    severity: str
    row: int
    column: str
    message: str
    kind: str = Field(alias="type")


class QualityOutput(BaseModel):
    """
    Aggregate quality results, serialised with camelCase keys.
    """

    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    total_rows: int = Field(alias="totalRows", ge=0)
    total_columns: int = Field(alias="totalColumns", ge=0)
    clean_rows: int = Field(alias="cleanRows", ge=0)
    issue_rows: int = Field(alias="issueRows", ge=0)
    issues: tuple[QualityIssueOutput, ...]


class SheetDataOutput(BaseModel):
    """
    The analysed table echoed back alongside its quality results.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


class AnalysisResponse(BaseModel):
    """
    Machine-readable envelope pairing a sheet with its quality report.

    Serialise with ``model_dump(by_alias=True)`` to obtain the wire keys.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    data: SheetDataOutput
    quality: QualityOutput

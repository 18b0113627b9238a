# quality/models.py

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .cells import parse_decimal

NON_NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "price",
    "cost",
    "amount",
    "total",
    "sum",
    "revenue",
    "sales",
    "quantity",
    "count",
    "number",
    "qty",
    "age",
    "population",
    "weight",
    "height",
    "distance",
    "duration",
    "time",
)


class Severity(Enum):
    """
    How serious a detected issue is.

    Attributes:
        ERROR: The value is certainly wrong.
        WARNING: The value is absent or suspicious.
        INFO: The value is noteworthy but plausibly valid.
    """

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class IssueKind(Enum):
    """
    Enumeration of issue types understood by report consumers.

    Only MISSING_VALUE and NEGATIVE_VALUE are raised by default; OUTLIER is
    raised when outlier detection is enabled. The remaining kinds are part of
    the wire vocabulary but no check produces them.
    """

    MISSING_VALUE = "missing_value"
    NEGATIVE_VALUE = "negative_value"
    OUTLIER = "outlier"
    TYPE_MISMATCH = "type_mismatch"
    RANGE_ANOMALY = "range_anomaly"
    DUPLICATE_ROW = "duplicate_row"
    FORMAT_INCONSISTENCY = "format_inconsistency"


@dataclass(frozen=True)
class Table:
    """
    Header names and row-major string cells of a single sheet.

    Rows may be shorter or longer than the header list; cells beyond the last
    header are never analysed.
    """

    headers: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", tuple(self.headers))
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))


@dataclass(frozen=True)
class QualitySettings:
    """
    Configuration values controlling quality checks and grading.
    """

    # Header substrings marking columns whose values cannot be negative
    non_negative_keywords: tuple[str, ...] = NON_NEGATIVE_KEYWORDS
    # Policy turning cell text into a number, or None when not numeric
    numeric_parser: Callable[[str], float | None] = field(
        default=parse_decimal,
        compare=False,
    )
    # Flag numeric cells outside their column's IQR fences
    detect_outliers: bool = False
    # IQR multiplier applied on either side of the quartiles
    outlier_fence_factor: float = 1.5
    # Columns with fewer numeric values than this never produce outliers
    outlier_min_sample: int = 4
    # Scores at or above this grade as excellent
    excellent_score: int = 90
    # Scores at or above this grade as good
    good_score: int = 70
    # Scores at or above this grade as fair; anything lower is poor
    fair_score: int = 50
    # Minimum score for a sheet to be used for dashboards
    ready_score: int = 90


def default_settings() -> QualitySettings:
    """
    Return default quality settings.

    Returns:
        QualitySettings: Default configuration values.
    """
    return QualitySettings()


@dataclass(frozen=True)
class QualityIssue:
    """
    A single problem found in one cell.

    The row is the 1-based sheet row, so the first data row is row 2.
    """

    severity: Severity
    row: int
    column: str
    message: str
    kind: IssueKind


@dataclass(frozen=True)
class QualityReport:
    """
    Aggregate quality results for one table.
    """

    score: int
    total_rows: int
    total_columns: int
    clean_rows: int
    issue_rows: int
    issues: tuple[QualityIssue, ...]

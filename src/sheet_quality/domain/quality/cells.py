# quality/cells.py

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MissingCell:
    """
    A cell holding nothing but whitespace.
    """


@dataclass(frozen=True)
class NumericCell:
    """
    A cell whose text parses as a finite number.
    """

    value: float


@dataclass(frozen=True)
class TextCell:
    """
    A populated cell that does not parse as a number.
    """

    text: str


Cell = MissingCell | NumericCell | TextCell


def parse_decimal(raw: str) -> float | None:
    """
    Parse cell text as a 64-bit float using decimal notation.

    Surrounding whitespace is ignored. A leading sign, a decimal point and
    exponent notation are accepted. Digit separators and non-finite results
    (nan, inf) are rejected.

    Args:
        raw: The cell text to parse.

    Returns:
        float | None: The parsed value, or None if the text is not numeric.
    """
    text = raw.strip()
    if not text or "_" in text:
        return None

    try:
        value = float(text)
    except ValueError:
        return None

    return value if math.isfinite(value) else None


def is_missing(raw: str) -> bool:
    """
    Check whether a cell is empty once surrounding whitespace is removed.

    Returns:
        bool: True when the trimmed cell is the empty string.
    """
    return raw.strip() == ""


def classify_cell(
    raw: str,
    parser: Callable[[str], float | None] = parse_decimal,
) -> Cell:
    """
    Classify raw cell text as missing, numeric or free text.

    Args:
        raw: The cell text as read from the sheet.
        parser: Numeric parsing policy applied to populated cells.

    Returns:
        Cell: MissingCell, NumericCell or TextCell.
    """
    if is_missing(raw):
        return MissingCell()

    value = parser(raw)
    if value is None:
        return TextCell(raw)

    return NumericCell(value)


def requires_non_negative(header: str, keywords: Iterable[str]) -> bool:
    """
    Check whether a column name suggests its values can never be negative.

    Matching is a case-insensitive substring test, so "Total Sales" matches
    both "total" and "sales".

    Args:
        header: The column name.
        keywords: Keywords naming non-negative quantities.

    Returns:
        bool: True when any keyword occurs within the header.
    """
    lowered = header.lower()
    return any(keyword.lower() in lowered for keyword in keywords)

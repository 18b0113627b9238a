# adapters/csv_table.py

import csv
import io
import logging

from sheet_quality.domain.quality.models import Table

logger = logging.getLogger(__name__)


def parse_csv_table(text: str) -> Table:
    """
    Parse an exported sheet's CSV text into a Table.

    The first record supplies the headers, trimmed of surrounding whitespace.
    Every later record becomes a data row exactly as read; row lengths are not
    checked against the header count. Blank lines are skipped.

    Args:
        text: CSV document text.

    Returns:
        Table: Headers and rows of the sheet.

    Raises:
        ValueError: If the document is malformed or holds no records.
    """
    try:
        records = _read_records(text.removeprefix("\ufeff"))
    except csv.Error as error:
        raise ValueError(f"failed to parse CSV: {error}") from error

    if not records:
        raise ValueError("sheet is empty")

    headers, *rows = records
    logger.debug("Parsed CSV with %d headers and %d rows", len(headers), len(rows))

    return Table(
        headers=tuple(header.strip() for header in headers),
        rows=tuple(tuple(row) for row in rows),
    )


def _read_records(text: str) -> list[list[str]]:
    """
    Read all non-blank CSV records, rejecting malformed quoting.

    Returns:
        list[list[str]]: Records in document order.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    return [record for record in reader if record]

"""
CSV ingestion.

Parses an uploaded sentiment CSV into Row objects.
Parsing never raises: malformed input degrades to best-effort rows or
an empty list, and load_upload() turns unusable results into errors.
"""

import logging
import re
from typing import List, Optional

from sentimen.errors import EmptyDatasetError, FormatRejectedError
from sentimen.models.row import NEGATIVE, POSITIVE, Row
import config.settings as settings

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_rating(value: str) -> int:
    """
    Parse the leading integer of a rating field.

    "4" -> 4, "4.5" -> 4, "5 stars" -> 5; anything without a leading
    integer -> 0.
    """
    match = _LEADING_INT.match(value or "")
    if not match:
        return 0
    return int(match.group(1))


def parse_csv(content: str) -> List[Row]:
    """
    Parse raw CSV text into rows.

    The header must contain the columns Ulasan, Rating, Kategori,
    Nama Produk and label (exact, case-sensitive); extra columns and any
    column order are allowed. Fields are split on bare commas with no
    quote handling, so a comma inside a review shifts the later columns.

    Args:
        content: Raw file text

    Returns:
        List of Row objects, or [] when there is no header or a required
        column is missing
    """
    lines = [line.strip() for line in content.split("\n")]
    lines = [line for line in lines if line]
    if len(lines) < 1:
        logger.warning("CSV is empty")
        return []

    headers = [h.strip() for h in lines[0].split(",")]
    missing = [col for col in settings.REQUIRED_COLUMNS if col not in headers]
    if missing:
        logger.warning(f"CSV header is missing required columns: {missing}")
        return []

    ulasan_idx, rating_idx, kategori_idx, produk_idx, label_idx = (
        headers.index(col) for col in settings.REQUIRED_COLUMNS
    )

    rows = []
    for line in lines[1:]:
        cols = [c.strip() for c in line.split(",")]
        rows.append(Row(
            ulasan=_field(cols, ulasan_idx),
            rating=parse_rating(_field(cols, rating_idx)),
            kategori=_field(cols, kategori_idx),
            nama_produk=_field(cols, produk_idx),
            sentiment=POSITIVE if _field(cols, label_idx) == settings.POSITIVE_LABEL_VALUE else NEGATIVE
        ))

    logger.info(f"Parsed {len(rows)} rows from CSV")
    return rows


def _field(cols: List[str], idx: int) -> str:
    """Column value, or "" when the line is too short."""
    return cols[idx] if idx < len(cols) else ""


def is_csv_upload(filename: str, content_type: Optional[str] = None) -> bool:
    """
    Check an upload is a CSV file.

    The content type decides when given; without one, fall back to the
    file extension.
    """
    if content_type:
        return content_type == settings.ACCEPTED_CONTENT_TYPE
    return (filename or "").lower().endswith(settings.ACCEPTED_EXTENSION)


def load_upload(filename: str, content: str, content_type: Optional[str] = None) -> List[Row]:
    """
    Validate and parse an uploaded file.

    Args:
        filename: Name of the uploaded file
        content: Decoded file text
        content_type: MIME type reported for the upload, if known

    Returns:
        Non-empty list of rows

    Raises:
        FormatRejectedError: Upload is not a CSV file
        EmptyDatasetError: File parsed to zero rows
    """
    if not is_csv_upload(filename, content_type):
        logger.error(f"Rejected upload {filename!r} (content type {content_type!r})")
        raise FormatRejectedError()

    rows = parse_csv(content)
    if not rows:
        logger.error(f"No valid data found in {filename!r}")
        raise EmptyDatasetError()

    return rows

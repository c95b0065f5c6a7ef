"""
CSV export of a filtered view.

The review text is always quoted with inner quotes doubled; the other
fields are written as-is. parse_csv() does not understand quoting, so
an exported file does not read back byte-identical.
"""

import logging
import os
from typing import Sequence

from sentimen.models.row import Row
import config.settings as settings

logger = logging.getLogger(__name__)


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def serialize_csv(rows: Sequence[Row]) -> str:
    """
    Serialize rows to CSV text.

    Args:
        rows: The filtered view to export

    Returns:
        Header line plus one line per row, joined with newlines
    """
    lines = [",".join(settings.EXPORT_COLUMNS)]
    for row in rows:
        lines.append(",".join([
            _quote(row.ulasan),
            str(row.rating),
            row.kategori,
            row.nama_produk,
            row.sentiment,
        ]))
    return "\n".join(lines)


def write_csv(rows: Sequence[Row], path: str = settings.DEFAULT_EXPORT_FILENAME) -> str:
    """
    Write the exported CSV to disk.

    Returns:
        Path written
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(serialize_csv(rows))
        logger.info(f"Exported {len(rows)} rows to {path}")
    except OSError as e:
        logger.error(f"Failed to export CSV to {path}: {e}")
        raise

    return path

"""
View derivation.

Turns a dataset and view criteria into the filtered view, the current
page window and its aggregates. Everything here is a pure function of
its inputs.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from sentimen.models.criteria import DESCENDING, ViewCriteria
from sentimen.models.row import SENTIMENT_LABELS, Row
from sentimen.pipeline.aggregation import Aggregates, ChartSeries, chart_series, summarize
import config.settings as settings

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    """
    Everything the dashboard displays for one (dataset, criteria, page).
    """
    filtered: List[Row]
    page: int
    total_pages: int
    window: List[Row]
    aggregates: Aggregates
    page_strip: List[Optional[int]] = field(default_factory=list)

    @property
    def charts(self) -> List[ChartSeries]:
        return chart_series(self.aggregates)

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def to_frame(self) -> pd.DataFrame:
        """Current page window as a DataFrame with display column names."""
        if not self.window:
            return pd.DataFrame(columns=list(settings.EXPORT_COLUMNS))
        return pd.DataFrame([row.to_dict() for row in self.window])


def filter_rows(rows: Sequence[Row], criteria: ViewCriteria) -> List[Row]:
    """
    Apply the equality filters and the review search.

    Category, product and sentiment must match exactly; the search is a
    case-insensitive substring of the review text. Empty criteria are
    skipped and all applied criteria must hold.
    """
    result = list(rows)
    if criteria.kategori:
        result = [r for r in result if r.kategori == criteria.kategori]
    if criteria.nama_produk:
        result = [r for r in result if r.nama_produk == criteria.nama_produk]
    if criteria.sentiment:
        result = [r for r in result if r.sentiment == criteria.sentiment]
    if criteria.search:
        needle = criteria.search.lower()
        result = [r for r in result if needle in r.ulasan.lower()]
    return result


def sort_rows(rows: Sequence[Row], criteria: ViewCriteria) -> List[Row]:
    """
    Stable sort on the criteria's sort key.

    Strings sort lexicographically, rating numerically. Rows with equal
    keys keep their relative order in both directions.
    """
    if not criteria.sort_key:
        return list(rows)
    key = criteria.sort_key
    return sorted(
        rows,
        key=lambda r: getattr(r, key),
        reverse=criteria.sort_order == DESCENDING
    )


def total_pages(row_count: int, per_page: int = settings.ROWS_PER_PAGE) -> int:
    """Number of pages, never less than 1."""
    return max(1, math.ceil(row_count / per_page))


def clamp_page(page: int, pages: int) -> int:
    return min(max(page, 1), pages)


def page_window(rows: Sequence[Row], page: int, per_page: int = settings.ROWS_PER_PAGE) -> List[Row]:
    """Rows shown on a 1-based page. The page must already be clamped."""
    start = (page - 1) * per_page
    return list(rows[start:start + per_page])


def page_strip(current: int, pages: int,
               threshold: int = settings.PAGE_STRIP_THRESHOLD) -> List[Optional[int]]:
    """
    Page numbers for the pagination control.

    Up to `threshold` pages are all listed. Above that the strip is the
    first page, up to three pages around the current one and the last
    page, with None marking an ellipsis wherever pages are skipped.

    Example:
        page_strip(6, 12) -> [1, None, 5, 6, 7, None, 12]
    """
    if pages <= threshold:
        return list(range(1, pages + 1))

    strip: List[Optional[int]] = [1]
    if current > 3:
        strip.append(None)
    for page in (current - 1, current, current + 1):
        if 1 < page < pages:
            strip.append(page)
    if current < pages - 2:
        strip.append(None)
    strip.append(pages)
    return strip


def derive_view(dataset: Sequence[Row], criteria: ViewCriteria, page: int = 1) -> ViewState:
    """
    Derive the full view state.

    Args:
        dataset: All parsed rows from the latest upload
        criteria: Active search/filter/sort configuration
        page: Requested 1-based page, clamped into range

    Returns:
        ViewState with aggregates computed over the filtered rows
    """
    filtered = sort_rows(filter_rows(dataset, criteria), criteria)
    pages = total_pages(len(filtered))
    current = clamp_page(page, pages)

    logger.debug(
        f"Derived view: {len(filtered)}/{len(dataset)} rows, "
        f"page {current}/{pages}"
    )

    return ViewState(
        filtered=filtered,
        page=current,
        total_pages=pages,
        window=page_window(filtered, current),
        aggregates=summarize(filtered),
        page_strip=page_strip(current, pages)
    )


def filter_options(dataset: Sequence[Row]) -> Dict[str, List[str]]:
    """
    Choices for the filter selectors.

    Categories and products are listed in first-seen order; sentiment
    always offers both labels.
    """
    return {
        "kategori": list(dict.fromkeys(r.kategori for r in dataset)),
        "nama_produk": list(dict.fromkeys(r.nama_produk for r in dataset)),
        "sentiment": list(SENTIMENT_LABELS),
    }

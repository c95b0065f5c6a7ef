"""
Sentiment dashboard state.

Owns the current dataset, view criteria and page, and re-derives the
view whenever one of them changes.
"""

import logging
from typing import Dict, List, Optional, Tuple

from sentimen.errors import EmptyDatasetError, FormatRejectedError
from sentimen.models.criteria import ViewCriteria
from sentimen.models.row import Row
from sentimen.pipeline.export import serialize_csv
from sentimen.pipeline.ingestion import load_upload
from sentimen.pipeline.view import ViewState, derive_view, filter_options

logger = logging.getLogger(__name__)

STATUS_IDLE = ""
STATUS_LOADING = "loading"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


class SentimentDashboard:
    """
    Single active dataset plus the criteria applied to it.

    A new upload replaces the dataset wholesale. A rejected or empty
    upload leaves the previous dataset in place and only updates the
    status message. Changing the dataset or criteria resets the page to 1.
    """

    def __init__(self, dataset: Optional[List[Row]] = None):
        self._dataset: List[Row] = list(dataset or [])
        self._criteria = ViewCriteria()
        self._page = 1
        self.status: Tuple[str, str] = (STATUS_IDLE, "")
        self._view = derive_view(self._dataset, self._criteria, self._page)

    @property
    def dataset(self) -> List[Row]:
        return list(self._dataset)

    @property
    def criteria(self) -> ViewCriteria:
        return self._criteria

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def page(self) -> int:
        return self._view.page

    def _refresh(self, page: int = 1) -> ViewState:
        self._view = derive_view(self._dataset, self._criteria, page)
        self._page = self._view.page
        return self._view

    # Dataset

    def load(self, rows: List[Row]) -> ViewState:
        """Replace the dataset with already-parsed rows."""
        self._dataset = list(rows)
        self.status = (STATUS_SUCCESS, "File processed successfully!")
        logger.info(f"Loaded dataset with {len(self._dataset)} rows")
        return self._refresh()

    def ingest(self, filename: str, content: str, content_type: Optional[str] = None) -> bool:
        """
        Parse an uploaded file and make it the active dataset.

        Args:
            filename: Uploaded file name
            content: Decoded file text
            content_type: MIME type of the upload, if known

        Returns:
            True if the dataset was replaced, False if the upload was
            rejected (see status for the message)
        """
        self.status = (STATUS_LOADING, "Processing file...")
        try:
            rows = load_upload(filename, content, content_type)
        except (FormatRejectedError, EmptyDatasetError) as e:
            self.status = (STATUS_ERROR, f"Error processing file: {e}")
            logger.warning(f"Upload {filename!r} rejected: {e}")
            return False

        self.load(rows)
        return True

    # Criteria

    def set_filter(self, field: str, value: str) -> ViewState:
        self._criteria = self._criteria.with_filter(field, value)
        return self._refresh()

    def set_search(self, text: str) -> ViewState:
        self._criteria = self._criteria.with_search(text)
        return self._refresh()

    def toggle_sort(self, key: str) -> ViewState:
        self._criteria = self._criteria.toggle_sort(key)
        return self._refresh()

    def set_criteria(self, criteria: ViewCriteria) -> ViewState:
        self._criteria = criteria
        return self._refresh()

    def reset_filters(self) -> ViewState:
        """Clear search, filters and sort."""
        self._criteria = ViewCriteria.reset()
        return self._refresh()

    def filter_options(self) -> Dict[str, List[str]]:
        return filter_options(self._dataset)

    # Pagination

    def set_page(self, page: int) -> ViewState:
        """Jump to a page; out-of-range values are clamped."""
        return self._refresh(page)

    def next_page(self) -> ViewState:
        return self._refresh(self._page + 1)

    def prev_page(self) -> ViewState:
        return self._refresh(self._page - 1)

    # Export

    def export_csv(self) -> str:
        """CSV text of the filtered view (not the full dataset)."""
        return serialize_csv(self._view.filtered)

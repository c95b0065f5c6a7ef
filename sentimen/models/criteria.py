"""
View criteria data model.

The search/filter/sort configuration applied to a dataset.
"""

from dataclasses import dataclass, replace
from typing import Optional

from sentimen.models.row import ROW_FIELDS

ASCENDING = "asc"
DESCENDING = "desc"

# Criteria attributes that act as equality filters
FILTER_FIELDS = ("kategori", "nama_produk", "sentiment")


@dataclass(frozen=True)
class ViewCriteria:
    """
    Transient view configuration.
    Empty strings mean "no filter"; sort_key None means "dataset order".
    """
    search: str = ""
    kategori: str = ""
    nama_produk: str = ""
    sentiment: str = ""
    sort_key: Optional[str] = None
    sort_order: str = ASCENDING

    def __post_init__(self):
        if self.sort_key is not None and self.sort_key not in ROW_FIELDS:
            raise ValueError(
                f"Invalid sort key: {self.sort_key}. Must be one of {ROW_FIELDS}"
            )
        if self.sort_order not in (ASCENDING, DESCENDING):
            raise ValueError(
                f"Invalid sort order: {self.sort_order}. Must be 'asc' or 'desc'"
            )

    def with_filter(self, field: str, value: str) -> "ViewCriteria":
        """Return a copy with one equality filter changed."""
        if field not in FILTER_FIELDS:
            raise ValueError(f"Invalid filter field: {field}. Must be one of {FILTER_FIELDS}")
        return replace(self, **{field: value})

    def with_search(self, search: str) -> "ViewCriteria":
        return replace(self, search=search)

    def toggle_sort(self, key: str) -> "ViewCriteria":
        """
        Sort by key.

        Selecting the current key flips the direction; a new key starts
        ascending.
        """
        if self.sort_key == key:
            order = DESCENDING if self.sort_order == ASCENDING else ASCENDING
            return replace(self, sort_order=order)
        return replace(self, sort_key=key, sort_order=ASCENDING)

    @classmethod
    def reset(cls) -> "ViewCriteria":
        """Default criteria: no filtering, no sort."""
        return cls()

"""
Review row data model.

Represents one parsed line of an uploaded sentiment CSV.
"""

from dataclasses import dataclass

POSITIVE = "Positive"
NEGATIVE = "Negative"
SENTIMENT_LABELS = (POSITIVE, NEGATIVE)

# Attribute names usable as a sort key
ROW_FIELDS = ("ulasan", "rating", "kategori", "nama_produk", "sentiment")


@dataclass(frozen=True)
class Row:
    """
    A single review record.
    Immutable once parsed; views only ever select and reorder rows.
    """
    ulasan: str  # Free-text review
    rating: int  # Nominally 0-5, whatever integer the file held
    kategori: str  # Product category
    nama_produk: str  # Product name
    sentiment: str  # "Positive" or "Negative"

    def __post_init__(self):
        if self.sentiment not in SENTIMENT_LABELS:
            raise ValueError(
                f"Invalid sentiment: {self.sentiment}. Must be 'Positive' or 'Negative'"
            )

    def to_dict(self) -> dict:
        """Convert to a plain dict keyed by the display column names."""
        return {
            "Ulasan": self.ulasan,
            "Rating": self.rating,
            "Kategori": self.kategori,
            "Nama Produk": self.nama_produk,
            "Sentiment": self.sentiment,
        }

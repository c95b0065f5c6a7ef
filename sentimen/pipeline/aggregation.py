"""
View aggregation.

Summary statistics and chart series computed over a filtered view.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from sentimen.models.row import NEGATIVE, POSITIVE, SENTIMENT_LABELS, Row

logger = logging.getLogger(__name__)

RATING_LEVELS = (1, 2, 3, 4, 5)


@dataclass
class Aggregates:
    """
    Counts and averages for one filtered view.
    Both sentiment labels and all five rating levels are always present.
    """
    total: int
    average_rating: str  # Two decimals, "0.00" when empty
    sentiment_counts: Dict[str, int] = field(default_factory=dict)
    rating_counts: Dict[int, int] = field(default_factory=dict)


@dataclass
class ChartSeries:
    """Labelled series handed to the chart renderer."""
    title: str
    kind: str  # "bar" or "pie"
    labels: List[str]
    values: List[int]


def summarize(rows: Sequence[Row]) -> Aggregates:
    """
    Compute aggregates for a view.

    Args:
        rows: The filtered view (never the raw dataset)

    Returns:
        Aggregates with zero-seeded sentiment and rating counts
    """
    sentiment_counts = {label: 0 for label in SENTIMENT_LABELS}
    sentiment_counts.update(Counter(r.sentiment for r in rows))

    ratings = Counter(r.rating for r in rows)
    rating_counts = {level: ratings.get(level, 0) for level in RATING_LEVELS}

    total = len(rows)
    if total:
        average = f"{sum(r.rating for r in rows) / total:.2f}"
    else:
        average = "0.00"

    logger.debug(f"Summarized {total} rows (average rating {average})")

    return Aggregates(
        total=total,
        average_rating=average,
        sentiment_counts=sentiment_counts,
        rating_counts=rating_counts
    )


def chart_series(aggregates: Aggregates) -> List[ChartSeries]:
    """Build the sentiment bar, sentiment pie and rating bar series."""
    sentiment_values = [
        aggregates.sentiment_counts[POSITIVE],
        aggregates.sentiment_counts[NEGATIVE],
    ]
    return [
        ChartSeries(
            title="Sentiment Distribution",
            kind="bar",
            labels=[POSITIVE, NEGATIVE],
            values=sentiment_values
        ),
        ChartSeries(
            title="Sentiment Proportions",
            kind="pie",
            labels=[POSITIVE, NEGATIVE],
            values=list(sentiment_values)
        ),
        ChartSeries(
            title="Rating Distribution",
            kind="bar",
            labels=[str(level) for level in RATING_LEVELS],
            values=[aggregates.rating_counts[level] for level in RATING_LEVELS]
        ),
    ]

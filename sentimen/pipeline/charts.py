"""
Chart rendering.

Draws the labelled series from aggregation.chart_series() side by side
and saves them as one image.
"""

import logging
import os
from typing import List, Optional

from matplotlib.figure import Figure

from sentimen.models.row import NEGATIVE, POSITIVE
from sentimen.pipeline.aggregation import ChartSeries
import config.settings as settings

logger = logging.getLogger(__name__)

_LABEL_COLORS = {
    POSITIVE: settings.POSITIVE_COLOR,
    NEGATIVE: settings.NEGATIVE_COLOR,
}


def _ensure_dir(p: Optional[str]) -> None:
    if p:
        d = os.path.dirname(p)
        if d and not os.path.exists(d):
            os.makedirs(d, exist_ok=True)


def _colors(series: ChartSeries) -> List[str]:
    return [_LABEL_COLORS.get(label, settings.POSITIVE_COLOR) for label in series.labels]


def render_charts(series: List[ChartSeries],
                  out_path: str = settings.DEFAULT_CHART_FILENAME) -> str:
    """
    Render each series into its own panel and save a PNG.

    Args:
        series: Series to draw, in display order
        out_path: Image path

    Returns:
        Path written
    """
    if not series:
        raise ValueError("No chart series to render")

    fig = Figure(figsize=(6 * len(series), 5))
    axes = fig.subplots(1, len(series))
    if len(series) == 1:
        axes = [axes]

    for ax, s in zip(axes, series):
        if s.kind == "pie":
            if sum(s.values) > 0:
                ax.pie(s.values, labels=s.labels, colors=_colors(s), autopct="%1.1f%%")
            else:
                ax.text(0.5, 0.5, "No data", ha="center", va="center")
                ax.axis("off")
        elif s.kind == "bar":
            ax.bar(s.labels, s.values, color=_colors(s))
            ax.set_ylabel("Count")
        else:
            raise ValueError(f"Unknown chart kind: {s.kind}")
        ax.set_title(s.title)

    fig.tight_layout()
    _ensure_dir(out_path)
    fig.savefig(out_path, dpi=150)

    logger.info(f"Saved {len(series)} charts to {out_path}")
    return out_path

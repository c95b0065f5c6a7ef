"""
Unit tests for CSV export and chart rendering.
"""

import importlib
import os
import tempfile
from unittest.mock import patch

import pytest

from sentimen.models.row import Row
from sentimen.pipeline.aggregation import chart_series, summarize
from sentimen.pipeline import charts
from sentimen.pipeline.charts import render_charts
from sentimen.pipeline.export import serialize_csv, write_csv


def test_quotes_are_doubled():
    row = Row('a "quote"', 3, "X", "Y", "Positive")
    lines = serialize_csv([row]).split("\n")

    assert lines[0] == "Ulasan,Rating,Kategori,Nama Produk,Sentiment"
    assert lines[1] == '"a ""quote""",3,X,Y,Positive'


def test_header_only_for_empty_view():
    assert serialize_csv([]) == "Ulasan,Rating,Kategori,Nama Produk,Sentiment"


def test_one_line_per_row_without_trailing_newline():
    rows = [
        Row("satu", 1, "A", "B", "Negative"),
        Row("dua", 2, "A", "B", "Negative"),
    ]
    text = serialize_csv(rows)

    assert text.split("\n") == [
        "Ulasan,Rating,Kategori,Nama Produk,Sentiment",
        '"satu",1,A,B,Negative',
        '"dua",2,A,B,Negative',
    ]
    assert not text.endswith("\n")


def test_write_csv():
    rows = [Row("bagus", 5, "A", "B", "Positive")]
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_csv(rows, os.path.join(tmpdir, "out", "filtered.csv"))

        with open(path, encoding="utf-8") as f:
            assert f.read() == serialize_csv(rows)


def test_render_charts_writes_png():
    rows = [
        Row("a", 5, "K", "P", "Positive"),
        Row("b", 1, "K", "P", "Negative"),
    ]
    with tempfile.TemporaryDirectory() as tmpdir:
        path = render_charts(chart_series(summarize(rows)), os.path.join(tmpdir, "charts.png"))

        assert os.path.exists(path)
        assert os.path.getsize(path) > 0


def test_render_charts_empty_view():
    """An all-zero pie must not break rendering."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = render_charts(chart_series(summarize([])), os.path.join(tmpdir, "empty.png"))
        assert os.path.exists(path)


def test_render_charts_requires_series():
    with pytest.raises(ValueError):
        render_charts([])


def test_importing_charts_keeps_backend():
    """Callers choose the matplotlib backend; the module never switches it."""
    with patch("matplotlib.use") as use:
        importlib.reload(charts)

    use.assert_not_called()
    assert not hasattr(charts, "plt")


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Tabular data pipeline.

- Ingestion: CSV text -> rows
- View: filter, sort, paginate
- Aggregation: counts, average rating, chart series
- Export: filtered view -> CSV
- Charts: matplotlib rendering of the chart series
"""

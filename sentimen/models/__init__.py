"""
Data models for Analisa Sentimen.

- Row: one parsed review record
- ViewCriteria: active search/filter/sort configuration
- ButtonLink / LinkEntry: named redirect buttons grouped under a key
"""

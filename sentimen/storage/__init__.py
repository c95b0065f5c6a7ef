"""
Remote persistence.

- Content store: GitHub Contents API client and token fetch
- Upload: staged upload-parse-cleanup pipeline
"""

"""
Configuration settings for Analisa Sentimen.

Centralized configuration for the data pipeline, content store and CLI.
"""

import os

# CSV ingestion
REQUIRED_COLUMNS = ("Ulasan", "Rating", "Kategori", "Nama Produk", "label")
POSITIVE_LABEL_VALUE = "1"  # label column value meaning Positive
ACCEPTED_CONTENT_TYPE = "text/csv"
ACCEPTED_EXTENSION = ".csv"

# View
ROWS_PER_PAGE = 10
PAGE_STRIP_THRESHOLD = 5  # Abbreviate the page strip above this many pages

# Export
EXPORT_COLUMNS = ("Ulasan", "Rating", "Kategori", "Nama Produk", "Sentiment")
DEFAULT_EXPORT_FILENAME = "sentiment_data.csv"

# Charts
POSITIVE_COLOR = "#22C55E"
NEGATIVE_COLOR = "#EF4444"
DEFAULT_CHART_FILENAME = "sentiment_charts.png"

# Content store (GitHub Contents API)
GITHUB_API_URL = "https://api.github.com"
GITHUB_RAW_URL = "https://raw.githubusercontent.com"
GITHUB_REPO = os.getenv("SENTIMEN_GITHUB_REPO", "AgungDevlop/JokiTugas")
GITHUB_BRANCH = "main"
GITHUB_UPLOAD_PATH = "Data"  # Directory for transient CSV uploads
LINKS_DATA_PATH = "Data.json"
GITHUB_TOKEN_URL = os.getenv("SENTIMEN_TOKEN_URL", "https://skinml.agungbot.my.id/")
HTTP_TIMEOUT_SECONDS = 15

# Button links
LINK_ID_LENGTH = 10
LINK_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "sentimen.log"

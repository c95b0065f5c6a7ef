"""
Exception types for Analisa Sentimen.

Ingestion itself never raises; these are raised by the callers that
decide an ingestion result is unusable, and by the content store layer.
"""

from typing import Dict, List


class SentimenError(Exception):
    """Base class for all application errors."""


class FormatRejectedError(SentimenError):
    """Uploaded content is not an accepted CSV file."""

    def __init__(self, message: str = "Please upload a valid CSV file"):
        super().__init__(message)


class EmptyDatasetError(SentimenError):
    """Ingestion produced zero usable rows."""

    def __init__(self, message: str = "No valid data found in CSV"):
        super().__init__(message)


class StoreError(SentimenError):
    """Remote content store request failed."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class StageError(SentimenError):
    """
    A named stage of the upload pipeline failed.

    Attributes:
        stage: Name of the failing stage (e.g. "token", "write")
        cause: Underlying exception, if any
    """

    def __init__(self, stage: str, message: str, cause: Exception = None):
        super().__init__(f"[{stage}] {message}")
        self.stage = stage
        self.cause = cause


class LinkValidationError(SentimenError):
    """
    One or more button forms are incomplete.

    Attributes:
        field_errors: Per-form dicts mapping field name to error message
    """

    def __init__(self, field_errors: List[Dict[str, str]],
                 message: str = "Please fill in all required fields"):
        super().__init__(message)
        self.field_errors = field_errors


class NotAuthenticatedError(SentimenError):
    """An operation needs a logged-in user and there is none."""

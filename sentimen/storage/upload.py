"""
Upload Pipeline.

Runs an uploaded CSV through the content store and the parser as a
fixed sequence of stages. The first failing stage stops the run with a
StageError naming it.
"""

import logging
from typing import List, Optional

from sentimen.errors import SentimenError, StageError
from sentimen.models.row import Row
from sentimen.pipeline.ingestion import is_csv_upload, parse_csv
from sentimen.storage.content_store import GitHubContentStore
import config.settings as settings

logger = logging.getLogger(__name__)

STAGE_VALIDATE = "validate"
STAGE_TOKEN = "token"
STAGE_WRITE = "write"
STAGE_PARSE = "parse"
STAGE_CLEANUP = "cleanup"


class UploadPipeline:
    """
    Orchestrates one CSV upload.

    Stages:
    1. Validate -> 2. Token -> 3. Write to store -> 4. Parse
    -> 5. Cleanup (delete the stored copy)

    Cleanup failures are logged but do not fail the run; the rows are
    already parsed by then.
    """

    def __init__(self, store: GitHubContentStore, upload_dir: str = settings.GITHUB_UPLOAD_PATH):
        """
        Initialize upload pipeline.

        Args:
            store: Content store client
            upload_dir: Repository directory for transient uploads
        """
        self.store = store
        self.upload_dir = upload_dir

    def run(self, filename: str, content: str, content_type: Optional[str] = None) -> List[Row]:
        """
        Upload, parse and clean up one file.

        Args:
            filename: Uploaded file name
            content: Decoded file text
            content_type: MIME type of the upload, if known

        Returns:
            Parsed rows (never empty)

        Raises:
            StageError: A stage failed; .stage names it
        """
        path = f"{self.upload_dir}/{filename}"
        logger.info(f"Starting upload pipeline for {filename}")

        # STAGE 1: Validate
        if not is_csv_upload(filename, content_type):
            raise StageError(STAGE_VALIDATE, "Please upload a valid CSV file")

        # STAGE 2: Token
        try:
            token = self.store.fetch_token()
        except SentimenError as e:
            raise StageError(STAGE_TOKEN, str(e), cause=e) from e

        # STAGE 3: Write
        try:
            self.store.put_file(path, content, f"Upload {filename}", token)
        except SentimenError as e:
            raise StageError(STAGE_WRITE, str(e), cause=e) from e

        # STAGE 4: Parse
        rows = parse_csv(content)
        if not rows:
            raise StageError(STAGE_PARSE, "No valid data found in CSV")
        logger.info(f"Parsed {len(rows)} rows from {filename}")

        # STAGE 5: Cleanup
        try:
            self.store.delete_file(path, f"Delete {filename} after processing", token)
        except SentimenError as e:
            logger.error(f"Error deleting file {path}: {e}")

        return rows

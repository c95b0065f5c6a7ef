"""
Content store client.

Reads, writes and deletes files in a GitHub repository through the
Contents API. Write access needs a token issued by a separate HTTP
endpoint; the token is cached on the AppContext.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from sentimen.context import AppContext
from sentimen.errors import StoreError
import config.settings as settings

logger = logging.getLogger(__name__)


def _decode_json(response: requests.Response, what: str) -> Any:
    """Response body as JSON, or StoreError if it is not JSON."""
    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Invalid JSON in {what}: {e}")
        raise StoreError(f"{what} is not valid JSON: {e}") from e


@dataclass
class StoredFile:
    """A file read from the store."""
    path: str
    content: str  # Decoded text
    sha: str  # Blob SHA, needed to update or delete


class GitHubContentStore:
    """
    Thin client over the GitHub Contents API.

    Handles:
    - Token fetch from the token-issuing endpoint
    - Authenticated read/write/delete of repository files
    - Unauthenticated read of raw JSON files
    """

    def __init__(
        self,
        context: AppContext,
        repo: str = settings.GITHUB_REPO,
        token_url: str = settings.GITHUB_TOKEN_URL,
        timeout: float = settings.HTTP_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize content store client.

        Args:
            context: Application context that caches the token
            repo: Repository as "owner/name"
            token_url: Endpoint returning {"githubToken": ...}
            timeout: Per-request timeout in seconds
            session: Optional requests session (tests inject a mock)
        """
        self.context = context
        self.repo = repo
        self.token_url = token_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _contents_url(self, path: str) -> str:
        return f"{settings.GITHUB_API_URL}/repos/{self.repo}/contents/{path}"

    def _headers(self, token: str) -> dict:
        return {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github.v3+json",
        }

    def fetch_token(self) -> str:
        """
        Return the store token, fetching it once per session.

        Raises:
            StoreError: Token endpoint failed or returned no token
        """
        if self.context.token:
            return self.context.token

        try:
            response = self.session.get(self.token_url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Token request failed: {e}")
            raise StoreError(f"Error fetching GitHub token: {e}") from e

        if not response.ok:
            raise StoreError("Failed to fetch GitHub token", response.status_code)

        payload = _decode_json(response, "token response")
        token = payload.get("githubToken") if isinstance(payload, dict) else None
        if not token:
            raise StoreError("Token endpoint returned no githubToken")

        self.context.token = token
        logger.info("Fetched content store token")
        return token

    def get_file(self, path: str, token: str) -> Optional[StoredFile]:
        """
        Read a file.

        Returns:
            StoredFile, or None if the file does not exist
        """
        response = self._request("get", path, token)
        if response.status_code == 404:
            logger.debug(f"{path} not found in {self.repo}")
            return None
        if not response.ok:
            raise StoreError(f"Failed to fetch {path}", response.status_code)

        data = _decode_json(response, path)
        if not isinstance(data, dict) or "sha" not in data:
            raise StoreError(f"Unexpected contents response for {path}")
        try:
            content = base64.b64decode(data.get("content") or "").decode("utf-8")
        except ValueError as e:
            raise StoreError(f"{path} content is not valid base64 text: {e}") from e
        return StoredFile(path=path, content=content, sha=data["sha"])

    def put_file(
        self,
        path: str,
        content: str,
        message: str,
        token: str,
        sha: Optional[str] = None
    ) -> None:
        """
        Create or update a file.

        Args:
            path: Repository path
            content: File text (base64-encoded on the wire)
            message: Commit message
            token: Store token
            sha: Current blob SHA when updating an existing file
        """
        body = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if sha:
            body["sha"] = sha

        response = self._request("put", path, token, json=body)
        if not response.ok:
            raise StoreError(f"Failed to upload {path}", response.status_code)
        logger.info(f"Wrote {path} to {self.repo}")

    def delete_file(self, path: str, message: str, token: str) -> bool:
        """
        Delete a file.

        Returns:
            True if deleted, False if it did not exist
        """
        existing = self.get_file(path, token)
        if existing is None:
            return False

        response = self._request(
            "delete", path, token,
            json={"message": message, "sha": existing.sha}
        )
        if not response.ok:
            raise StoreError(f"Failed to delete {path}", response.status_code)
        logger.info(f"Deleted {path} from {self.repo}")
        return True

    def fetch_raw_json(self, path: str, branch: str = settings.GITHUB_BRANCH) -> Any:
        """Read a public JSON file without a token."""
        url = f"{settings.GITHUB_RAW_URL}/{self.repo}/{branch}/{path}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Raw fetch of {path} failed: {e}")
            raise StoreError(f"Failed to fetch data: {e}") from e

        if not response.ok:
            raise StoreError("Failed to fetch data", response.status_code)
        return _decode_json(response, path)

    def _request(self, method: str, path: str, token: str, **kwargs) -> requests.Response:
        try:
            return self.session.request(
                method.upper(),
                self._contents_url(path),
                headers=self._headers(token),
                timeout=self.timeout,
                **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"{method.upper()} {path} failed: {e}")
            raise StoreError(f"Request to content store failed: {e}") from e

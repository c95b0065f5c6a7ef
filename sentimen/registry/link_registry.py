"""
Link Registry - button links persisted in Data.json.

Generates short keys, appends new entries, resolves keys and searches
buttons by name.
"""

import json
import logging
import secrets
from typing import Dict, List, Optional

from sentimen.errors import LinkValidationError, StoreError
from sentimen.models.link import ButtonLink, LinkEntry
from sentimen.storage.content_store import GitHubContentStore
import config.settings as settings

logger = logging.getLogger(__name__)


def generate_id(length: int = settings.LINK_ID_LENGTH) -> str:
    """Random alphanumeric key."""
    return "".join(secrets.choice(settings.LINK_ID_ALPHABET) for _ in range(length))


def validate_forms(forms: List[ButtonLink]) -> List[Dict[str, str]]:
    """
    Check every form has a button name and a URL.

    Returns:
        One dict per form mapping field name to error message; empty
        dicts mean the form is valid
    """
    errors = []
    for form in forms:
        form_errors = {}
        if not form.button_name.strip():
            form_errors["button_name"] = "Button Name is required"
        if not form.url.strip():
            form_errors["url"] = "URL is required"
        errors.append(form_errors)
    return errors


def share_url(host: str, link_id: str) -> str:
    return f"https://{host}/{link_id}"


def _entries_from_json(data, strict: bool = False) -> List[LinkEntry]:
    """
    Build entries from the decoded Data.json.

    The file normally holds a list; a single object is wrapped. Elements
    that are not a valid entry are skipped with a warning, or raise
    StoreError when strict (a rewrite would otherwise drop them).
    """
    items = data if isinstance(data, list) else [data]
    entries = []
    for position, item in enumerate(items):
        try:
            if not isinstance(item, dict) or not isinstance(item.get("buttons", []), list):
                raise TypeError(f"expected an object with a buttons list, got {item!r}")
            entries.append(LinkEntry.from_dict(item))
        except (KeyError, TypeError, AttributeError) as e:
            if strict:
                raise StoreError(f"Malformed link entry at position {position}: {e}") from e
            logger.warning(f"Skipping malformed link entry at position {position}: {e}")
    return entries


class LinkRegistry:
    """
    Button links stored as a JSON list in the content store.

    Writes go through the authenticated Contents API; reads for
    resolving and searching use the public raw file.
    """

    def __init__(self, store: GitHubContentStore, data_path: str = settings.LINKS_DATA_PATH):
        """
        Initialize registry.

        Args:
            store: Content store client
            data_path: Repository path of the JSON file
        """
        self.store = store
        self.data_path = data_path

    def create(self, forms: List[ButtonLink]) -> str:
        """
        Store a new entry holding the given buttons.

        Args:
            forms: Buttons to group under the new key

        Returns:
            The generated key

        Raises:
            LinkValidationError: A form is missing its name or URL
            StoreError: Reading or writing Data.json failed
        """
        if not forms:
            raise LinkValidationError([], "At least one button is required")

        field_errors = validate_forms(forms)
        if any(field_errors):
            raise LinkValidationError(field_errors)

        token = self.store.fetch_token()
        existing = self.store.get_file(self.data_path, token)

        if existing is None:
            entries: List[LinkEntry] = []
            sha = None
        else:
            try:
                entries = _entries_from_json(json.loads(existing.content), strict=True)
            except json.JSONDecodeError as e:
                logger.error(f"Failed to parse {self.data_path}: {e}")
                raise StoreError(f"Error fetching {self.data_path}: {e}") from e
            sha = existing.sha

        entry = LinkEntry(
            id=generate_id(),
            buttons=[ButtonLink(f.button_name, f.url) for f in forms]
        )
        entries.append(entry)

        content = json.dumps([e.to_dict() for e in entries], indent=2)
        self.store.put_file(
            self.data_path,
            content,
            "Update Data.json with new buttons",
            token,
            sha=sha
        )

        logger.info(f"Created link {entry.id} with {len(entry.buttons)} buttons")
        return entry.id

    def load(self) -> List[LinkEntry]:
        """All entries from the public Data.json."""
        entries = _entries_from_json(self.store.fetch_raw_json(self.data_path))
        logger.debug(f"Loaded {len(entries)} link entries")
        return entries

    def resolve(self, link_id: str) -> Optional[LinkEntry]:
        """Entry for a key, or None if unknown."""
        for entry in self.load():
            if entry.id == link_id:
                return entry
        logger.warning(f"Link {link_id} not found")
        return None

    def search(self, term: str) -> List[LinkEntry]:
        """
        Entries with buttons whose name contains term (case-insensitive).

        Only the matching buttons are kept; entries left without buttons
        are dropped.
        """
        needle = term.lower()
        results = []
        for entry in self.load():
            buttons = [b for b in entry.buttons if needle in b.button_name.lower()]
            if buttons:
                results.append(LinkEntry(id=entry.id, buttons=buttons))
        return results

"""
Unit tests for the Link Registry.
"""

import json
from unittest.mock import MagicMock

import pytest

from sentimen.errors import LinkValidationError, StoreError
from sentimen.models.link import ButtonLink, LinkEntry
from sentimen.registry.link_registry import (
    LinkRegistry,
    generate_id,
    share_url,
    validate_forms,
)
from sentimen.storage.content_store import StoredFile


EXISTING = [
    {
        "id": "AAAAAAAAAA",
        "buttons": [
            {"buttonName": "Download Film", "url": "https://example.com/film"},
            {"buttonName": "Trailer", "url": "https://example.com/trailer"},
        ]
    },
    {
        "id": "BBBBBBBBBB",
        "buttons": [{"buttonName": "download musik", "url": "https://example.com/musik"}]
    },
]


@pytest.fixture
def store():
    store = MagicMock()
    store.fetch_token.return_value = "tok"
    store.fetch_raw_json.return_value = EXISTING
    return store


@pytest.fixture
def registry(store):
    return LinkRegistry(store, data_path="Data.json")


def test_generate_id():
    link_id = generate_id()
    assert len(link_id) == 10
    assert link_id.isalnum()
    assert len(generate_id(4)) == 4


def test_validate_forms():
    errors = validate_forms([
        ButtonLink("Unduh", "https://example.com"),
        ButtonLink("  ", ""),
    ])

    assert errors[0] == {}
    assert errors[1] == {"button_name": "Button Name is required", "url": "URL is required"}


def test_create_rejects_incomplete_forms(registry, store):
    with pytest.raises(LinkValidationError) as exc_info:
        registry.create([ButtonLink("Unduh", "")])

    assert exc_info.value.field_errors == [{"url": "URL is required"}]
    store.fetch_token.assert_not_called()


def test_create_rejects_no_forms(registry):
    with pytest.raises(LinkValidationError):
        registry.create([])


def test_create_appends_entry(registry, store):
    store.get_file.return_value = StoredFile("Data.json", json.dumps(EXISTING), "sha1")

    link_id = registry.create([ButtonLink("Unduh", "https://example.com/u")])

    path, content, message, token = store.put_file.call_args[0]
    assert path == "Data.json"
    assert token == "tok"
    assert store.put_file.call_args[1]["sha"] == "sha1"

    written = json.loads(content)
    assert written[:2] == EXISTING
    assert written[2] == {
        "id": link_id,
        "buttons": [{"buttonName": "Unduh", "url": "https://example.com/u"}]
    }


def test_create_starts_new_file(registry, store):
    store.get_file.return_value = None

    link_id = registry.create([ButtonLink("Unduh", "https://example.com/u")])

    content = store.put_file.call_args[0][1]
    assert [e["id"] for e in json.loads(content)] == [link_id]
    assert store.put_file.call_args[1]["sha"] is None


def test_single_object_file_is_wrapped(registry, store):
    store.fetch_raw_json.return_value = EXISTING[1]
    assert [e.id for e in registry.load()] == ["BBBBBBBBBB"]


def test_resolve(registry):
    entry = registry.resolve("AAAAAAAAAA")
    assert [b.button_name for b in entry.buttons] == ["Download Film", "Trailer"]
    assert registry.resolve("ZZZZZZZZZZ") is None


def test_search_keeps_only_matching_buttons(registry):
    results = registry.search("DOWNLOAD")

    assert [e.id for e in results] == ["AAAAAAAAAA", "BBBBBBBBBB"]
    assert [b.button_name for b in results[0].buttons] == ["Download Film"]


def test_search_drops_entries_without_matches(registry):
    results = registry.search("trailer")
    assert results == [
        LinkEntry("AAAAAAAAAA", [ButtonLink("Trailer", "https://example.com/trailer")])
    ]
    assert registry.search("tidak ada") == []


MALFORMED = [
    {"buttons": []},
    "junk",
    {"id": "DDDDDDDDDD", "buttons": "not a list"},
    {"id": "EEEEEEEEEE", "buttons": ["not an object"]},
    {"id": "CCCCCCCCCC", "buttons": [{"buttonName": "Unduh Aplikasi", "url": "https://example.com/u"}]},
]


def test_resolve_skips_malformed_entries(registry, store):
    store.fetch_raw_json.return_value = MALFORMED

    entry = registry.resolve("CCCCCCCCCC")

    assert entry == LinkEntry("CCCCCCCCCC", [ButtonLink("Unduh Aplikasi", "https://example.com/u")])
    assert registry.resolve("DDDDDDDDDD") is None


def test_search_skips_malformed_entries(registry, store):
    store.fetch_raw_json.return_value = MALFORMED
    assert [e.id for e in registry.search("unduh")] == ["CCCCCCCCCC"]


def test_create_refuses_to_rewrite_malformed_file(registry, store):
    store.get_file.return_value = StoredFile("Data.json", json.dumps(MALFORMED), "sha1")

    with pytest.raises(StoreError):
        registry.create([ButtonLink("Unduh", "https://example.com/u")])
    store.put_file.assert_not_called()


def test_create_rejects_invalid_json_file(registry, store):
    store.get_file.return_value = StoredFile("Data.json", "{not json", "sha1")

    with pytest.raises(StoreError):
        registry.create([ButtonLink("Unduh", "https://example.com/u")])
    store.put_file.assert_not_called()


def test_share_url():
    assert share_url("links.example", "Ab3dE6gH9k") == "https://links.example/Ab3dE6gH9k"


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])

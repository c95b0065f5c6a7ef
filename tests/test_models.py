"""
Unit tests for data models and the application context.
"""

import pytest

from sentimen.context import AppContext, User
from sentimen.errors import NotAuthenticatedError
from sentimen.models.criteria import ViewCriteria
from sentimen.models.link import ButtonLink, LinkEntry
from sentimen.models.row import Row
import config.settings as settings


def test_row_validation():
    with pytest.raises(ValueError):
        Row("teks", 5, "K", "P", "Neutral")


def test_row_is_immutable():
    row = Row("teks", 5, "K", "P", "Positive")
    with pytest.raises(AttributeError):
        row.rating = 1


def test_criteria_defaults():
    criteria = ViewCriteria()
    assert criteria.search == ""
    assert criteria.kategori == ""
    assert criteria.sort_key is None
    assert criteria.sort_order == "asc"


def test_criteria_validation():
    with pytest.raises(ValueError):
        ViewCriteria(sort_key="harga")
    with pytest.raises(ValueError):
        ViewCriteria(sort_order="up")
    with pytest.raises(ValueError):
        ViewCriteria().with_filter("ulasan", "x")


def test_toggle_sort():
    criteria = ViewCriteria().toggle_sort("rating")
    assert (criteria.sort_key, criteria.sort_order) == ("rating", "asc")

    criteria = criteria.toggle_sort("rating")
    assert (criteria.sort_key, criteria.sort_order) == ("rating", "desc")

    criteria = criteria.toggle_sort("sentiment")
    assert (criteria.sort_key, criteria.sort_order) == ("sentiment", "asc")


def test_link_entry_serialization():
    data = {
        "id": "Ab3dE6gH9k",
        "buttons": [{"buttonName": "Download", "url": "https://example.com/f"}]
    }
    entry = LinkEntry.from_dict(data)

    assert entry.buttons == [ButtonLink("Download", "https://example.com/f")]
    assert entry.to_dict() == data


def test_context_lifecycle():
    context = AppContext()
    assert not context.is_authenticated
    with pytest.raises(NotAuthenticatedError):
        context.require_user()

    context.login(User.from_dict({"username": "agung", "nama": "Agung"}))
    context.token = "secret"
    assert context.require_user().nama == "Agung"

    context.logout()
    assert context.user is None
    assert context.token is None


def test_button_link_null_fields_become_empty():
    button = ButtonLink.from_dict({"buttonName": None, "url": None})
    assert button == ButtonLink("", "")


def test_settings_define_only_used_locations():
    """Output goes where the caller says; settings carry no fixed output roots."""
    assert not hasattr(settings, "PROJECT_ROOT")
    assert not hasattr(settings, "OUTPUT_ROOT")
    assert settings.DEFAULT_EXPORT_FILENAME == "sentiment_data.csv"
    assert settings.LINKS_DATA_PATH == "Data.json"


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])

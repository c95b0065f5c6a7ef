"""
Button link data models.

A LinkEntry groups named redirect buttons under a short random key.
Serialized to Data.json with the keys the web front end reads.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ButtonLink:
    """A named redirect button."""
    button_name: str
    url: str

    @classmethod
    def from_dict(cls, data: dict) -> "ButtonLink":
        return cls(
            button_name=str(data.get("buttonName") or ""),
            url=str(data.get("url") or "")
        )

    def to_dict(self) -> dict:
        return {"buttonName": self.button_name, "url": self.url}


@dataclass
class LinkEntry:
    """
    A short key and its buttons.
    One element of the Data.json list.
    """
    id: str
    buttons: List[ButtonLink] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "LinkEntry":
        """Create LinkEntry from JSON dict."""
        return cls(
            id=data["id"],
            buttons=[ButtonLink.from_dict(b) for b in data.get("buttons", [])]
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "buttons": [b.to_dict() for b in self.buttons]
        }

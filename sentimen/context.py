"""
Application context.

Holds the logged-in user and the cached content store token.
Set at login, cleared at logout, and passed explicitly to whichever
component needs it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sentimen.errors import NotAuthenticatedError

logger = logging.getLogger(__name__)


@dataclass
class User:
    """Logged-in analyst."""
    username: str
    nama: str  # Display name

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(username=data["username"], nama=data.get("nama", ""))


class AppContext:
    """Explicit session state shared by the dashboard and store clients."""

    def __init__(self):
        self.user: Optional[User] = None
        self.token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, user: User) -> None:
        self.user = user
        logger.info(f"User {user.username} logged in")

    def logout(self) -> None:
        """Clear the user and any cached token."""
        if self.user:
            logger.info(f"User {self.user.username} logged out")
        self.user = None
        self.token = None

    def require_user(self) -> User:
        if self.user is None:
            raise NotAuthenticatedError("Login required")
        return self.user

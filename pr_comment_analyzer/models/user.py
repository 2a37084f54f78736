"""Authenticated user model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuthenticatedUser:
    """The GitHub account that owns the access token."""

    login: str

    @classmethod
    def from_github_data(cls, data: Any) -> "AuthenticatedUser | None":  # noqa: ANN401
        """Build a user from a ``/user`` payload, or ``None`` if it has no login."""
        if not isinstance(data, dict):
            return None
        login = data.get("login")
        if not isinstance(login, str) or not login:
            return None
        return cls(login=login)

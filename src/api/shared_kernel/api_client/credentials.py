"""Session credentials held by the storefront client."""

from __future__ import annotations


class SessionCredentials:
    """Holds the opaque bearer token of the current session.

    The token normally originates from the session cookie. Its presence is
    only a hint: a session is verified by a round trip, never by the token
    existing.
    """

    def __init__(self, token: str | None = None):
        self._token = token or None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def has_token(self) -> bool:
        return self._token is not None

    def set_token(self, token: str | None) -> None:
        self._token = token or None

    def clear(self) -> None:
        self._token = None

    def as_headers(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

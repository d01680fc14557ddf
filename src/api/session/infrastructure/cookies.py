"""Session cookie handling.

The cookie carries the opaque bearer token: ``path=/``, ``SameSite=Lax``,
seven day max-age by default, ``Secure`` only in production.
"""

from __future__ import annotations

from collections.abc import Mapping

from starlette.responses import Response

from infrastructure.settings import SessionCookieSettings


def set_session_cookie(
    response: Response,
    token: str,
    *,
    settings: SessionCookieSettings,
    secure: bool,
) -> None:
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.max_age_seconds,
        path="/",
        secure=secure,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response, *, settings: SessionCookieSettings) -> None:
    response.delete_cookie(key=settings.cookie_name, path="/", samesite="lax")


def read_session_cookie(
    cookies: Mapping[str, str],
    *,
    settings: SessionCookieSettings,
) -> str | None:
    """Return the session token from a cookie mapping, if any."""
    value = cookies.get(settings.cookie_name)
    if not value:
        return None
    return value

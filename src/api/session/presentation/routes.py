"""HTTP routes managing the session cookie.

The storefront client logs in against the remote API and hands the token
to these routes so that later navigations carry it as a cookie. The
rendering pass only ever reads that cookie as a hint.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from infrastructure.settings import SessionCookieSettings, StorefrontSettings
from session.dependencies import (
    get_session_cookie_settings_dep,
    get_storefront_settings_dep,
)
from session.infrastructure.cookies import clear_session_cookie, set_session_cookie
from session.presentation.models import CreateSessionRequest

router = APIRouter(prefix="/auth/session", tags=["session"])


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
async def create_session(
    request: CreateSessionRequest,
    cookie_settings: Annotated[
        SessionCookieSettings, Depends(get_session_cookie_settings_dep)
    ],
    settings: Annotated[StorefrontSettings, Depends(get_storefront_settings_dep)],
) -> Response:
    """Store the session token in the session cookie.

    Args:
        request: Token to store

    Returns:
        Empty 204 response carrying the Set-Cookie header
    """
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    set_session_cookie(
        response,
        request.token,
        settings=cookie_settings,
        secure=settings.is_production,
    )
    return response


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    cookie_settings: Annotated[
        SessionCookieSettings, Depends(get_session_cookie_settings_dep)
    ],
) -> Response:
    """Clear the session cookie."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response, settings=cookie_settings)
    return response

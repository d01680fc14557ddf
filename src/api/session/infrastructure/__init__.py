"""Session infrastructure adapters."""

from session.infrastructure.cookies import (
    clear_session_cookie,
    read_session_cookie,
    set_session_cookie,
)
from session.infrastructure.http_session_gateway import HttpSessionGateway

__all__ = [
    "HttpSessionGateway",
    "clear_session_cookie",
    "read_session_cookie",
    "set_session_cookie",
]

"""Session application layer."""

from session.application.auth_store import AuthStore

__all__ = ["AuthStore"]

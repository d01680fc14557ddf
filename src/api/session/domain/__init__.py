"""Session domain layer."""

from session.domain.value_objects import (
    AuthBootstrapState,
    AuthState,
    UserIdentity,
    UserKind,
)

__all__ = ["AuthBootstrapState", "AuthState", "UserIdentity", "UserKind"]

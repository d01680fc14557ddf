"""Domain probe for session hydration and login.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to re-establishing session state.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthHydrationProbe(Protocol):
    """Domain probe for session hydration operations."""

    def session_verified(self, user_id: str, kind: str) -> None:
        """Record that the session credential resolved to a user."""
        ...

    def session_absent(self) -> None:
        """Record that there was no credential to verify."""
        ...

    def session_verification_failed(self, error: Exception) -> None:
        """Record that the verifying round trip failed."""
        ...

    def login_succeeded(self, user_id: str, kind: str) -> None:
        """Record a successful login."""
        ...

    def login_failed(self, kind: str, error: Exception) -> None:
        """Record a failed login."""
        ...

    def logged_out(self) -> None:
        """Record that the session was dropped."""
        ...

    def billing_required_flagged(self) -> None:
        """Record that the API demanded an active subscription."""
        ...

    def with_context(self, context: ObservationContext) -> AuthHydrationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthHydrationProbe:
    """Default implementation of AuthHydrationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAuthHydrationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthHydrationProbe(logger=self._logger, context=context)

    def session_verified(self, user_id: str, kind: str) -> None:
        """Record that the session credential resolved to a user."""
        self._logger.info(
            "session_verified",
            user_id=user_id,
            kind=kind,
            **self._get_context_kwargs(),
        )

    def session_absent(self) -> None:
        """Record that there was no credential to verify."""
        self._logger.debug(
            "session_absent",
            **self._get_context_kwargs(),
        )

    def session_verification_failed(self, error: Exception) -> None:
        """Record that the verifying round trip failed."""
        self._logger.warning(
            "session_verification_failed",
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def login_succeeded(self, user_id: str, kind: str) -> None:
        """Record a successful login."""
        self._logger.info(
            "session_login_succeeded",
            user_id=user_id,
            kind=kind,
            **self._get_context_kwargs(),
        )

    def login_failed(self, kind: str, error: Exception) -> None:
        """Record a failed login."""
        self._logger.warning(
            "session_login_failed",
            kind=kind,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def logged_out(self) -> None:
        """Record that the session was dropped."""
        self._logger.info(
            "session_logged_out",
            **self._get_context_kwargs(),
        )

    def billing_required_flagged(self) -> None:
        """Record that the API demanded an active subscription."""
        self._logger.warning(
            "session_billing_required",
            **self._get_context_kwargs(),
        )

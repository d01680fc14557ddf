"""Domain-Oriented Observability for the session application layer."""

from session.application.observability.auth_hydration_probe import (
    AuthHydrationProbe,
    DefaultAuthHydrationProbe,
)

__all__ = [
    "AuthHydrationProbe",
    "DefaultAuthHydrationProbe",
]

"""Ports for the session context."""

from session.ports.exceptions import AuthenticationError
from session.ports.gateway import SessionGateway

__all__ = ["AuthenticationError", "SessionGateway"]

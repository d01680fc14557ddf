"""Port-level exceptions for the session context."""


class AuthenticationError(Exception):
    """Raised when a login round trip completes without a usable session.

    For example when the API accepts the credentials but returns no token,
    or the freshly issued token does not resolve to a user.
    """

    pass

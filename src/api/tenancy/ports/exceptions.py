"""Port-level exceptions for the tenancy context."""


class TenantLookupError(Exception):
    """Raised when the remote tenant lookup could not confirm anything.

    Covers transport failures, server errors and malformed responses. A
    confirmed absence is not an error: lookups return None for it.
    """

    pass

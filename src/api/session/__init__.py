"""Session bounded context.

Re-establishes session state after a possibly server-rendered cold start:
turns the session cookie hint into a verified user, and keeps the session
cookie itself.
"""

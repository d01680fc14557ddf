"""Bootstrap bounded context.

Owns the per-navigation bootstrap: the server render pass producing the
hydration snapshot, the transport of that snapshot into the page, and the
client coordinator deciding what must still be fetched.
"""

"""Cart bounded context.

Keeps a read cache of the remote cart for the current tenant and session,
and mutates it by sending signed quantity deltas.
"""

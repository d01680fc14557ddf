"""Cart ports."""

from cart.ports.gateway import CartGateway

__all__ = ["CartGateway"]

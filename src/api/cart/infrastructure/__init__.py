"""Cart infrastructure adapters."""

from cart.infrastructure.http_cart_gateway import HttpCartGateway

__all__ = ["HttpCartGateway"]

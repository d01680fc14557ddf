"""Domain-Oriented Observability for the cart application layer."""

from cart.application.observability.cart_probe import CartProbe, DefaultCartProbe

__all__ = [
    "CartProbe",
    "DefaultCartProbe",
]

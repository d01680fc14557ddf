"""Domain exceptions for the cart context."""

from __future__ import annotations


class InvalidQuantityError(ValueError):
    """Raised when a cart operation receives a quantity it cannot apply."""

    def __init__(self, quantity: int, reason: str):
        super().__init__(f"Invalid quantity {quantity}: {reason}")
        self.quantity = quantity
        self.reason = reason

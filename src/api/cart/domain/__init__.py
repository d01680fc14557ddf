"""Cart domain layer."""

from cart.domain.exceptions import InvalidQuantityError
from cart.domain.value_objects import (
    Cart,
    CartItem,
    CartState,
    CheckoutResult,
    PaymentProof,
)

__all__ = [
    "Cart",
    "CartItem",
    "CartState",
    "CheckoutResult",
    "InvalidQuantityError",
    "PaymentProof",
]

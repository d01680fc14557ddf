"""Value objects for the cart domain."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CartItem:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class Cart:
    """Last known server-confirmed cart.

    Items are kept in server order and are unique by product id. A payload
    repeating a product keeps its first occurrence.
    """

    items: tuple[CartItem, ...] = ()
    id: str | None = None
    total: float | None = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> Cart:
        seen: set[str] = set()
        items: list[CartItem] = []
        for item in raw.get("items") or []:
            if not isinstance(item, Mapping):
                continue
            product_id = item.get("productId")
            if product_id is None:
                continue
            product_id = str(product_id)
            if product_id in seen:
                continue
            seen.add(product_id)
            items.append(CartItem(product_id=product_id, quantity=int(item.get("quantity") or 0)))

        total = raw.get("total")
        return cls(
            items=tuple(items),
            id=str(raw["id"]) if raw.get("id") is not None else None,
            total=float(total) if total is not None else None,
        )

    def quantity_of(self, product_id: str) -> int:
        for item in self.items:
            if item.product_id == product_id:
                return item.quantity
        return 0

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass(frozen=True)
class CartState:
    """Client-side cart state. ``cart`` is None when no cart is known."""

    cart: Cart | None = None
    loading: bool = False


@dataclass(frozen=True)
class PaymentProof:
    """Proof-of-payment attachment submitted at checkout."""

    filename: str
    content: bytes = field(repr=False)
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class CheckoutResult:
    order_id: str | None

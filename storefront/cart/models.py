"""Cart models with Decimal-based pricing.

Lines and snapshots are frozen: a quantity change produces a new line and
a new tuple of lines, so snapshots already handed to observers never change.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from storefront.services.models import Product
from storefront.services.sales import Sale
from storefront.services.money import multiply, round_money, sum_money


@dataclass(frozen=True)
class CartLine:
    """Single product in the cart with its quantity (always >= 1)."""
    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def unit_price(self) -> Decimal:
        return self.product.price

    @property
    def total_price(self) -> Decimal:
        """Total price for all units."""
        return multiply(self.product.price, self.quantity)

    def with_quantity(self, quantity: int) -> "CartLine":
        """Copy of this line with a different quantity."""
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "product_id": self.product.id,
            "product_name": self.product.name,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
            "total_price": str(round_money(self.total_price)),
        }


@dataclass(frozen=True)
class CartSnapshot:
    """Read-only view of the cart handed to observers."""
    lines: tuple[CartLine, ...] = ()

    @property
    def total(self) -> Decimal:
        """Sum of price * quantity; recomputed on every access."""
        return sum_money(line.total_price for line in self.lines)

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict[str, Any]:
        """Summary for rendering or logging."""
        return {
            "is_empty": self.is_empty,
            "total_items": self.total_items,
            "items": [line.to_dict() for line in self.lines],
            "total": str(round_money(self.total)),
        }


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a checkout attempt."""
    submitted: bool
    message: str
    sale: Sale | None = None

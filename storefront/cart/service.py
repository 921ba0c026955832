"""Cart store - in-memory cart lines with observable snapshots."""
from decimal import Decimal
from typing import Callable

from storefront.errors import (
    ERROR_NOTHING_TO_SUBMIT,
    CartLineNotFoundError,
    CheckoutInProgressError,
    InvalidQuantityError,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.observable import Observable, Unsubscribe
from storefront.services.models import Product
from storefront.services.sales import LoggingSalesGateway, Sale, SalesGateway
from .models import CartLine, CartSnapshot, CheckoutResult

logger = get_logger(__name__)


class CartStore:
    """
    Owns the cart lines for one session.

    Features:
    - One line per product id, kept in first-add order
    - Copy-on-write: every command publishes a new CartSnapshot
    - Checkout through a SalesGateway, at most one in flight
    """

    def __init__(
        self,
        gateway: SalesGateway | None = None,
        strict_updates: bool = False,
    ) -> None:
        self._gateway = gateway or LoggingSalesGateway()
        self._strict_updates = strict_updates
        self._state: Observable[CartSnapshot] = Observable(CartSnapshot(), name="cart")
        self._checkout_pending = False

    @property
    def gateway(self) -> SalesGateway:
        return self._gateway

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self._state.value.lines

    @property
    def checkout_pending(self) -> bool:
        """True while checkout() is awaiting the sales gateway."""
        return self._checkout_pending

    def snapshot(self) -> CartSnapshot:
        return self._state.value

    def total(self) -> Decimal:
        """Sum of price * quantity over all lines; 0 for an empty cart."""
        return self._state.value.total

    def total_items(self) -> int:
        return self._state.value.total_items

    def subscribe(
        self, callback: Callable[[CartSnapshot], None], replay: bool = True
    ) -> Unsubscribe:
        """Receive a CartSnapshot after every command."""
        return self._state.subscribe(callback, replay=replay)

    def add_product(self, product: Product) -> CartSnapshot:
        """Add one unit of product; a repeated product increments its line."""
        lines = self.lines
        index = self._find(product.id)

        if index is None:
            new_lines = lines + (CartLine(product=product, quantity=1),)
        else:
            line = lines[index]
            new_lines = lines[:index] + (line.with_quantity(line.quantity + 1),) + lines[index + 1:]

        logger.debug(f"Added product {sanitize_id_for_logging(product.id)} to cart")
        return self._publish(new_lines)

    def remove_product(self, product_id: str) -> CartSnapshot:
        """Remove the product's line. Absent product is a no-op."""
        index = self._find(product_id)
        if index is None:
            logger.debug(f"Remove ignored, {sanitize_id_for_logging(product_id)} not in cart")
            return self.snapshot()

        lines = self.lines
        logger.debug(f"Removed product {sanitize_id_for_logging(product_id)} from cart")
        return self._publish(lines[:index] + lines[index + 1:])

    def update_quantity(self, product_id: str, new_quantity: int) -> CartSnapshot:
        """
        Set the quantity of a line.

        Quantity <= 0 removes the line. An absent product is ignored, or
        raises CartLineNotFoundError when strict updates are enabled.

        Raises:
            InvalidQuantityError: new_quantity is not an int
            CartLineNotFoundError: strict mode and product not in cart
        """
        if not isinstance(new_quantity, int) or isinstance(new_quantity, bool):
            raise InvalidQuantityError(new_quantity)

        if new_quantity <= 0:
            return self.remove_product(product_id)

        index = self._find(product_id)
        if index is None:
            if self._strict_updates:
                raise CartLineNotFoundError(product_id)
            logger.debug(f"Quantity update ignored, {sanitize_id_for_logging(product_id)} not in cart")
            return self.snapshot()

        lines = self.lines
        line = lines[index]
        if line.quantity == new_quantity:
            return self.snapshot()
        return self._publish(lines[:index] + (line.with_quantity(new_quantity),) + lines[index + 1:])

    def clear(self) -> CartSnapshot:
        return self._publish(())

    async def checkout(self) -> CheckoutResult:
        """
        Submit the cart as a sale, then clear it.

        Empty cart: nothing is submitted. On gateway failure the error
        propagates and the cart keeps its lines for a retry.

        Raises:
            CheckoutInProgressError: another checkout is still pending
            SubmissionFailedError: the gateway did not record the sale
        """
        if self._checkout_pending:
            raise CheckoutInProgressError()

        snapshot = self.snapshot()
        if snapshot.is_empty:
            logger.info("Checkout skipped: cart is empty")
            return CheckoutResult(submitted=False, message=ERROR_NOTHING_TO_SUBMIT)

        sale = Sale.from_lines(snapshot.lines)
        self._checkout_pending = True
        try:
            await self._gateway.submit(sale)
        finally:
            self._checkout_pending = False

        self.clear()
        logger.info(f"Checkout completed, sale {sale.id} total {sale.total}")
        return CheckoutResult(submitted=True, message="Sale submitted", sale=sale)

    def close(self) -> None:
        """Drop all subscribers. The store is not used after this."""
        self._state.clear()

    def _find(self, product_id: str) -> int | None:
        return next(
            (i for i, line in enumerate(self.lines) if line.product.id == product_id),
            None,
        )

    def _publish(self, lines: tuple[CartLine, ...]) -> CartSnapshot:
        snapshot = CartSnapshot(lines=lines)
        self._state.set(snapshot)
        return snapshot

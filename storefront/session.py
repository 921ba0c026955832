"""Per-session wiring of the catalog and cart stores.

Create one StorefrontSession when the user logs in and close it when the
session ends:

    with StorefrontSession() as session:
        session.catalog.set_search_query("mouse")
        session.add_to_cart("6")
        result = await session.checkout()
"""
from typing import Iterable

from storefront.cart import CartSnapshot, CartStore, CheckoutResult
from storefront.catalog import SEED_PRODUCTS, CatalogStore
from storefront.config import Settings, get_settings
from storefront.errors import SessionClosedError
from storefront.logging import get_logger
from storefront.services.models import Product
from storefront.services.money import format_money
from storefront.services.sales import SalesGateway

logger = get_logger(__name__)


class StorefrontSession:
    """Owns one CatalogStore and one CartStore for a user session."""

    def __init__(
        self,
        settings: Settings | None = None,
        gateway: SalesGateway | None = None,
        products: Iterable[Product] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.catalog = CatalogStore()
        self.cart = CartStore(gateway=gateway, strict_updates=self.settings.strict_cart_updates)
        self._closed = False

        if products is not None:
            self.catalog.load_products(products)
        elif self.settings.seed_catalog:
            self.catalog.load_products(SEED_PRODUCTS)

        logger.debug("Storefront session opened")

    @property
    def closed(self) -> bool:
        return self._closed

    def add_to_cart(self, product_id: str) -> CartSnapshot:
        """
        Add one unit of a catalog product to the cart.

        Raises:
            SessionClosedError: session already closed
            ProductNotFoundError: id is not in the catalog
        """
        self._ensure_open()
        return self.cart.add_product(self.catalog.get_product(product_id))

    async def checkout(self) -> CheckoutResult:
        """Check out the session cart (see CartStore.checkout)."""
        self._ensure_open()
        return await self.cart.checkout()

    def format_price(self, value) -> str:
        """Format an amount in the session currency."""
        return format_money(value, self.settings.currency)

    def close(self) -> None:
        """Dispose both stores. Safe to call more than once."""
        if self._closed:
            return
        self.catalog.close()
        self.cart.close()
        self._closed = True
        logger.debug("Storefront session closed")

    def __enter__(self) -> "StorefrontSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError()

"""
Catalog Store

Holds the product list and the search text, and keeps the filtered view
current for subscribers.
"""

from typing import Callable, Iterable

from storefront.errors import ProductNotFoundError
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.observable import Observable, Unsubscribe
from storefront.services.models import Product

logger = get_logger(__name__)


def filter_products(products: Iterable[Product], query: str) -> tuple[Product, ...]:
    """Products whose name or description contains query (case-insensitive).

    A blank query keeps every product. Catalog order is preserved.
    """
    if not query.strip():
        return tuple(products)
    return tuple(product for product in products if product.matches(query))


class CatalogStore:
    """Product catalog with search filtering."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        initial = tuple(products)
        self._products = initial
        self._search_query: Observable[str] = Observable("", name="search_query")
        self._filtered: Observable[tuple[Product, ...]] = Observable(
            initial, name="filtered_products"
        )

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def search_query(self) -> str:
        return self._search_query.value

    def load_products(self, products: Iterable[Product]) -> None:
        """Replace the catalog and refresh the filtered view."""
        self._products = tuple(products)
        logger.info(f"Catalog loaded with {len(self._products)} product(s)")
        self._refresh()

    def set_search_query(self, text: str) -> None:
        """Replace the search text. Empty text means no filter.

        Both the query and the filtered view are stored before any
        subscriber is notified.
        """
        self._search_query.put(text)
        self._filtered.put(filter_products(self._products, text))
        logger.debug(f"Search query set to '{sanitize_string_for_logging(text)}'")
        self._search_query.notify()
        self._filtered.notify()

    def filtered_products(self) -> tuple[Product, ...]:
        return self._filtered.value

    def get_product(self, product_id: str) -> Product:
        """
        Look up a product by id.

        Raises:
            ProductNotFoundError: id is not in the catalog
        """
        for product in self._products:
            if product.id == product_id:
                return product
        raise ProductNotFoundError(product_id)

    def subscribe_filtered_products(
        self, callback: Callable[[tuple[Product, ...]], None], replay: bool = True
    ) -> Unsubscribe:
        return self._filtered.subscribe(callback, replay=replay)

    def subscribe_search_query(
        self, callback: Callable[[str], None], replay: bool = True
    ) -> Unsubscribe:
        return self._search_query.subscribe(callback, replay=replay)

    def close(self) -> None:
        """Drop all subscribers."""
        self._search_query.clear()
        self._filtered.clear()

    def _refresh(self) -> None:
        self._filtered.set(filter_products(self._products, self._search_query.value))

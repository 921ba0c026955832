"""Storefront state core: catalog search, shopping cart and checkout."""
from storefront.cart import CartLine, CartSnapshot, CartStore, CheckoutResult
from storefront.catalog import SEED_PRODUCTS, CatalogStore
from storefront.services.models import Product
from storefront.services.sales import LoggingSalesGateway, Sale, SalesGateway
from storefront.session import StorefrontSession

__all__ = [
    "CartLine",
    "CartSnapshot",
    "CartStore",
    "CheckoutResult",
    "CatalogStore",
    "SEED_PRODUCTS",
    "Product",
    "Sale",
    "SalesGateway",
    "LoggingSalesGateway",
    "StorefrontSession",
]

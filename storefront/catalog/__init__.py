"""Catalog package: seed products and the catalog store."""
from .seed import SEED_PRODUCTS
from .service import CatalogStore, filter_products

__all__ = [
    "SEED_PRODUCTS",
    "CatalogStore",
    "filter_products",
]

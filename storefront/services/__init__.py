"""Shared services: money helpers, catalog models, sales gateways."""
from .models import Product
from .sales import LoggingSalesGateway, SalesGateway

__all__ = [
    "Product",
    "SalesGateway",
    "LoggingSalesGateway",
]

"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

# Keep test runs independent of a developer's .env
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("STOREFRONT_CURRENCY", "USD")

from storefront.cart import CartStore
from storefront.catalog import CatalogStore
from storefront.config import Settings
from storefront.services.models import Product
from storefront.services.sales import LoggingSalesGateway, SalesGateway


@pytest.fixture
def laptop():
    """Laptop product"""
    return Product(
        id="1",
        name="Laptop Gamer Pro",
        description="Potente laptop para juegos con RTX 4080",
        price=Decimal("1899.99"),
        image_url="https://placehold.co/600x400/5E5E5E/white?text=Laptop",
    )


@pytest.fixture
def mouse():
    """Mouse product"""
    return Product(
        id="2",
        name="Mouse Ergonómico",
        description="Mouse inalámbrico con diseño ergonómico",
        price=Decimal("65.00"),
        image_url="https://placehold.co/600x400/8E8E8E/white?text=Mouse",
    )


@pytest.fixture
def keyboard():
    """Keyboard product"""
    return Product(
        id="3",
        name="Teclado Mecánico RGB",
        description="Teclado con switches cherry-mx red",
        price=Decimal("120.00"),
    )


@pytest.fixture
def gateway():
    """Stub gateway that records submitted sales"""
    return LoggingSalesGateway()


@pytest.fixture
def failing_gateway():
    """Gateway whose submit always fails"""
    from storefront.errors import SubmissionFailedError

    gw = AsyncMock(spec=SalesGateway)
    gw.submit.side_effect = SubmissionFailedError("backend down")
    return gw


@pytest.fixture
def cart(gateway):
    """Empty cart backed by the recording gateway"""
    return CartStore(gateway=gateway)


@pytest.fixture
def catalog(laptop, mouse, keyboard):
    """Catalog with three products"""
    return CatalogStore([laptop, mouse, keyboard])


@pytest.fixture
def settings():
    """Default settings, not read from the environment"""
    return Settings()

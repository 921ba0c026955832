"""Fixed product list loaded at startup (mock data, no backend)."""
from decimal import Decimal

from storefront.services.models import Product

_IMAGE_BASE = "https://placehold.co/600x400"

SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Laptop Gamer Pro",
        description="Potente laptop para juegos con RTX 4080",
        price=Decimal("1899.99"),
        image_url=f"{_IMAGE_BASE}/5E5E5E/white?text=Laptop",
    ),
    Product(
        id="2",
        name="Smartphone Pixel 8",
        description="El último smartphone con la mejor cámara",
        price=Decimal("999.50"),
        image_url=f"{_IMAGE_BASE}/3E3E3E/white?text=Smartphone",
    ),
    Product(
        id="3",
        name="Auriculares Inalámbricos",
        description="Cancelación de ruido y sonido Hi-Fi",
        price=Decimal("249.00"),
        image_url=f"{_IMAGE_BASE}/7E7E7E/white?text=Auriculares",
    ),
    Product(
        id="4",
        name="Teclado Mecánico RGB",
        description="Teclado con switches cherry-mx red",
        price=Decimal("120.00"),
        image_url=f"{_IMAGE_BASE}/4E4E4E/white?text=Teclado",
    ),
    Product(
        id="5",
        name="Monitor Curvo 4K",
        description="Monitor de 32 pulgadas para máxima inmersión",
        price=Decimal("750.80"),
        image_url=f"{_IMAGE_BASE}/6E6E6E/white?text=Monitor",
    ),
    Product(
        id="6",
        name="Mouse Ergonómico",
        description="Mouse inalámbrico con diseño ergonómico",
        price=Decimal("65.00"),
        image_url=f"{_IMAGE_BASE}/8E8E8E/white?text=Mouse",
    ),
)

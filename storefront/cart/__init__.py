"""Cart package: immutable line models and the cart store."""
from .models import CartLine, CartSnapshot, CheckoutResult
from .service import CartStore

__all__ = [
    "CartLine",
    "CartSnapshot",
    "CheckoutResult",
    "CartStore",
]

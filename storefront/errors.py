"""
Storefront errors.

Message constants are centralized so handlers and tests compare against the
same text. Exceptions carry a machine-readable code and a retryable flag.
"""

from typing import Any

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Cart errors
ERROR_CART_LINE_NOT_FOUND = "Product is not in the cart"
ERROR_INVALID_QUANTITY = "Quantity must be an integer"
ERROR_CHECKOUT_IN_PROGRESS = "Checkout already in progress"
ERROR_NOTHING_TO_SUBMIT = "Cart is empty, nothing to submit"

# Sales errors
ERROR_SUBMISSION_FAILED = "Sale submission failed"

# Session errors
ERROR_SESSION_CLOSED = "Session is closed"


class StorefrontError(Exception):
    """Base error for catalog, cart and checkout operations."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.retryable = retryable


class ProductNotFoundError(StorefrontError, LookupError):
    """Product id is not in the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"{ERROR_PRODUCT_NOT_FOUND}: {product_id}", code="NOT_FOUND")
        self.product_id = product_id


class CartLineNotFoundError(StorefrontError, LookupError):
    """Product id has no line in the cart."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"{ERROR_CART_LINE_NOT_FOUND}: {product_id}", code="NOT_FOUND")
        self.product_id = product_id


class InvalidQuantityError(StorefrontError, ValueError):
    """Quantity is not usable as a line quantity."""

    def __init__(self, quantity: Any) -> None:
        super().__init__(f"{ERROR_INVALID_QUANTITY}, got {quantity!r}", code="INVALID_QUANTITY")
        self.quantity = quantity


class SubmissionFailedError(StorefrontError):
    """Sales gateway rejected or failed to record a sale."""

    def __init__(self, message: str = ERROR_SUBMISSION_FAILED, raw_error: Any = None) -> None:
        super().__init__(message, code="SUBMISSION_FAILED", retryable=True)
        self.raw_error = raw_error


class CheckoutInProgressError(StorefrontError):
    """A checkout is already awaiting the sales gateway."""

    def __init__(self, message: str = ERROR_CHECKOUT_IN_PROGRESS) -> None:
        super().__init__(message, code="CHECKOUT_IN_PROGRESS", retryable=True)


class SessionClosedError(StorefrontError):
    """Command issued after the session was closed."""

    def __init__(self, message: str = ERROR_SESSION_CLOSED) -> None:
        super().__init__(message, code="SESSION_CLOSED")

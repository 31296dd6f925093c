"""
Custom exceptions for the storefront cart
"""

from typing import Optional

from storefront_cart.infrastructure.utilities.constants import ErrorCodes


class CartError(Exception):
    """Base exception for the cart"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or ErrorCodes.GENERAL_ERROR


class ValidationError(CartError):
    """Input validation errors"""

    def __init__(self, message: str, field: str = None):
        super().__init__(message, message, ErrorCodes.VALIDATION_ERROR)
        self.field = field


class InvalidQuantityError(ValidationError):
    """Quantity passed to add_item was not a positive integer"""

    def __init__(self, quantity):
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}", "quantity")
        self.quantity = quantity


class StockLimitExceededError(CartError):
    """Requested quantity is above the known stock ceiling"""

    def __init__(self, title: str, stock_limit: Optional[int]):
        super().__init__(
            f"Stock limit exceeded for {title}: limit {stock_limit}",
            f"Only {stock_limit} items available in stock.",
            ErrorCodes.STOCK_LIMIT_EXCEEDED,
        )
        self.title = title
        self.stock_limit = stock_limit


class PersistenceUnavailableError(CartError):
    """Storage backend could not be read or written"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(
            message,
            "Your cart could not be saved. It will be kept for this session.",
            ErrorCodes.PERSISTENCE_UNAVAILABLE,
        )
        self.operation = operation


class CartPayloadError(CartError):
    """Persisted cart payload is unparsable or does not match the schema"""

    def __init__(self, message: str):
        super().__init__(message, "Your saved cart could not be restored.", ErrorCodes.INVALID_PAYLOAD)


def validate_and_raise(condition: bool, error_class: type, *args, **kwargs):
    """Helper function to validate condition and raise specific error"""
    if not condition:
        raise error_class(*args, **kwargs)

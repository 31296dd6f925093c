"""
Domain value objects package

Contains immutable value objects that represent concepts in the cart domain.
"""

from .cart_event import CartEvent, CartEventKind
from .discount_percent import DiscountPercent
from .line_item_id import LineItemId
from .money import Money
from .reference_id import ReferenceId

__all__ = [
    "CartEvent",
    "CartEventKind",
    "DiscountPercent",
    "LineItemId",
    "Money",
    "ReferenceId",
]

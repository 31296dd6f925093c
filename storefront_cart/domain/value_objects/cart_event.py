"""
Cart event value object

Events are emitted by pure cart transitions and dispatched to the notifier
by the store afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CartEventKind(str, Enum):
    """User-visible notification kinds"""

    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"
    CLEARED = "cleared"
    STOCK_LIMIT = "stock_limit"


@dataclass(frozen=True)
class CartEvent:
    """Something the UI may want to tell the shopper about"""

    kind: CartEventKind
    title: Optional[str] = None
    line_item_id: Optional[str] = None
    quantity: Optional[int] = None
    stock_limit: Optional[int] = None

    def describe(self) -> str:
        """Toast-style text for the event"""
        if self.kind is CartEventKind.ADDED:
            return f"{self.title} has been added to your cart."
        if self.kind is CartEventKind.UPDATED:
            return f"{self.title} quantity updated to {self.quantity}."
        if self.kind is CartEventKind.REMOVED:
            return f"{self.title} has been removed from your cart."
        if self.kind is CartEventKind.CLEARED:
            return "All items have been removed from your cart."
        return f"Only {self.stock_limit} items available in stock."

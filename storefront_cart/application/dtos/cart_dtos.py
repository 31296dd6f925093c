"""
Cart DTOs

Data Transfer Objects handed to UI code by the cart store.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

from storefront_cart.domain.entities.cart_entity import Cart, CartOutcome
from storefront_cart.domain.entities.line_item_entity import CartLineItem, ProductDetails
from storefront_cart.domain.value_objects.cart_event import CartEvent, CartEventKind
from storefront_cart.infrastructure.utilities.exceptions import StockLimitExceededError


@dataclass
class CartItemInfo:
    """Cart item information"""

    line_item_id: str
    kind: str
    reference_id: int
    title: str
    quantity: int
    unit_price: Decimal
    discount_percent: Decimal
    final_unit_price: Decimal
    line_total: Decimal
    image: str = ""
    selected_size: Optional[str] = None
    selected_color: Optional[str] = None
    stock_limit: Optional[int] = None

    @classmethod
    def from_line_item(cls, line_item: CartLineItem) -> "CartItemInfo":
        details = line_item.item.details
        is_product = isinstance(details, ProductDetails)
        return cls(
            line_item_id=line_item.id.value,
            kind=line_item.kind.value,
            reference_id=line_item.reference_id.value,
            title=line_item.title,
            quantity=line_item.quantity,
            unit_price=line_item.unit_price.amount,
            discount_percent=line_item.discount.value,
            final_unit_price=line_item.final_unit_price.amount,
            line_total=line_item.line_total.amount,
            image=line_item.item.image,
            selected_size=details.selected_size if is_product else None,
            selected_color=details.selected_color if is_product else None,
            stock_limit=details.stock_limit if is_product else None,
        )


@dataclass
class CartSummary:
    """Cart summary information"""

    items: List[CartItemInfo]
    total_item_count: int
    total_amount: Decimal
    currency: str
    state: str

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartSummary":
        return cls(
            items=[CartItemInfo.from_line_item(item) for item in cart.items],
            total_item_count=cart.total_item_count(),
            total_amount=cart.total_amount().amount,
            currency=cart.currency,
            state=cart.state.value,
        )


@dataclass
class CartOperationResponse:
    """Response for cart operations"""

    success: bool
    outcome: CartOutcome
    cart_summary: Optional[CartSummary] = None
    line_item_id: Optional[str] = None
    events: Tuple[CartEvent, ...] = field(default_factory=tuple)
    persisted: bool = True
    error_message: Optional[str] = None

    @property
    def stock_limit_exceeded(self) -> bool:
        return self.outcome is CartOutcome.STOCK_LIMIT_EXCEEDED

    def raise_for_outcome(self) -> "CartOperationResponse":
        """Raise StockLimitExceededError for callers that prefer exceptions"""
        if self.stock_limit_exceeded:
            event = next(e for e in self.events if e.kind is CartEventKind.STOCK_LIMIT)
            raise StockLimitExceededError(event.title, event.stock_limit)
        return self

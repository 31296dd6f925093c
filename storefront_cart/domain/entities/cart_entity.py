"""
Cart aggregate

Pure state transitions: every mutation returns a new Cart together with the
events it produced, so the rules can be exercised without any UI or storage.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from storefront_cart.domain.entities.line_item_entity import (
    CartLineItem,
    ItemDraft,
    ItemKind,
)
from storefront_cart.domain.value_objects.cart_event import CartEvent, CartEventKind
from storefront_cart.domain.value_objects.money import Money


class CartState(str, Enum):
    """Coarse cart state used to pick checkout vs. empty-state views"""

    EMPTY = "empty"
    NON_EMPTY = "non_empty"


class CartOutcome(str, Enum):
    """Result of a single cart operation"""

    APPLIED = "applied"
    NO_OP = "no_op"
    STOCK_LIMIT_EXCEEDED = "stock_limit_exceeded"


@dataclass(frozen=True)
class CartTransition:
    """New cart state plus the events emitted on the way"""

    cart: "Cart"
    outcome: CartOutcome
    events: Tuple[CartEvent, ...] = ()
    line_item_id: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.outcome is CartOutcome.APPLIED


@dataclass(frozen=True)
class Cart:
    """Ordered, immutable collection of line items"""

    items: Tuple[CartLineItem, ...] = field(default_factory=tuple)
    currency: str = "INR"

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError("Line item ids must be unique within a cart")

    @classmethod
    def empty(cls, currency: str = "INR") -> "Cart":
        return cls(items=(), currency=currency)

    # Queries

    @property
    def state(self) -> CartState:
        return CartState.NON_EMPTY if self.items else CartState.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, line_item_id: str) -> Optional[CartLineItem]:
        """Find a line item by id"""
        return next((item for item in self.items if item.id.value == line_item_id), None)

    def find_variant(self, draft: ItemDraft) -> Optional[CartLineItem]:
        """Find the product line item sharing the draft's variant"""
        if draft.kind is not ItemKind.PRODUCT:
            return None
        return next(
            (
                item
                for item in self.items
                if item.kind is ItemKind.PRODUCT and item.variant_key == draft.variant_key
            ),
            None,
        )

    def items_of_kind(self, kind: ItemKind) -> Tuple[CartLineItem, ...]:
        return tuple(item for item in self.items if item.kind is kind)

    def total_item_count(self) -> int:
        """Sum of quantities across all line items"""
        return sum(item.quantity for item in self.items)

    def total_amount(self) -> Money:
        """Sum of discounted line totals, without intermediate rounding"""
        total = Money(Decimal("0"), self.currency)
        for item in self.items:
            total = total.add(item.line_total)
        return total

    # Transitions

    def add(self, draft: ItemDraft, quantity: int = 1) -> CartTransition:
        """
        Add a draft to the cart

        Designs always become a new line item. Products merge into the line
        item with the same (reference id, size, colour); a merge or a new line
        that would exceed the stock limit leaves the cart untouched.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError("Quantity must be a positive integer")

        if draft.unit_price.currency != self.currency:
            raise ValueError(
                f"Cannot add {draft.unit_price.currency} item to {self.currency} cart"
            )

        existing = self.find_variant(draft)
        if existing is not None:
            new_quantity = existing.quantity + quantity
            if _over_limit(draft.stock_limit, new_quantity):
                return self._stock_rejection(draft.title, existing.id.value, draft.stock_limit)

            # Catalog data on the draft is fresher than what the line item holds
            merged = replace(existing, item=draft, quantity=new_quantity)
            return CartTransition(
                cart=self._with_items(
                    tuple(merged if item.id == existing.id else item for item in self.items)
                ),
                outcome=CartOutcome.APPLIED,
                events=(
                    CartEvent(
                        kind=CartEventKind.UPDATED,
                        title=draft.title,
                        line_item_id=existing.id.value,
                        quantity=new_quantity,
                    ),
                ),
                line_item_id=existing.id.value,
            )

        if _over_limit(draft.stock_limit, quantity):
            return self._stock_rejection(draft.title, None, draft.stock_limit)

        line_item = CartLineItem.create(draft, quantity)
        return CartTransition(
            cart=self._with_items(self.items + (line_item,)),
            outcome=CartOutcome.APPLIED,
            events=(
                CartEvent(
                    kind=CartEventKind.ADDED,
                    title=draft.title,
                    line_item_id=line_item.id.value,
                    quantity=quantity,
                ),
            ),
            line_item_id=line_item.id.value,
        )

    def remove(self, line_item_id: str) -> CartTransition:
        """Remove a line item; unknown ids are a no-op"""
        removed = self.find(line_item_id)
        if removed is None:
            return CartTransition(cart=self, outcome=CartOutcome.NO_OP)

        return CartTransition(
            cart=self._with_items(tuple(item for item in self.items if item is not removed)),
            outcome=CartOutcome.APPLIED,
            events=(
                CartEvent(
                    kind=CartEventKind.REMOVED,
                    title=removed.title,
                    line_item_id=line_item_id,
                ),
            ),
            line_item_id=line_item_id,
        )

    def update_quantity(self, line_item_id: str, quantity: int) -> CartTransition:
        """Set a line item's quantity; zero or below removes it"""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError("Quantity must be an integer")

        if quantity <= 0:
            return self.remove(line_item_id)

        target = self.find(line_item_id)
        if target is None:
            return CartTransition(cart=self, outcome=CartOutcome.NO_OP)

        if target.exceeds_stock(quantity):
            return self._stock_rejection(target.title, line_item_id, target.stock_limit)

        if quantity == target.quantity:
            return CartTransition(cart=self, outcome=CartOutcome.NO_OP, line_item_id=line_item_id)

        updated = target.with_quantity(quantity)
        return CartTransition(
            cart=self._with_items(
                tuple(updated if item is target else item for item in self.items)
            ),
            outcome=CartOutcome.APPLIED,
            events=(
                CartEvent(
                    kind=CartEventKind.UPDATED,
                    title=target.title,
                    line_item_id=line_item_id,
                    quantity=quantity,
                ),
            ),
            line_item_id=line_item_id,
        )

    def clear(self) -> CartTransition:
        """Empty the cart unconditionally"""
        return CartTransition(
            cart=self._with_items(()),
            outcome=CartOutcome.APPLIED,
            events=(CartEvent(kind=CartEventKind.CLEARED),),
        )

    def _with_items(self, items: Tuple[CartLineItem, ...]) -> "Cart":
        return Cart(items=items, currency=self.currency)

    def _stock_rejection(
        self, title: str, line_item_id: Optional[str], stock_limit: Optional[int]
    ) -> CartTransition:
        return CartTransition(
            cart=self,
            outcome=CartOutcome.STOCK_LIMIT_EXCEEDED,
            events=(
                CartEvent(
                    kind=CartEventKind.STOCK_LIMIT,
                    title=title,
                    line_item_id=line_item_id,
                    stock_limit=stock_limit,
                ),
            ),
            line_item_id=line_item_id,
        )


def _over_limit(stock_limit: Optional[int], quantity: int) -> bool:
    return stock_limit is not None and quantity > stock_limit

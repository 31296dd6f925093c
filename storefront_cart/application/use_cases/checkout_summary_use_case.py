"""
Checkout summary use case

Reads the cart once and produces the rounded amounts handed to the order
endpoint and payment gateway. Rounding happens here and nowhere else.
"""

import logging
from typing import Optional

from storefront_cart.application.dtos.cart_dtos import CartOperationResponse
from storefront_cart.application.dtos.checkout_dtos import CheckoutLine, CheckoutSummary
from storefront_cart.application.use_cases.cart_store import CartStore
from storefront_cart.domain.entities.line_item_entity import CartLineItem, ItemKind
from storefront_cart.domain.value_objects.money import Money


class CheckoutSummaryUseCase:
    """Builds checkout summaries and closes out the cart after payment"""

    def __init__(self, cart_store: CartStore):
        self._cart_store = cart_store
        self._logger = logging.getLogger(self.__class__.__name__)

    def build(self, kind: Optional[ItemKind] = None) -> CheckoutSummary:
        """Summarize the cart, optionally restricted to one item kind"""
        cart = self._cart_store.cart
        line_items = cart.items if kind is None else cart.items_of_kind(kind)

        total = Money.zero(cart.currency)
        for line_item in line_items:
            total = total.add(line_item.line_total)

        payable = total.rounded()
        summary = CheckoutSummary(
            lines=[self._to_line(line_item) for line_item in line_items],
            total_item_count=sum(line_item.quantity for line_item in line_items),
            total_amount=total.amount,
            payable_amount=payable.amount,
            amount_minor_units=payable.to_minor_units(),
            currency=cart.currency,
        )

        self._logger.info(
            "💳 CHECKOUT SUMMARY: %d lines, payable %s",
            len(summary.lines),
            payable.format_display(),
        )
        return summary

    def complete(self) -> CartOperationResponse:
        """Clear the cart once the order has been paid"""
        self._logger.info("✅ CHECKOUT COMPLETE: clearing cart")
        return self._cart_store.clear()

    @staticmethod
    def _to_line(line_item: CartLineItem) -> CheckoutLine:
        return CheckoutLine(
            line_item_id=line_item.id.value,
            kind=line_item.kind.value,
            reference_id=line_item.reference_id.value,
            title=line_item.title,
            quantity=line_item.quantity,
            unit_price=line_item.unit_price.rounded().amount,
            final_unit_price=line_item.final_unit_price.rounded().amount,
            line_total=line_item.line_total.rounded().amount,
        )

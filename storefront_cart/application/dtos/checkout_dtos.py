"""
Checkout DTOs

What the order-creation endpoint and payment gateway get to see of the cart.
All amounts here are already rounded.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List


@dataclass
class CheckoutLine:
    """One line of the checkout summary"""

    line_item_id: str
    kind: str
    reference_id: int
    title: str
    quantity: int
    unit_price: Decimal
    final_unit_price: Decimal
    line_total: Decimal

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "line_item_id": self.line_item_id,
            "kind": self.kind,
            "reference_id": self.reference_id,
            "title": self.title,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
            "final_unit_price": str(self.final_unit_price),
            "line_total": str(self.line_total),
        }


@dataclass
class CheckoutSummary:
    """Checkout summary information"""

    lines: List[CheckoutLine]
    total_item_count: int
    total_amount: Decimal
    payable_amount: Decimal
    amount_minor_units: int
    currency: str

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict:
        """Payload for the order-creation request"""
        return {
            "lines": [line.to_dict() for line in self.lines],
            "total_item_count": self.total_item_count,
            "total_amount": str(self.total_amount),
            "payable_amount": str(self.payable_amount),
            "amount_minor_units": self.amount_minor_units,
            "currency": self.currency,
        }

"""
Discount percent value object

A markdown expressed as a percentage of the unit price, never an absolute amount.
"""

from dataclasses import dataclass
from decimal import Decimal

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class DiscountPercent:
    """Percentage markdown in the half-open range [0, 100)"""

    value: Decimal = Decimal("0")

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise ValueError("Discount percent must be numeric")
        if not isinstance(self.value, Decimal):
            object.__setattr__(self, "value", Decimal(str(self.value)))
        if not self.value.is_finite() or self.value < 0 or self.value >= HUNDRED:
            raise ValueError("Discount percent must be in the range [0, 100)")

    @classmethod
    def none(cls) -> "DiscountPercent":
        """No markdown"""
        return cls(Decimal("0"))

    @property
    def is_active(self) -> bool:
        return self.value > 0

    @property
    def multiplier(self) -> Decimal:
        """Factor applied to the unit price"""
        return Decimal("1") - self.value / HUNDRED

    def __str__(self) -> str:
        return f"{self.value}%"

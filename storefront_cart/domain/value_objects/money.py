"""
Money value object

Represents monetary amounts with currency handling. Amounts are kept exact;
rounding happens only when a value crosses the checkout/presentation boundary.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """
    Money value object that handles currency amounts properly
    """

    amount: Decimal
    currency: str = "INR"

    def __post_init__(self):
        """Validate money object on creation"""
        if isinstance(self.amount, bool):
            raise ValueError("Money amount must be numeric")

        if not isinstance(self.amount, Decimal):
            # Convert via str so floats keep their printed value
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")

        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

        if not self.currency or len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter code")

        object.__setattr__(self, "currency", self.currency.upper())

    @classmethod
    def from_float(cls, amount: float, currency: str = "INR") -> "Money":
        """Create Money from float amount"""
        return cls(Decimal(str(amount)), currency)

    @classmethod
    def zero(cls, currency: str = "INR") -> "Money":
        """Create zero money amount"""
        return cls(Decimal("0"), currency)

    def add(self, other: "Money") -> "Money":
        """Add two money amounts"""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} and {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: Union[int, float, Decimal]) -> "Money":
        """Multiply money by a factor"""
        if not isinstance(factor, Decimal):
            factor = Decimal(str(factor))
        if factor < 0:
            raise ValueError("Cannot multiply money by negative factor")
        return Money(self.amount * factor, self.currency)

    def rounded(self) -> "Money":
        """Round half-up to the currency's minor unit (checkout and display only)"""
        return Money(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def to_minor_units(self) -> int:
        """Rounded amount expressed in minor units, e.g. paise"""
        return int(self.rounded().amount * 100)

    def is_zero(self) -> bool:
        """Check if amount is zero"""
        return self.amount == Decimal("0")

    def format_display(self) -> str:
        """Format for display to users"""
        return f"{self.rounded().amount:.2f} {self.currency}"

    def __str__(self) -> str:
        return self.format_display()

    def __repr__(self) -> str:
        return f"Money(amount={self.amount}, currency='{self.currency}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __lt__(self, other: "Money") -> bool:
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        self._check_same_currency(other)
        return self.amount >= other.amount

    def __add__(self, other: "Money") -> "Money":
        """Add two money amounts using + operator"""
        return self.add(other)

    def __mul__(self, factor: Union[int, float, Decimal]) -> "Money":
        """Multiply money by a factor using * operator"""
        return self.multiply(factor)

    def __rmul__(self, factor: Union[int, float, Decimal]) -> "Money":
        """Reverse multiply for factor * money"""
        return self.multiply(factor)

    def _check_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot compare different currencies: {self.currency} and {other.currency}"
            )

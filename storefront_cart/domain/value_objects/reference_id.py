"""Catalog reference ID value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceId:
    """Identifier of a design or product in the external catalog"""

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("Reference ID must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

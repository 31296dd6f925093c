"""
Line item ID value object

IDs are generated once per add and never reused, so two additions of the same
design stay distinguishable for the whole process lifetime.
"""

import itertools
import secrets
import time
from dataclasses import dataclass

_sequence = itertools.count(1)


@dataclass(frozen=True)
class LineItemId:
    """Opaque cart line item identifier"""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Line item ID must be a non-empty string")

    @classmethod
    def generate(cls, prefix: str = "item") -> "LineItemId":
        """Timestamp + process-wide counter + random suffix"""
        timestamp_ms = time.time_ns() // 1_000_000
        return cls(f"{prefix}_{timestamp_ms}_{next(_sequence)}_{secrets.token_hex(3)}")

    def __str__(self) -> str:
        return self.value

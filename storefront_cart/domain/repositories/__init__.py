"""
Domain repositories package

Contracts for the collaborators the cart depends on.
"""

from .cart_notifier import CartNotifier
from .cart_storage import CartStorage

__all__ = ["CartNotifier", "CartStorage"]

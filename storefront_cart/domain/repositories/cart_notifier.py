"""
Cart notifier interface

Fire-and-forget channel for user-visible cart notifications.
"""

from abc import ABC, abstractmethod

from storefront_cart.domain.value_objects.cart_event import CartEvent


class CartNotifier(ABC):
    """Receives cart events after they have been applied and persisted"""

    @abstractmethod
    def notify(self, event: CartEvent) -> None:
        """Deliver a single event"""

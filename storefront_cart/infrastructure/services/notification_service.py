"""
Cart Notification Services

Implementations of the CartNotifier contract. The UI layer picks one;
the store only ever calls notify().
"""

import logging
from typing import List, Optional

from storefront_cart.domain.repositories.cart_notifier import CartNotifier
from storefront_cart.domain.value_objects.cart_event import CartEvent, CartEventKind

_TITLES = {
    CartEventKind.ADDED: "Added to cart",
    CartEventKind.UPDATED: "Cart updated",
    CartEventKind.REMOVED: "Removed from cart",
    CartEventKind.CLEARED: "Cart cleared",
    CartEventKind.STOCK_LIMIT: "Stock limit reached",
}


def format_toast(event: CartEvent) -> str:
    """Title and description for a toast/banner"""
    return f"{_TITLES[event.kind]}: {event.describe()}"


class LoggingCartNotifier(CartNotifier):
    """Writes toast text to the log"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    def notify(self, event: CartEvent) -> None:
        level = logging.WARNING if event.kind is CartEventKind.STOCK_LIMIT else logging.INFO
        self._logger.log(level, "🔔 %s", format_toast(event), extra={"cart_event": event.kind.value})


class RecordingCartNotifier(CartNotifier):
    """Keeps events in memory until the UI drains them"""

    def __init__(self):
        self.events: List[CartEvent] = []

    def notify(self, event: CartEvent) -> None:
        self.events.append(event)

    def drain(self) -> List[CartEvent]:
        """Return and forget pending events"""
        events, self.events = self.events, []
        return events

    def kinds(self) -> List[CartEventKind]:
        return [event.kind for event in self.events]


class NullCartNotifier(CartNotifier):
    """Discards every event"""

    def notify(self, event: CartEvent) -> None:
        return None

"""
Cart store

Owns the session's cart: applies domain transitions, keeps storage in sync
after every change, then tells subscribers and the notifier.
"""

import logging
from typing import Callable, List, Optional, Tuple, Union

from storefront_cart.application.dtos.cart_dtos import CartOperationResponse, CartSummary
from storefront_cart.domain.entities.cart_entity import (
    Cart,
    CartOutcome,
    CartState,
    CartTransition,
)
from storefront_cart.domain.entities.line_item_entity import CartLineItem, ItemDraft
from storefront_cart.domain.repositories.cart_notifier import CartNotifier
from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.domain.value_objects.cart_event import CartEvent
from storefront_cart.domain.value_objects.money import Money
from storefront_cart.infrastructure.logging.logging_config import PerformanceLogger
from storefront_cart.infrastructure.serialization.cart_serializer import CartSerializer
from storefront_cart.infrastructure.utilities.constants import CartSettings
from storefront_cart.infrastructure.utilities.exceptions import (
    CartPayloadError,
    InvalidQuantityError,
    PersistenceUnavailableError,
    ValidationError,
    validate_and_raise,
)

CartSubscriber = Callable[[Cart], None]


def cart_storage_key_for(
    base_key: str = CartSettings.STORAGE_KEY, user_id: Optional[Union[str, int]] = None
) -> str:
    """Storage key for an anonymous session or a signed-in user"""
    if user_id is None or str(user_id).strip() == "":
        return base_key
    return f"{base_key}{CartSettings.USER_KEY_SEPARATOR}{user_id}"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CartStore:
    """
    Authoritative in-memory cart for one session

    Handles:
    1. Rehydrating the cart from storage (empty on missing or bad data)
    2. Adding, removing and re-quantifying line items
    3. Clearing the cart
    4. Persisting after every change, before returning
    5. Notifying subscribers and the notifier
    """

    def __init__(
        self,
        storage: CartStorage,
        notifier: Optional[CartNotifier] = None,
        storage_key: str = CartSettings.STORAGE_KEY,
        currency: str = CartSettings.DEFAULT_CURRENCY,
        serializer: Optional[CartSerializer] = None,
    ):
        self._storage = storage
        self._notifier = notifier
        self._storage_key = storage_key
        self._currency = currency.upper()
        self._serializer = serializer or CartSerializer(self._currency)
        self._subscribers: List[CartSubscriber] = []
        self._logger = logging.getLogger(self.__class__.__name__)
        self._cart = self._rehydrate()

    # Read-only accessors

    @property
    def storage_key(self) -> str:
        return self._storage_key

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def items(self) -> Tuple[CartLineItem, ...]:
        return self._cart.items

    @property
    def state(self) -> CartState:
        return self._cart.state

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def find(self, line_item_id: str) -> Optional[CartLineItem]:
        return self._cart.find(line_item_id)

    def total_item_count(self) -> int:
        return self._cart.total_item_count()

    def total_amount(self) -> Money:
        """Exact total; round only at the checkout/display boundary"""
        return self._cart.total_amount()

    def summary(self) -> CartSummary:
        return CartSummary.from_cart(self._cart)

    # Subscriptions

    def subscribe(self, callback: CartSubscriber) -> Callable[[], None]:
        """Register a callback run after each state change; returns an unsubscribe function"""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # Mutations

    def add_item(self, draft: ItemDraft, quantity: int = 1) -> CartOperationResponse:
        """Add a design or product to the cart"""
        validate_and_raise(_is_int(quantity) and quantity >= 1, InvalidQuantityError, quantity)
        self._logger.info(
            "🛒 ADD ITEM: %s #%s x%d", draft.kind.value, draft.reference_id, quantity
        )

        with PerformanceLogger("cart.add_item", self._logger):
            try:
                transition = self._cart.add(draft, quantity)
            except ValueError as e:
                raise ValidationError(str(e), "unit_price") from e
            return self._apply(transition)

    def remove_item(self, line_item_id: str) -> CartOperationResponse:
        """Remove a line item; unknown ids are ignored"""
        self._logger.info("🗑️ REMOVE ITEM: %s", line_item_id)
        with PerformanceLogger("cart.remove_item", self._logger):
            return self._apply(self._cart.remove(line_item_id))

    def update_quantity(self, line_item_id: str, quantity: int) -> CartOperationResponse:
        """Set a line item's quantity; zero or below removes it"""
        validate_and_raise(_is_int(quantity), InvalidQuantityError, quantity)
        self._logger.info("🔄 UPDATE QUANTITY: %s -> %d", line_item_id, quantity)

        if quantity <= 0:
            return self.remove_item(line_item_id)

        with PerformanceLogger("cart.update_quantity", self._logger):
            return self._apply(self._cart.update_quantity(line_item_id, quantity))

    def clear(self) -> CartOperationResponse:
        """Empty the cart"""
        self._logger.info("🧹 CLEAR CART: %s", self._storage_key)
        with PerformanceLogger("cart.clear", self._logger):
            return self._apply(self._cart.clear())

    def reload(self) -> Cart:
        """Re-read the cart from storage, replacing the in-memory state"""
        self._cart = self._rehydrate()
        self._publish()
        return self._cart

    # Internals

    def _apply(self, transition: CartTransition) -> CartOperationResponse:
        persisted = True
        if transition.changed:
            self._cart = transition.cart
            persisted = self._persist()
            self._publish()

        self._dispatch(transition.events)

        if transition.outcome is CartOutcome.STOCK_LIMIT_EXCEEDED:
            self._logger.warning(
                "⚠️ STOCK LIMIT: %s rejected", transition.line_item_id or "new line item"
            )
            return CartOperationResponse(
                success=False,
                outcome=transition.outcome,
                cart_summary=self.summary(),
                line_item_id=transition.line_item_id,
                events=transition.events,
                persisted=persisted,
                error_message=transition.events[0].describe(),
            )

        return CartOperationResponse(
            success=True,
            outcome=transition.outcome,
            cart_summary=self.summary(),
            line_item_id=transition.line_item_id,
            events=transition.events,
            persisted=persisted,
        )

    def _rehydrate(self) -> Cart:
        empty = Cart.empty(self._currency)

        try:
            raw = self._storage.load(self._storage_key)
        except PersistenceUnavailableError as e:
            self._logger.warning(
                "⚠️ CART STORAGE UNAVAILABLE, starting empty: %s",
                e,
                extra={"storage_key": self._storage_key},
            )
            return empty

        if raw is None:
            self._logger.debug("📭 NO SAVED CART: %s", self._storage_key)
            return empty

        try:
            cart = self._serializer.loads(raw)
        except CartPayloadError as e:
            self._logger.warning(
                "⚠️ DISCARDING UNREADABLE CART: %s",
                e,
                extra={"storage_key": self._storage_key},
            )
            self._discard_saved_cart()
            return empty

        self._logger.info(
            "📦 CART RESTORED: %d line items from %s", len(cart.items), self._storage_key
        )
        return cart

    def _discard_saved_cart(self) -> None:
        try:
            self._storage.delete(self._storage_key)
        except PersistenceUnavailableError as e:
            self._logger.error("💥 COULD NOT DISCARD SAVED CART: %s", e)

    def _persist(self) -> bool:
        try:
            self._storage.save(self._storage_key, self._serializer.dumps(self._cart))
            return True
        except PersistenceUnavailableError as e:
            self._logger.error(
                "💥 CART NOT SAVED: %s", e, extra={"storage_key": self._storage_key}
            )
            return False

    def _publish(self) -> None:
        for subscriber in list(self._subscribers):
            try:
                subscriber(self._cart)
            except Exception:  # pylint: disable=broad-except
                self._logger.exception("💥 CART SUBSCRIBER FAILED")

    def _dispatch(self, events: Tuple[CartEvent, ...]) -> None:
        if self._notifier is None:
            return
        for event in events:
            try:
                self._notifier.notify(event)
            except Exception:  # pylint: disable=broad-except
                self._logger.exception("💥 CART NOTIFICATION FAILED: %s", event.kind.value)

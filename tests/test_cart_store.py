"""
Cart Store Tests - Operations, Persistence and Notifications
"""

import json
import logging
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from storefront_cart.application.use_cases.cart_store import CartStore, cart_storage_key_for
from storefront_cart.domain.entities.cart_entity import CartOutcome, CartState
from storefront_cart.domain.repositories.cart_notifier import CartNotifier
from storefront_cart.domain.value_objects.cart_event import CartEventKind
from storefront_cart.infrastructure.repositories.in_memory_cart_storage import (
    InMemoryCartStorage,
)
from storefront_cart.infrastructure.serialization.cart_serializer import CartSerializer
from storefront_cart.infrastructure.utilities.exceptions import (
    InvalidQuantityError,
    PersistenceUnavailableError,
    StockLimitExceededError,
    ValidationError,
)


class TestCartStoreOperations:
    """Test add, remove, update and clear through the store"""

    def test_design_walkthrough(self, store, make_design):
        """Design #5 at 500 with 10% off: 450, then 900, then back to 450"""
        draft = make_design(discount="10")

        first = store.add_item(draft)
        assert first.success is True
        assert store.total_amount().amount == Decimal("450")

        store.add_item(draft)
        assert len(store.items) == 2
        assert store.total_item_count() == 2
        assert store.total_amount().amount == Decimal("900")

        store.remove_item(first.line_item_id)
        assert len(store.items) == 1
        assert store.total_amount().amount == Decimal("450")

    def test_product_merge_through_store(self, store, make_product):
        """Adding the same variant twice updates one line"""
        first = store.add_item(make_product(), 2)
        second = store.add_item(make_product(), 1)

        assert second.line_item_id == first.line_item_id
        assert len(store.items) == 1
        assert store.items[0].quantity == 3

    def test_merge_refreshes_catalog_data(self, store, make_product):
        """The merged line takes the newer price"""
        store.add_item(make_product(price="1200"))
        store.add_item(make_product(price="1000"))

        assert store.items[0].unit_price.amount == Decimal("1000")
        assert store.total_amount().amount == Decimal("2000")

    def test_stock_limit_is_a_result_not_an_exception(self, store, storage, make_product):
        """Rejected adds come back as a failed response with nothing saved"""
        store.add_item(make_product(stock_limit=2), 2)
        saved = storage.load(store.storage_key)

        response = store.add_item(make_product(stock_limit=2))

        assert response.success is False
        assert response.stock_limit_exceeded is True
        assert response.error_message == "Only 2 items available in stock."
        assert store.items[0].quantity == 2
        assert storage.load(store.storage_key) == saved

    def test_raise_for_outcome(self, store, make_product):
        """Callers can opt into an exception"""
        response = store.add_item(make_product(stock_limit=0))

        with pytest.raises(StockLimitExceededError) as exc_info:
            response.raise_for_outcome()
        assert exc_info.value.stock_limit == 0
        assert store.is_empty

    def test_update_quantity(self, store, make_product):
        """Update sets the quantity outright"""
        line_id = store.add_item(make_product(stock_limit=10)).line_item_id

        response = store.update_quantity(line_id, 7)

        assert response.outcome is CartOutcome.APPLIED
        assert store.find(line_id).quantity == 7

    def test_update_quantity_over_stock(self, store, make_product):
        """Update above the limit leaves the previous quantity"""
        line_id = store.add_item(make_product(stock_limit=3), 2).line_item_id

        response = store.update_quantity(line_id, 4)

        assert response.success is False
        assert store.find(line_id).quantity == 2

    def test_update_quantity_zero_removes(self, store, make_design):
        """Zero means remove"""
        line_id = store.add_item(make_design()).line_item_id

        response = store.update_quantity(line_id, 0)

        assert response.outcome is CartOutcome.APPLIED
        assert store.state is CartState.EMPTY

    def test_unknown_ids_are_ignored(self, store, make_design):
        """Remove and update of missing ids are no-ops"""
        store.add_item(make_design())

        assert store.remove_item("missing").outcome is CartOutcome.NO_OP
        assert store.update_quantity("missing", 2).outcome is CartOutcome.NO_OP
        assert len(store.items) == 1

    def test_clear(self, store, make_design, make_product):
        """Clear empties everything"""
        store.add_item(make_design())
        store.add_item(make_product(), 3)

        store.clear()

        assert store.is_empty
        assert store.total_item_count() == 0
        assert store.total_amount().is_zero()

    def test_invalid_add_quantity(self, store, make_design):
        """Quantities below one or of the wrong type raise"""
        for quantity in (0, -1, 1.5, "2", True):
            with pytest.raises(InvalidQuantityError):
                store.add_item(make_design(), quantity)
        assert store.is_empty

    def test_invalid_update_quantity_type(self, store, make_design):
        """Non-integer update quantities raise"""
        line_id = store.add_item(make_design()).line_item_id
        with pytest.raises(InvalidQuantityError):
            store.update_quantity(line_id, 2.5)

    def test_currency_mismatch_is_validation_error(self, storage, notifier, make_design):
        """Adding an INR draft to a USD store is rejected"""
        usd_store = CartStore(storage=storage, notifier=notifier, currency="USD")
        with pytest.raises(ValidationError):
            usd_store.add_item(make_design())

    def test_summary(self, store, make_design, make_product):
        """Summary reflects the line items"""
        store.add_item(make_design(discount="10"))
        store.add_item(make_product(size="L"), 2)

        summary = store.summary()

        assert summary.state == "non_empty"
        assert summary.total_item_count == 3
        assert summary.total_amount == Decimal("2850")
        assert [item.kind for item in summary.items] == ["design", "product"]
        assert summary.items[1].selected_size == "L"
        assert summary.items[0].selected_size is None


class TestCartStorePersistence:
    """Test storage synchronization and rehydration"""

    def test_every_change_is_saved(self, store, storage, make_design):
        """Storage always matches the in-memory cart"""
        store.add_item(make_design())
        payload = json.loads(storage.load("cart_v1"))
        assert len(payload["items"]) == 1

        store.clear()
        payload = json.loads(storage.load("cart_v1"))
        assert payload["items"] == []

    def test_rehydration_restores_cart(self, store, storage, notifier, make_design, make_product):
        """A new store over the same storage sees the same cart"""
        store.add_item(make_design(discount="10"))
        store.add_item(make_product(stock_limit=5), 2)

        restored = CartStore(storage=storage, notifier=notifier)

        assert [item.id for item in restored.items] == [item.id for item in store.items]
        assert restored.total_amount() == store.total_amount()
        assert restored.items[1].stock_limit == 5

    def test_corrupt_payload_starts_empty(self, notifier, caplog):
        """Unreadable data is dropped with a warning"""
        storage = InMemoryCartStorage({"cart_v1": "{not json"})

        with caplog.at_level(logging.WARNING):
            store = CartStore(storage=storage, notifier=notifier)

        assert store.is_empty
        assert storage.load("cart_v1") is None
        assert "DISCARDING UNREADABLE CART" in caplog.text

    def test_schema_mismatch_starts_empty(self, notifier):
        """Well-formed JSON with the wrong shape is also discarded"""
        storage = InMemoryCartStorage({"cart_v1": json.dumps({"items": [{"id": "x"}]})})
        store = CartStore(storage=storage, notifier=notifier)
        assert store.is_empty

    def test_stock_violation_starts_empty(self, store, storage, notifier, make_product):
        """A saved line above its stock limit discards the payload"""
        store.add_item(make_product(stock_limit=3), 2)
        document = json.loads(storage.load("cart_v1"))
        document["items"][0]["quantity"] = 7
        storage.save("cart_v1", json.dumps(document))

        restored = CartStore(storage=storage, notifier=notifier)

        assert restored.is_empty
        assert storage.load("cart_v1") is None

    def test_missing_key_starts_empty(self, storage, notifier):
        """No saved cart means an empty cart"""
        assert CartStore(storage=storage, notifier=notifier).state is CartState.EMPTY

    def test_load_failure_starts_empty(self, failing_storage, notifier):
        """Unavailable storage on startup is not fatal"""
        failing_storage.load.side_effect = PersistenceUnavailableError("disk gone", "load")

        store = CartStore(storage=failing_storage, notifier=notifier)

        assert store.is_empty

    def test_save_failure_keeps_in_memory_state(self, failing_storage, notifier, make_design):
        """A failed save is reported, the cart still changes"""
        failing_storage.load.return_value = None
        failing_storage.save.side_effect = PersistenceUnavailableError("quota", "save")
        store = CartStore(storage=failing_storage, notifier=notifier)

        response = store.add_item(make_design())

        assert response.success is True
        assert response.persisted is False
        assert len(store.items) == 1

    def test_no_op_does_not_write(self, failing_storage, notifier):
        """Nothing is saved when nothing changed"""
        failing_storage.load.return_value = None
        store = CartStore(storage=failing_storage, notifier=notifier)

        store.remove_item("missing")

        failing_storage.save.assert_not_called()

    def test_reload(self, store, storage, make_design):
        """reload() picks up changes written by another store"""
        other = CartStore(storage=storage)
        other.add_item(make_design())

        assert store.is_empty
        store.reload()
        assert len(store.items) == 1

    def test_user_keys_are_isolated(self, storage, make_design):
        """Each signed-in user gets their own key"""
        alice = CartStore(storage=storage, storage_key=cart_storage_key_for(user_id=1))
        bob = CartStore(storage=storage, storage_key=cart_storage_key_for(user_id=2))

        alice.add_item(make_design())

        assert bob.reload().is_empty
        assert set(storage.keys()) == {"cart_v1:1"}

    def test_storage_key_for(self):
        """Anonymous sessions use the bare key"""
        assert cart_storage_key_for() == "cart_v1"
        assert cart_storage_key_for(user_id="") == "cart_v1"
        assert cart_storage_key_for("cart_v1", 99) == "cart_v1:99"

    def test_serializer_is_shared_format(self, store, storage, make_product):
        """What the store saves, the serializer reads"""
        store.add_item(make_product(), 2)
        cart = CartSerializer().loads(storage.load("cart_v1"))
        assert cart.items[0].quantity == 2


class TestCartStoreNotifications:
    """Test notifier events and subscribers"""

    def test_events_per_operation(self, store, notifier, make_design, make_product):
        """Each operation emits one event of the right kind"""
        design_id = store.add_item(make_design()).line_item_id
        store.add_item(make_product(stock_limit=1))
        store.add_item(make_product(stock_limit=1))
        store.remove_item(design_id)
        store.clear()

        assert notifier.kinds() == [
            CartEventKind.ADDED,
            CartEventKind.ADDED,
            CartEventKind.STOCK_LIMIT,
            CartEventKind.REMOVED,
            CartEventKind.CLEARED,
        ]

    def test_event_text(self, store, notifier, make_design):
        """Event descriptions name the item"""
        store.add_item(make_design())
        assert notifier.drain()[0].describe() == "Sunset Palms has been added to your cart."
        assert notifier.events == []

    def test_no_op_emits_nothing(self, store, notifier):
        """Unknown ids do not notify"""
        store.remove_item("missing")
        assert notifier.events == []

    def test_subscribers_see_new_state(self, store, make_design):
        """Subscribers get the cart after each change"""
        seen = []
        unsubscribe = store.subscribe(lambda cart: seen.append(cart.total_item_count()))

        store.add_item(make_design())
        store.add_item(make_design())
        unsubscribe()
        store.clear()

        assert seen == [1, 2]

    def test_failing_subscriber_does_not_break_store(self, store, make_design, caplog):
        """Subscriber errors are logged, not raised"""

        def broken(_cart):
            raise RuntimeError("render failed")

        store.subscribe(broken)
        with caplog.at_level(logging.ERROR):
            response = store.add_item(make_design())

        assert response.success is True
        assert "CART SUBSCRIBER FAILED" in caplog.text

    def test_failing_notifier_does_not_break_store(self, storage, make_design, caplog):
        """Notifier errors are logged, not raised"""
        notifier = MagicMock(spec=CartNotifier)
        notifier.notify.side_effect = RuntimeError("toast failed")
        store = CartStore(storage=storage, notifier=notifier)

        with caplog.at_level(logging.ERROR):
            response = store.add_item(make_design())

        assert response.success is True
        assert len(store.items) == 1
        assert "CART NOTIFICATION FAILED" in caplog.text

    def test_store_without_notifier(self, storage, make_design):
        """The notifier is optional"""
        store = CartStore(storage=storage)
        assert store.add_item(make_design()).success is True

"""
Test configuration and fixtures for the storefront cart
"""

import os
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from storefront_cart.application.use_cases.cart_store import CartStore
from storefront_cart.domain.entities.line_item_entity import (
    DesignDetails,
    ItemDraft,
    ProductDetails,
)
from storefront_cart.domain.repositories.cart_storage import CartStorage
from storefront_cart.domain.value_objects.discount_percent import DiscountPercent
from storefront_cart.domain.value_objects.money import Money
from storefront_cart.domain.value_objects.reference_id import ReferenceId
from storefront_cart.infrastructure.configuration.config import reset_config
from storefront_cart.infrastructure.repositories.in_memory_cart_storage import (
    InMemoryCartStorage,
)
from storefront_cart.infrastructure.services.notification_service import (
    RecordingCartNotifier,
)


@pytest.fixture(autouse=True)
def mock_env():
    """Isolate every test from the developer's environment"""
    test_env = {
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
    }

    reset_config()
    with patch.dict(os.environ, test_env, clear=True):
        yield test_env
    reset_config()


@pytest.fixture
def make_design():
    """Factory for design drafts"""

    def _make(reference_id=5, title="Sunset Palms", price="500", discount="0", **kwargs):
        return ItemDraft(
            reference_id=ReferenceId(reference_id),
            title=title,
            unit_price=Money(Decimal(price)),
            details=DesignDetails(
                designer_name=kwargs.pop("designer_name", "Studio Nila"),
                is_premium=kwargs.pop("is_premium", False),
            ),
            category=kwargs.pop("category", "Tropical"),
            subcategory=kwargs.pop("subcategory", "Botanical"),
            product_kind="DESIGN",
            image=kwargs.pop("image", "https://cdn.example.com/designs/5.png"),
            discount=DiscountPercent(Decimal(discount)),
            tags=kwargs.pop("tags", ("palms", "summer")),
            description=kwargs.pop("description", "Seamless palm pattern"),
        )

    return _make


@pytest.fixture
def make_product():
    """Factory for product drafts"""

    def _make(
        reference_id=42,
        title="Linen Shirt",
        price="1200",
        discount="0",
        size="M",
        color="Blue",
        stock_limit=None,
    ):
        return ItemDraft(
            reference_id=ReferenceId(reference_id),
            title=title,
            unit_price=Money(Decimal(price)),
            details=ProductDetails(
                selected_size=size,
                selected_color=color,
                stock_limit=stock_limit,
                material="Linen",
                brand="Patternbank",
            ),
            category="Clothing",
            subcategory="Shirts",
            product_kind="CLOTHES",
            image="https://cdn.example.com/products/42.png",
            discount=DiscountPercent(Decimal(discount)),
        )

    return _make


@pytest.fixture
def storage():
    """Empty in-memory storage"""
    return InMemoryCartStorage()


@pytest.fixture
def notifier():
    """Notifier that records events"""
    return RecordingCartNotifier()


@pytest.fixture
def store(storage, notifier):
    """Cart store over in-memory storage"""
    return CartStore(storage=storage, notifier=notifier)


@pytest.fixture
def failing_storage():
    """Storage mock whose methods can be told to raise"""
    return MagicMock(spec=CartStorage)

"""
Cart payload serialization

The whole cart is stored as one JSON document. Prices and discounts are
written as decimal strings so a round trip is exact.
"""

from decimal import Decimal
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from storefront_cart.domain.entities.cart_entity import Cart
from storefront_cart.domain.entities.line_item_entity import (
    CartLineItem,
    DesignDetails,
    ItemDraft,
    ProductDetails,
)
from storefront_cart.domain.value_objects.discount_percent import DiscountPercent
from storefront_cart.domain.value_objects.line_item_id import LineItemId
from storefront_cart.domain.value_objects.money import Money
from storefront_cart.domain.value_objects.reference_id import ReferenceId
from storefront_cart.infrastructure.utilities.constants import CartSettings
from storefront_cart.infrastructure.utilities.exceptions import CartPayloadError


class PersistedDesignDetails(BaseModel):
    """Design payload"""

    model_config = ConfigDict(extra="ignore")

    kind: Literal["design"] = "design"
    designer_name: Optional[str] = None
    is_premium: bool = False


class PersistedProductDetails(BaseModel):
    """Product variant payload"""

    model_config = ConfigDict(extra="ignore")

    kind: Literal["product"] = "product"
    selected_size: Optional[str] = None
    selected_color: Optional[str] = None
    stock_limit: Optional[int] = Field(None, ge=0)
    material: Optional[str] = None
    brand: Optional[str] = None
    weight: Optional[str] = None
    dimensions: Optional[str] = None
    care_instructions: Optional[str] = None


PersistedDetails = Annotated[
    Union[PersistedDesignDetails, PersistedProductDetails],
    Field(discriminator="kind"),
]


class PersistedLineItem(BaseModel):
    """One line item as stored"""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    reference_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1)
    category: str = ""
    subcategory: str = ""
    product_kind: str = ""
    image: str = ""
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    unit_price: Decimal = Field(..., ge=0)
    discount_percent: Decimal = Field(Decimal("0"), ge=0, lt=100)
    quantity: int = Field(..., ge=1)
    details: PersistedDetails

    @classmethod
    def from_domain(cls, line_item: CartLineItem) -> "PersistedLineItem":
        item = line_item.item
        if isinstance(item.details, DesignDetails):
            details = PersistedDesignDetails(
                designer_name=item.details.designer_name,
                is_premium=item.details.is_premium,
            )
        else:
            details = PersistedProductDetails(
                selected_size=item.details.selected_size,
                selected_color=item.details.selected_color,
                stock_limit=item.details.stock_limit,
                material=item.details.material,
                brand=item.details.brand,
                weight=item.details.weight,
                dimensions=item.details.dimensions,
                care_instructions=item.details.care_instructions,
            )

        return cls(
            id=line_item.id.value,
            reference_id=item.reference_id.value,
            title=item.title,
            category=item.category,
            subcategory=item.subcategory,
            product_kind=item.product_kind,
            image=item.image,
            description=item.description,
            tags=list(item.tags),
            unit_price=item.unit_price.amount,
            discount_percent=item.discount.value,
            quantity=line_item.quantity,
            details=details,
        )

    def to_domain(self, currency: str) -> CartLineItem:
        if isinstance(self.details, PersistedDesignDetails):
            details = DesignDetails(
                designer_name=self.details.designer_name,
                is_premium=self.details.is_premium,
            )
        else:
            details = ProductDetails(
                **self.details.model_dump(exclude={"kind"}),
            )

        draft = ItemDraft(
            reference_id=ReferenceId(self.reference_id),
            title=self.title,
            unit_price=Money(self.unit_price, currency),
            details=details,
            category=self.category,
            subcategory=self.subcategory,
            product_kind=self.product_kind,
            image=self.image,
            discount=DiscountPercent(self.discount_percent),
            tags=tuple(self.tags),
            description=self.description,
        )
        return CartLineItem(id=LineItemId(self.id), item=draft, quantity=self.quantity)


class PersistedCart(BaseModel):
    """Top-level stored document"""

    model_config = ConfigDict(extra="ignore")

    version: int = CartSettings.PAYLOAD_VERSION
    currency: str = Field(CartSettings.DEFAULT_CURRENCY, min_length=3, max_length=3)
    items: List[PersistedLineItem] = Field(default_factory=list)


class CartSerializer:
    """Converts carts to and from their stored JSON form"""

    def __init__(self, currency: str = CartSettings.DEFAULT_CURRENCY):
        self._currency = currency.upper()

    def dumps(self, cart: Cart) -> str:
        document = PersistedCart(
            version=CartSettings.PAYLOAD_VERSION,
            currency=cart.currency,
            items=[PersistedLineItem.from_domain(item) for item in cart.items],
        )
        return document.model_dump_json()

    def loads(self, raw: str) -> Cart:
        """
        Parse a stored payload

        Raises:
            CartPayloadError: when the payload is not valid JSON, does not match
                the schema, or breaks a domain invariant.
        """
        try:
            document = PersistedCart.model_validate_json(raw)
        except PydanticValidationError as e:
            raise CartPayloadError(f"Invalid cart payload: {e.error_count()} error(s)") from e

        if document.version > CartSettings.PAYLOAD_VERSION:
            raise CartPayloadError(f"Unsupported cart payload version {document.version}")

        if document.currency.upper() != self._currency:
            raise CartPayloadError(
                f"Stored cart currency {document.currency} does not match {self._currency}"
            )

        try:
            items = tuple(item.to_domain(self._currency) for item in document.items)
            return Cart(items=items, currency=self._currency)
        except ValueError as e:
            raise CartPayloadError(f"Invalid cart payload: {e}") from e

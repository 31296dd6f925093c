# pylint: disable=too-many-instance-attributes
"""
Cart line item entity

A line item is one chosen quantity of a design or of one product variant.
Design-only and product-only fields live on separate detail payloads so a
design can never carry a size, colour or stock limit.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

from storefront_cart.domain.value_objects.discount_percent import DiscountPercent
from storefront_cart.domain.value_objects.line_item_id import LineItemId
from storefront_cart.domain.value_objects.money import Money
from storefront_cart.domain.value_objects.reference_id import ReferenceId


class ItemKind(str, Enum):
    """What was put in the cart"""

    DESIGN = "design"
    PRODUCT = "product"


@dataclass(frozen=True)
class DesignDetails:
    """Licensable artwork; every addition is its own line item"""

    designer_name: Optional[str] = None
    is_premium: bool = False


@dataclass(frozen=True)
class ProductDetails:
    """Physical good with size/colour variants and an optional stock ceiling"""

    selected_size: Optional[str] = None
    selected_color: Optional[str] = None
    stock_limit: Optional[int] = None
    material: Optional[str] = None
    brand: Optional[str] = None
    weight: Optional[str] = None
    dimensions: Optional[str] = None
    care_instructions: Optional[str] = None

    def __post_init__(self):
        if self.stock_limit is not None and (
            isinstance(self.stock_limit, bool)
            or not isinstance(self.stock_limit, int)
            or self.stock_limit < 0
        ):
            raise ValueError("Stock limit must be a non-negative integer")


ItemDetails = Union[DesignDetails, ProductDetails]


@dataclass(frozen=True)
class ItemDraft:
    """Everything about a cart entry except its id and quantity"""

    reference_id: ReferenceId
    title: str
    unit_price: Money
    details: ItemDetails
    category: str = ""
    subcategory: str = ""
    product_kind: str = ""
    image: str = ""
    discount: DiscountPercent = field(default_factory=DiscountPercent.none)
    tags: Tuple[str, ...] = ()
    description: str = ""

    def __post_init__(self):
        """Validate the draft after initialization"""
        if not self.title or not self.title.strip():
            raise ValueError("Item title cannot be empty")

        if not isinstance(self.details, (DesignDetails, ProductDetails)):
            raise ValueError("Item details must be DesignDetails or ProductDetails")

        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def kind(self) -> ItemKind:
        if isinstance(self.details, DesignDetails):
            return ItemKind.DESIGN
        return ItemKind.PRODUCT

    @property
    def stock_limit(self) -> Optional[int]:
        if isinstance(self.details, ProductDetails):
            return self.details.stock_limit
        return None

    @property
    def variant_key(self) -> Optional[Tuple[int, Optional[str], Optional[str]]]:
        """Merge key for products; designs never merge"""
        if isinstance(self.details, ProductDetails):
            return (
                self.reference_id.value,
                self.details.selected_size,
                self.details.selected_color,
            )
        return None


@dataclass(frozen=True)
class CartLineItem:
    """
    Cart line item entity

    Immutable; quantity changes produce a new line item with the same id.
    """

    id: LineItemId
    item: ItemDraft
    quantity: int = 1

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("Quantity must be an integer")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.exceeds_stock(self.quantity):
            raise ValueError(
                f"Quantity {self.quantity} exceeds stock limit {self.stock_limit}"
            )

    @classmethod
    def create(cls, item: ItemDraft, quantity: int = 1) -> "CartLineItem":
        """Create a line item with a freshly generated id"""
        return cls(id=LineItemId.generate(item.kind.value), item=item, quantity=quantity)

    @property
    def kind(self) -> ItemKind:
        return self.item.kind

    @property
    def title(self) -> str:
        return self.item.title

    @property
    def reference_id(self) -> ReferenceId:
        return self.item.reference_id

    @property
    def unit_price(self) -> Money:
        return self.item.unit_price

    @property
    def discount(self) -> DiscountPercent:
        return self.item.discount

    @property
    def stock_limit(self) -> Optional[int]:
        return self.item.stock_limit

    @property
    def variant_key(self):
        return self.item.variant_key

    @property
    def final_unit_price(self) -> Money:
        """Unit price after the percentage markdown, unrounded"""
        if self.discount.is_active:
            return self.unit_price.multiply(self.discount.multiplier)
        return self.unit_price

    @property
    def line_total(self) -> Money:
        return self.final_unit_price.multiply(self.quantity)

    def exceeds_stock(self, quantity: int) -> bool:
        """Whether the given quantity would break the stock ceiling"""
        return self.stock_limit is not None and quantity > self.stock_limit

    def with_quantity(self, quantity: int) -> "CartLineItem":
        return replace(self, quantity=quantity)

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

SLUGNAME = 'InXpress'


@dataclass(frozen=True)
class ShippingDestination:
    postcode: str
    country_code: str


@dataclass(frozen=True)
class OrderItem:
    product_id: str
    quantity: int = 1
    weight: float = 0.0
    width: float = 0.0
    height: float = 0.0
    length: float = 0.0
    free_shipping: bool = False


@dataclass(frozen=True)
class Order:
    shipping: ShippingDestination
    items: List[OrderItem] = field(default_factory=list)


@dataclass
class Package:
    """One shippable parcel, sizes in the store's base units."""
    width: float = 0.0
    height: float = 0.0
    length: float = 0.0
    weight: float = 0.0
    items: int = 0

    def add(self, item: OrderItem, quantity: int = 1):
        self.weight += item.weight * quantity
        self.width = max(self.width, item.width)
        self.length = max(self.length, item.length)
        self.height += item.height * quantity
        self.items += quantity

    def fits(self, item: OrderItem, max_weight: Optional[float]) -> bool:
        if not max_weight or not self.items:
            return True
        return self.weight + item.weight <= max_weight


@dataclass(frozen=True)
class WeightSplit:
    whole_units: int
    sub_units: int


@dataclass(frozen=True)
class RateQuoteResult:
    display_name: str
    amount: Decimal
    service_slug: str = SLUGNAME


@dataclass(frozen=True)
class ShippingOption:
    slug: str
    name: str
    amount: Decimal

    @staticmethod
    def from_result(result: RateQuoteResult) -> 'ShippingOption':
        return ShippingOption(slug=result.service_slug, name=result.display_name, amount=result.amount)

from dataclasses import dataclass
from typing import Optional

from ..shipping.models import Order, ShippingDestination


@dataclass(frozen=True)
class RatesRequest:
    order: Order
    base_country: Optional[str] = None


@dataclass(frozen=True)
class VerifyRequest:
    destination: Optional[ShippingDestination] = None

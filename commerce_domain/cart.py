"""Shopping cart entity"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .money import Money, Quantity, SKU


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartLineItem:
    """One SKU in a cart"""
    sku: SKU
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price.multiply(self.quantity.value)


@dataclass
class Cart:
    """Shopping cart holding line items by value"""
    customer_id: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    items: list[CartLineItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def find_item(self, sku_code: str) -> Optional[CartLineItem]:
        return next((item for item in self.items if item.sku.code == sku_code), None)

    def add_item(self, sku: SKU, quantity: Quantity, unit_price: Money) -> CartLineItem:
        """Add a line, or increase the quantity of an existing line for the SKU"""
        existing = self.find_item(sku.code)
        if existing:
            existing.quantity = existing.quantity + quantity
            line = existing
        else:
            line = CartLineItem(sku=sku, quantity=quantity, unit_price=unit_price)
            self.items.append(line)

        self.updated_at = _utcnow()
        return line

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    def calculate_subtotal(self, currency: str = "USD") -> Money:
        """Total before discounts; every line must be priced in ``currency``"""
        subtotal = Money.zero(currency)
        for item in self.items:
            subtotal = subtotal + item.line_total
        return subtotal

"""Inventory tracking per SKU"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .money import Quantity, SKU


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InventoryItem:
    """Available and reserved stock for one SKU"""
    sku: SKU
    available_quantity: Quantity
    reserved_quantity: Quantity = field(default_factory=lambda: Quantity(0))
    last_updated: datetime = field(default_factory=_utcnow)

    @property
    def total_quantity(self) -> Quantity:
        """Quantity on hand, reserved or not"""
        return self.available_quantity + self.reserved_quantity

    def is_available(self, requested: Quantity) -> bool:
        return self.available_quantity.value >= requested.value

    def reserve(self, quantity: Quantity) -> bool:
        """
        Move quantity from available to reserved.

        Returns False and leaves the item untouched when there is not
        enough available stock.
        """
        if not self.is_available(quantity):
            return False

        self.available_quantity = self.available_quantity - quantity
        self.reserved_quantity = self.reserved_quantity + quantity
        self.last_updated = _utcnow()
        return True

    def release_reservation(self, quantity: Quantity) -> None:
        """
        Move quantity from reserved back to available.

        Not bounds checked; callers must not release more than they reserved.
        """
        self.reserved_quantity = self.reserved_quantity - quantity
        self.available_quantity = self.available_quantity + quantity
        self.last_updated = _utcnow()

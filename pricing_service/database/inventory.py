"""In-memory inventory storage"""

import logging
from typing import Optional

from commerce_domain import InventoryItem, Quantity, SKU

logger = logging.getLogger(__name__)

SAMPLE_STOCK: dict[str, int] = {
    "WIDGET-001": 100,
    "GADGET-001": 25,
    "TOOL-001": 50,
}


def sample_inventory() -> list[InventoryItem]:
    return [
        InventoryItem(sku=SKU(code), available_quantity=Quantity(available))
        for code, available in SAMPLE_STOCK.items()
    ]


class InventoryDatabase:
    """In-memory inventory keyed by SKU code"""

    def __init__(self, items: Optional[list[InventoryItem]] = None):
        self.items: dict[str, InventoryItem] = {}
        for item in items or []:
            self.add_item(item)

    def add_item(self, item: InventoryItem) -> None:
        self.items[item.sku.code] = item

    def get_item(self, sku_code: str) -> Optional[InventoryItem]:
        """Get inventory for a SKU"""
        return self.items.get(sku_code)

    def reserve(self, sku_code: str, quantity: int) -> bool:
        """
        Reserve stock for a SKU.

        Returns:
            True if the reservation was made, False if the SKU is unknown
            or there is not enough available stock
        """
        item = self.get_item(sku_code)
        if not item:
            return False

        reserved = item.reserve(Quantity(quantity))
        if not reserved:
            logger.info(
                f"Reservation refused for {sku_code}: requested {quantity}, "
                f"available {item.available_quantity}"
            )
        return reserved

    def release(self, sku_code: str, quantity: int) -> bool:
        """Return reserved stock to available"""
        item = self.get_item(sku_code)
        if not item:
            return False

        item.release_reservation(Quantity(quantity))
        return True

"""Inventory models for the pricing service"""

from datetime import datetime

from pydantic import Field

from commerce_domain import InventoryItem

from .base import ApiModel


class InventoryResponse(ApiModel):
    """Stock levels for a SKU"""
    sku: str
    available_quantity: int
    reserved_quantity: int
    total_quantity: int
    last_updated: datetime

    @classmethod
    def from_domain(cls, item: InventoryItem) -> "InventoryResponse":
        return cls(
            sku=item.sku.code,
            available_quantity=item.available_quantity.value,
            reserved_quantity=item.reserved_quantity.value,
            total_quantity=item.total_quantity.value,
            last_updated=item.last_updated,
        )


class ReservationRequest(ApiModel):
    """Request to reserve or release stock"""
    quantity: int = Field(gt=0)

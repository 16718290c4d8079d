"""Inventory API routes"""

from fastapi import APIRouter, Depends, HTTPException

from commerce_domain import InventoryItem

from ..database.inventory import InventoryDatabase
from ..dependencies import get_inventory_db
from ..models.inventory import InventoryResponse, ReservationRequest

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])


def _get_item_or_404(inventory: InventoryDatabase, sku: str) -> InventoryItem:
    item = inventory.get_item(sku)
    if not item:
        raise HTTPException(status_code=404, detail="Inventory not found")
    return item


@router.get("/{sku}", response_model=InventoryResponse)
async def get_inventory(
    sku: str,
    inventory: InventoryDatabase = Depends(get_inventory_db),
):
    """Get stock levels for a SKU"""
    return InventoryResponse.from_domain(_get_item_or_404(inventory, sku))


@router.post("/{sku}/reserve", response_model=InventoryResponse)
async def reserve_stock(
    sku: str,
    request: ReservationRequest,
    inventory: InventoryDatabase = Depends(get_inventory_db),
):
    """Reserve available stock"""
    item = _get_item_or_404(inventory, sku)

    if not inventory.reserve(sku, request.quantity):
        raise HTTPException(
            status_code=409,
            detail=f"Insufficient stock. Available: {item.available_quantity}",
        )
    return InventoryResponse.from_domain(item)


@router.post("/{sku}/release", response_model=InventoryResponse)
async def release_stock(
    sku: str,
    request: ReservationRequest,
    inventory: InventoryDatabase = Depends(get_inventory_db),
):
    """Return reserved stock to available"""
    item = _get_item_or_404(inventory, sku)

    if request.quantity > item.reserved_quantity.value:
        raise HTTPException(
            status_code=400,
            detail=f"Cannot release more than reserved. Reserved: {item.reserved_quantity}",
        )

    inventory.release(sku, request.quantity)
    return InventoryResponse.from_domain(item)

"""Order API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from commerce_domain import InvalidStatusTransitionError

from ..database.orders import OrderDatabase
from ..dependencies import get_order_db
from ..models.order import OrderResponse, UpdateOrderStatusRequest

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    customer_id: Optional[str] = Query(None, alias="customerId"),
    limit: int = Query(50, ge=1, le=200),
    orders: OrderDatabase = Depends(get_order_db),
):
    """List recent orders"""
    return [
        OrderResponse.from_domain(o)
        for o in orders.list_orders(customer_id=customer_id, limit=limit)
    ]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    orders: OrderDatabase = Depends(get_order_db),
):
    """Get order details"""
    order = orders.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderResponse.from_domain(order)


@router.post("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    orders: OrderDatabase = Depends(get_order_db),
):
    """Move an order along its lifecycle"""
    try:
        order = orders.update_status(order_id, request.status)
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderResponse.from_domain(order)

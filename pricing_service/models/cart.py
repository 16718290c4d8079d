"""Cart models for the pricing service"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commerce_domain import Cart, CartLineItem

from .base import ApiModel, JsonDecimal


class CartItemResponse(ApiModel):
    """Item in a shopping cart"""
    sku: str
    quantity: int
    unit_price: JsonDecimal
    line_total: JsonDecimal

    @classmethod
    def from_domain(cls, item: CartLineItem) -> "CartItemResponse":
        return cls(
            sku=item.sku.code,
            quantity=item.quantity.value,
            unit_price=item.unit_price.amount,
            line_total=item.line_total.amount,
        )


class CartResponse(ApiModel):
    """Shopping cart"""
    id: str
    customer_id: str
    items: list[CartItemResponse] = []
    item_count: int = 0
    subtotal: JsonDecimal
    currency: str = "USD"
    created_at: datetime
    updated_at: datetime
    message: Optional[str] = None

    @classmethod
    def from_domain(
        cls,
        cart: Cart,
        message: Optional[str] = None,
        currency: str = "USD",
    ) -> "CartResponse":
        subtotal = cart.calculate_subtotal(currency)
        return cls(
            id=cart.id,
            customer_id=cart.customer_id,
            items=[CartItemResponse.from_domain(i) for i in cart.items],
            item_count=cart.item_count,
            subtotal=subtotal.amount,
            currency=subtotal.currency,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
            message=message,
        )


class CreateCartRequest(ApiModel):
    """Request to open a cart"""
    customer_id: str = ""


class AddToCartRequest(ApiModel):
    """Request to add item to cart"""
    sku: str
    quantity: int = Field(default=1, gt=0)

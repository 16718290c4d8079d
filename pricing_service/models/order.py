"""Order models for the pricing service"""

from datetime import datetime

from commerce_domain import Order, OrderLineItem, OrderStatus

from .base import ApiModel, JsonDecimal


class OrderItemResponse(ApiModel):
    """Item in an order"""
    sku: str
    product_name: str
    quantity: int
    unit_price: JsonDecimal
    discount: JsonDecimal
    line_total: JsonDecimal

    @classmethod
    def from_domain(cls, item: OrderLineItem) -> "OrderItemResponse":
        return cls(
            sku=item.sku.code,
            product_name=item.product_name,
            quantity=item.quantity.value,
            unit_price=item.unit_price.amount,
            discount=item.discount.amount,
            line_total=item.line_total.amount,
        )


class OrderResponse(ApiModel):
    """Finalized order"""
    id: str
    customer_id: str
    status: OrderStatus
    items: list[OrderItemResponse]
    subtotal: JsonDecimal
    total_discount: JsonDecimal
    total: JsonDecimal
    currency: str = "USD"
    applied_promotions: list[str] = []
    order_date: datetime

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status,
            items=[OrderItemResponse.from_domain(i) for i in order.items],
            subtotal=order.subtotal.amount,
            total_discount=order.total_discount.amount,
            total=order.total.amount,
            currency=order.total.currency,
            applied_promotions=list(order.applied_promotions),
            order_date=order.order_date,
        )


class UpdateOrderStatusRequest(ApiModel):
    """Request to move an order to a new status"""
    status: OrderStatus

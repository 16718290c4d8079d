"""Order entity and lifecycle"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from .errors import InvalidStatusTransitionError
from .money import Money, Quantity, SKU


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Cancelled is reachable from every other status
_TRANSITIONS: dict[OrderStatus, set[OrderStatus]] = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: {OrderStatus.CANCELLED},
    OrderStatus.CANCELLED: set(),
}


@dataclass(frozen=True)
class OrderLineItem:
    """Priced line of a finalized order"""
    sku: SKU
    product_name: str
    quantity: Quantity
    unit_price: Money
    discount: Money
    line_total: Money


@dataclass
class Order:
    """Finalized purchase with pricing and applied promotions"""
    customer_id: str
    items: list[OrderLineItem]
    subtotal: Money
    total_discount: Money
    total: Money
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: OrderStatus = OrderStatus.PENDING
    applied_promotions: list[str] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.status in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def can_transition_to(self, status: OrderStatus) -> bool:
        return status in _TRANSITIONS[self.status]

    def transition_to(self, status: OrderStatus) -> None:
        """Move the order along its lifecycle"""
        if not self.can_transition_to(status):
            raise InvalidStatusTransitionError(self.status, status)
        self.status = status

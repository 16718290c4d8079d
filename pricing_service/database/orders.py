"""Order storage for the pricing service"""

from typing import Optional

from commerce_domain import Order, OrderStatus


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def add_order(self, order: Order) -> Order:
        self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """
        Move an order to a new status.

        Raises:
            InvalidStatusTransitionError: if the lifecycle does not allow it
        """
        order = self.get_order(order_id)
        if not order:
            return None

        order.transition_to(status)
        return order

    def list_orders(self, customer_id: Optional[str] = None, limit: int = 50) -> list[Order]:
        """List recent orders, newest first"""
        orders = list(self.orders.values())
        if customer_id:
            orders = [o for o in orders if o.customer_id == customer_id]
        orders.sort(key=lambda o: o.order_date, reverse=True)
        return orders[:limit]

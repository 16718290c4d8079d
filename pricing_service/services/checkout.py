"""Checkout: turn a cart into a priced order"""

import logging

from commerce_domain import (
    Cart,
    DomainError,
    EmptyCartError,
    InsufficientStockError,
    Money,
    Order,
    OrderLineItem,
)

from ..database.inventory import InventoryDatabase
from .pricing_calculator import PricingCalculator

logger = logging.getLogger(__name__)


class CheckoutService:
    """Prices every cart line, reserves stock and builds the order"""

    def __init__(
        self,
        calculator: PricingCalculator,
        inventory: InventoryDatabase,
        currency: str = "USD",
    ):
        self.calculator = calculator
        self.inventory = inventory
        self.currency = currency

    def checkout(self, cart: Cart) -> Order:
        """
        Create a pending order from the cart.

        Stock is reserved line by line. If any line cannot be reserved,
        reservations already made for this cart are released. Order totals
        are kept in the service currency.

        Raises:
            EmptyCartError: cart has no items
            ProductNotFoundError: a line refers to an unknown SKU
            InsufficientStockError: a line cannot be reserved
            CurrencyMismatchError: a product is priced in another currency
        """
        if not cart.items:
            raise EmptyCartError(f"Cart {cart.id} is empty")

        lines: list[OrderLineItem] = []
        applied_promotions: list[str] = []
        reserved: list[tuple[str, int]] = []

        try:
            for item in cart.items:
                code = item.sku.code
                qty = item.quantity.value

                result = self.calculator.calculate(code, qty, cart.customer_id)

                if not self.inventory.reserve(code, qty):
                    stock = self.inventory.get_item(code)
                    available = stock.available_quantity.value if stock else 0
                    raise InsufficientStockError(code, qty, available)
                reserved.append((code, qty))

                lines.append(
                    OrderLineItem(
                        sku=item.sku,
                        product_name=result.product_name,
                        quantity=item.quantity,
                        unit_price=result.unit_price,
                        discount=result.discount,
                        line_total=Money(result.total, result.currency),
                    )
                )
                if result.promotion_id and result.promotion_id not in applied_promotions:
                    applied_promotions.append(result.promotion_id)

            subtotal = Money.zero(self.currency)
            total_discount = Money.zero(self.currency)
            for line in lines:
                subtotal = subtotal + line.unit_price.multiply(line.quantity.value)
                total_discount = total_discount + line.discount
        except DomainError:
            for code, qty in reserved:
                self.inventory.release(code, qty)
            raise

        order = Order(
            customer_id=cart.customer_id,
            items=lines,
            subtotal=subtotal,
            total_discount=total_discount,
            total=subtotal - total_discount,
            applied_promotions=applied_promotions,
        )

        logger.info(
            f"Order {order.id} created for customer {cart.customer_id or 'anonymous'}: "
            f"total {order.total}, promotions {applied_promotions}"
        )
        return order

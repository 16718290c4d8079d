"""Unit tests for inventory, cart and order entities"""

from decimal import Decimal

import pytest

from commerce_domain import (
    Cart,
    CurrencyMismatchError,
    InvalidStatusTransitionError,
    InventoryItem,
    Money,
    Order,
    OrderStatus,
    Quantity,
    SKU,
)


def _inventory(available: int = 10, reserved: int = 0) -> InventoryItem:
    return InventoryItem(
        sku=SKU("WIDGET-001"),
        available_quantity=Quantity(available),
        reserved_quantity=Quantity(reserved),
    )


class TestInventoryItem:

    def test_total_quantity(self):
        assert _inventory(7, 3).total_quantity == Quantity(10)

    def test_reserve_moves_quantity(self):
        item = _inventory(10)
        before = item.last_updated

        assert item.reserve(Quantity(4))
        assert item.available_quantity == Quantity(6)
        assert item.reserved_quantity == Quantity(4)
        assert item.last_updated >= before

    def test_reserve_exact_available(self):
        item = _inventory(5)
        assert item.reserve(Quantity(5))
        assert item.available_quantity.is_zero

    def test_reserve_more_than_available_fails_without_mutation(self):
        item = _inventory(3, 1)
        before = item.last_updated

        assert not item.reserve(Quantity(4))
        assert item.available_quantity == Quantity(3)
        assert item.reserved_quantity == Quantity(1)
        assert item.last_updated == before

    def test_release_reservation(self):
        item = _inventory(6, 4)
        item.release_reservation(Quantity(4))
        assert item.available_quantity == Quantity(10)
        assert item.reserved_quantity == Quantity(0)

    def test_release_is_not_bounds_checked(self):
        item = _inventory(6, 1)
        item.release_reservation(Quantity(3))
        assert item.reserved_quantity == Quantity(-2)
        assert item.available_quantity == Quantity(9)


class TestCart:

    def test_add_new_line(self):
        cart = Cart(customer_id="cust1")
        cart.add_item(SKU("WIDGET-001"), Quantity(2), Money.usd("29.99"))
        assert len(cart.items) == 1
        assert cart.items[0].quantity == Quantity(2)

    def test_add_existing_sku_increments_quantity(self):
        cart = Cart()
        cart.add_item(SKU("WIDGET-001"), Quantity(2), Money.usd("29.99"))
        cart.add_item(SKU("WIDGET-001"), Quantity(3), Money.usd("29.99"))
        assert len(cart.items) == 1
        assert cart.items[0].quantity == Quantity(5)
        assert cart.item_count == 5

    def test_add_refreshes_updated_at(self):
        cart = Cart()
        before = cart.updated_at
        cart.add_item(SKU("TOOL-001"), Quantity(1), Money.usd("15.49"))
        assert cart.updated_at >= before

    def test_lines_keep_insertion_order(self):
        cart = Cart()
        cart.add_item(SKU("TOOL-001"), Quantity(1), Money.usd("15.49"))
        cart.add_item(SKU("WIDGET-001"), Quantity(1), Money.usd("29.99"))
        assert [i.sku.code for i in cart.items] == ["TOOL-001", "WIDGET-001"]

    def test_subtotal(self):
        cart = Cart()
        cart.add_item(SKU("WIDGET-001"), Quantity(2), Money.usd("29.99"))
        cart.add_item(SKU("TOOL-001"), Quantity(1), Money.usd("15.49"))
        assert cart.calculate_subtotal() == Money.usd("75.47")

    def test_empty_subtotal_is_zero_usd(self):
        assert Cart().calculate_subtotal() == Money.usd(0)

    def test_subtotal_rejects_other_currency(self):
        cart = Cart()
        cart.add_item(SKU("EU-001"), Quantity(1), Money(Decimal("5"), "EUR"))
        with pytest.raises(CurrencyMismatchError):
            cart.calculate_subtotal()


class TestOrder:

    def _order(self) -> Order:
        return Order(
            customer_id="cust1",
            items=[],
            subtotal=Money.usd("10"),
            total_discount=Money.usd("1"),
            total=Money.usd("9"),
        )

    def test_starts_pending(self):
        assert self._order().status == OrderStatus.PENDING

    def test_happy_path(self):
        order = self._order()
        for status in (OrderStatus.CONFIRMED, OrderStatus.SHIPPED, OrderStatus.DELIVERED):
            order.transition_to(status)
        assert order.status == OrderStatus.DELIVERED
        assert order.is_terminal

    @pytest.mark.parametrize(
        "path",
        [
            [],
            [OrderStatus.CONFIRMED],
            [OrderStatus.CONFIRMED, OrderStatus.SHIPPED],
        ],
    )
    def test_cancel_from_any_open_status(self, path):
        order = self._order()
        for status in path:
            order.transition_to(status)
        order.transition_to(OrderStatus.CANCELLED)
        assert order.status == OrderStatus.CANCELLED

    def test_cannot_skip_steps(self):
        order = self._order()
        with pytest.raises(InvalidStatusTransitionError):
            order.transition_to(OrderStatus.SHIPPED)
        assert order.status == OrderStatus.PENDING

    def test_cancelled_is_final(self):
        order = self._order()
        order.transition_to(OrderStatus.CANCELLED)
        with pytest.raises(InvalidStatusTransitionError, match="cancelled to confirmed"):
            order.transition_to(OrderStatus.CONFIRMED)

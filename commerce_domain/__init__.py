# Commerce domain models shared by the pricing service

from .money import Money, Quantity, SKU, is_valid_sku
from .catalog import Product, Discount, Promotion
from .inventory import InventoryItem
from .cart import Cart, CartLineItem
from .order import Order, OrderLineItem, OrderStatus
from .errors import (
    DomainError,
    CurrencyMismatchError,
    ProductNotFoundError,
    InvalidStatusTransitionError,
    InsufficientStockError,
    EmptyCartError,
)

__all__ = [
    "Money",
    "Quantity",
    "SKU",
    "is_valid_sku",
    "Product",
    "Discount",
    "Promotion",
    "InventoryItem",
    "Cart",
    "CartLineItem",
    "Order",
    "OrderLineItem",
    "OrderStatus",
    "DomainError",
    "CurrencyMismatchError",
    "ProductNotFoundError",
    "InvalidStatusTransitionError",
    "InsufficientStockError",
    "EmptyCartError",
]

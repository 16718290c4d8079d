"""Domain error types"""

from typing import Optional


class DomainError(Exception):
    """Base class for commerce domain errors"""


class CurrencyMismatchError(DomainError):
    """Arithmetic attempted between Money values of different currencies"""

    def __init__(self, message: str, left: str, right: str):
        super().__init__(message)
        self.left = left
        self.right = right


class ProductNotFoundError(DomainError):
    """No product exists for the requested SKU"""

    def __init__(self, sku: str):
        super().__init__(f"Product not found: {sku}")
        self.sku = sku


class InvalidStatusTransitionError(DomainError):
    """Order status change not allowed by the order lifecycle"""

    def __init__(self, current, target):
        super().__init__(f"Cannot move order from {current.value} to {target.value}")
        self.current = current
        self.target = target


class InsufficientStockError(DomainError):
    """Not enough available inventory to reserve"""

    def __init__(self, sku: str, requested: int, available: Optional[int] = None):
        message = f"Insufficient stock for {sku}: requested {requested}"
        if available is not None:
            message += f", available {available}"
        super().__init__(message)
        self.sku = sku
        self.requested = requested
        self.available = available


class EmptyCartError(DomainError):
    """Checkout attempted on a cart with no items"""

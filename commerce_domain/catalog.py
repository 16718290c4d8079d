"""Catalog models: products, discounts and promotions"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from .money import Money, SKU


@dataclass
class Product:
    """Product catalog entry"""
    sku: SKU
    name: str
    category: str
    base_price: Money
    is_active: bool = True
    # Free-form labels such as "seasonal" or "clearance"
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Discount:
    """Percentage discount with an optional cap"""
    percentage: Decimal = Decimal("0")
    max_discount_amount: Optional[Money] = None

    def calculate_discount(self, price: Money) -> Money:
        """
        Discount amount for the given price.

        Percentages are not clamped to 0-100. A non-positive percentage
        yields zero in the price's currency.
        """
        if self.percentage <= 0:
            return Money.zero(price.currency)

        discount_amount = price.multiply(Decimal(str(self.percentage)) / Decimal(100))

        if (
            self.max_discount_amount is not None
            and discount_amount.amount > self.max_discount_amount.amount
        ):
            return self.max_discount_amount

        return discount_amount

    def apply_to(self, price: Money) -> Money:
        """Price after the discount is taken off"""
        discount = self.calculate_discount(price)
        return Money(price.amount - discount.amount, price.currency)


@dataclass
class Promotion:
    """Marketing promotion with a date window and eligibility filters"""
    id: str
    name: str
    discount: Discount
    start_date: datetime
    end_date: datetime
    # Empty lists on both filters make every product eligible
    eligible_skus: list[str] = field(default_factory=list)
    eligible_categories: list[str] = field(default_factory=list)
    description: str = ""

    def is_active(self, now: datetime) -> bool:
        """Active between start and end date, both inclusive"""
        return self.start_date <= now <= self.end_date

    def is_eligible(self, product: Product) -> bool:
        """Whether the product matches this promotion's SKU or category filter"""
        if not self.eligible_skus and not self.eligible_categories:
            return True

        if self.eligible_skus and product.sku.code in self.eligible_skus:
            return True

        if self.eligible_categories and product.category in self.eligible_categories:
            return True

        return False

"""
Pricing Calculator

Prices a quantity of one SKU, applying at most one promotion.

Promotion selection is first-match: the directory is walked in order and
the first promotion that is both active and eligible wins, even when a
later one would give a bigger discount. The total is not floored at zero.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional, Protocol

from commerce_domain import Money, Product, ProductNotFoundError, Promotion, Quantity

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ProductLookup(Protocol):
    def find_product(self, sku_code: str) -> Optional[Product]:
        ...


class PromotionSource(Protocol):
    def list_promotions(self) -> list[Promotion]:
        ...


@dataclass(frozen=True)
class PricingResult:
    """Itemized price for one SKU and quantity"""
    sku: str
    product_name: str
    unit_price: Money
    base_price: Money
    quantity: int
    discount: Money
    total: Decimal
    promotion_id: Optional[str] = None

    @property
    def currency(self) -> str:
        return self.base_price.currency


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PricingCalculator:
    """Calculates prices with promotional discounts"""

    def __init__(
        self,
        catalog: ProductLookup,
        promotions: PromotionSource,
        clock: Optional[Clock] = None,
    ):
        self.catalog = catalog
        self.promotions = promotions
        self.clock = clock or _utcnow

    def find_applicable_promotion(self, product: Product, now: datetime) -> Optional[Promotion]:
        """First promotion in directory order that is active and eligible"""
        return next(
            (
                p for p in self.promotions.list_promotions()
                if p.is_active(now) and p.is_eligible(product)
            ),
            None,
        )

    def calculate(self, sku: str, quantity: int, customer_id: str = "") -> PricingResult:
        """
        Price ``quantity`` units of ``sku``.

        Raises:
            ProductNotFoundError: if the SKU is not in the catalog
        """
        product = self.catalog.find_product(sku)
        if product is None:
            raise ProductNotFoundError(sku)

        qty = Quantity(quantity)
        base_price = product.base_price.multiply(qty.value)

        promotion = self.find_applicable_promotion(product, self.clock())

        discount = Money.zero(base_price.currency)
        if promotion is not None:
            discount = promotion.discount.calculate_discount(base_price)
            logger.info(
                f"Applied promotion {promotion.id} to {sku} x{quantity} "
                f"for customer {customer_id or 'anonymous'}: -{discount}"
            )

        # May go negative when a discount exceeds the base price
        total = base_price.amount - discount.amount

        logger.debug(f"Priced {sku} x{quantity}: base={base_price} total={total}")

        return PricingResult(
            sku=sku,
            product_name=product.name,
            unit_price=product.base_price,
            base_price=base_price,
            quantity=quantity,
            discount=discount,
            total=total,
            promotion_id=promotion.id if promotion else None,
        )

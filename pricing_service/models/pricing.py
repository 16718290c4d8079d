"""Pricing calculation models"""

from typing import Optional

from .base import ApiModel, JsonDecimal
from ..services.pricing_calculator import PricingResult


class PricingRequest(ApiModel):
    """Request to price a quantity of one SKU"""
    sku: str
    quantity: int
    customer_id: str = ""


class PricingResponse(ApiModel):
    """Itemized pricing result"""
    sku: str
    base_price: JsonDecimal
    quantity: int
    discount: JsonDecimal
    total: JsonDecimal
    unit_price: JsonDecimal
    currency: str
    promotion_id: Optional[str] = None

    @classmethod
    def from_result(cls, result: PricingResult) -> "PricingResponse":
        return cls(
            sku=result.sku,
            base_price=result.base_price.amount,
            quantity=result.quantity,
            discount=result.discount.amount,
            total=result.total,
            unit_price=result.unit_price.amount,
            currency=result.currency,
            promotion_id=result.promotion_id,
        )

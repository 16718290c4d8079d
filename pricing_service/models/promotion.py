"""Promotion models for the pricing service"""

from datetime import datetime
from typing import Optional

from commerce_domain import Promotion

from .base import ApiModel, JsonDecimal


class PromotionResponse(ApiModel):
    """Promotion with its discount and eligibility rules"""
    id: str
    name: str
    description: str = ""
    discount_percentage: JsonDecimal
    max_discount_amount: Optional[JsonDecimal] = None
    start_date: datetime
    end_date: datetime
    eligible_skus: list[str] = []
    eligible_categories: list[str] = []

    @classmethod
    def from_domain(cls, promotion: Promotion) -> "PromotionResponse":
        cap = promotion.discount.max_discount_amount
        return cls(
            id=promotion.id,
            name=promotion.name,
            description=promotion.description,
            discount_percentage=promotion.discount.percentage,
            max_discount_amount=cap.amount if cap else None,
            start_date=promotion.start_date,
            end_date=promotion.end_date,
            eligible_skus=list(promotion.eligible_skus),
            eligible_categories=list(promotion.eligible_categories),
        )


class PromoValidationRequest(ApiModel):
    """Request to check whether a promotion can be used"""
    promotion_id: str
    customer_id: Optional[str] = None


class PromoValidationResponse(ApiModel):
    """Result of a promotion check"""
    promotion_id: str
    is_valid: bool
    reason: Optional[str] = None
    discount_percentage: Optional[JsonDecimal] = None

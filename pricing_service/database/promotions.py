"""
Promotion directory.

Promotions are kept in a list. The pricing calculator applies the first
active, eligible promotion, so insertion order decides overlaps.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from commerce_domain import Discount, Promotion


def sample_promotions(
    now: Optional[datetime] = None,
    widget_days: int = 7,
    clearance_days: int = 30,
) -> list[Promotion]:
    """Sample promotions centred on ``now``"""
    now = now or datetime.now(timezone.utc)
    return [
        Promotion(
            id="PROMO-WIDGET-10",
            name="10% off Widgets",
            description="Save 10% on every item in the Widgets category",
            discount=Discount(percentage=Decimal("10")),
            start_date=now - timedelta(days=widget_days),
            end_date=now + timedelta(days=widget_days),
            eligible_categories=["Widgets"],
        ),
        Promotion(
            id="PROMO-CLEARANCE-25",
            name="25% off Clearance",
            description="Save 25% on selected clearance items",
            discount=Discount(percentage=Decimal("25")),
            start_date=now - timedelta(days=clearance_days),
            end_date=now + timedelta(days=clearance_days),
            eligible_skus=["TOOL-001"],
        ),
    ]


class PromotionDirectory:
    """Ordered in-memory promotion store"""

    def __init__(self, promotions: Optional[list[Promotion]] = None):
        self.promotions: list[Promotion] = list(promotions or [])

    def add_promotion(self, promotion: Promotion) -> None:
        """Append a promotion; it loses ties to every promotion already present"""
        self.promotions.append(promotion)

    def list_promotions(self) -> list[Promotion]:
        """All promotions in directory order"""
        return list(self.promotions)

    def list_active(self, now: datetime) -> list[Promotion]:
        return [p for p in self.promotions if p.is_active(now)]

    def get_promotion(self, promotion_id: str) -> Optional[Promotion]:
        """Get a promotion by ID"""
        return next((p for p in self.promotions if p.id == promotion_id), None)

    def is_promotion_active(self, promotion_id: str, now: datetime) -> bool:
        promotion = self.get_promotion(promotion_id)
        return promotion is not None and promotion.is_active(now)

"""Pricing API routes"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from commerce_domain import ProductNotFoundError

from ..dependencies import get_pricing_calculator
from ..models.pricing import PricingRequest, PricingResponse
from ..services.pricing_calculator import PricingCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pricing", tags=["Pricing"])


@router.post("/calculate", response_model=PricingResponse)
async def calculate_price(
    request: PricingRequest,
    calculator: PricingCalculator = Depends(get_pricing_calculator),
):
    """
    Price a quantity of one SKU.

    The first active promotion the product is eligible for is applied.
    """
    try:
        result = calculator.calculate(request.sku, request.quantity, request.customer_id)
    except ProductNotFoundError as e:
        logger.warning(f"Pricing requested for unknown SKU {e.sku}")
        raise HTTPException(status_code=404, detail=str(e))

    return PricingResponse.from_result(result)

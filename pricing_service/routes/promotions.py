"""Promotion API routes"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..database.promotions import PromotionDirectory
from ..dependencies import get_promotion_directory
from ..models.promotion import (
    PromotionResponse,
    PromoValidationRequest,
    PromoValidationResponse,
)

router = APIRouter(prefix="/api/promotions", tags=["Promotions"])


@router.get("", response_model=list[PromotionResponse])
async def list_active_promotions(
    promotions: PromotionDirectory = Depends(get_promotion_directory),
):
    """List promotions running now, in directory order"""
    now = datetime.now(timezone.utc)
    return [PromotionResponse.from_domain(p) for p in promotions.list_active(now)]


@router.get("/{promotion_id}", response_model=PromotionResponse)
async def get_promotion(
    promotion_id: str,
    promotions: PromotionDirectory = Depends(get_promotion_directory),
):
    """Get a promotion by ID, active or not"""
    promotion = promotions.get_promotion(promotion_id)
    if not promotion:
        return JSONResponse(
            status_code=404,
            content={"error": "Promotion not found", "id": promotion_id},
        )
    return PromotionResponse.from_domain(promotion)


@router.post("/validate", response_model=PromoValidationResponse, response_model_exclude_none=True)
async def validate_promotion(
    request: PromoValidationRequest,
    promotions: PromotionDirectory = Depends(get_promotion_directory),
):
    """Check whether a promotion exists and is running now"""
    now = datetime.now(timezone.utc)
    promotion = promotions.get_promotion(request.promotion_id)

    if not promotion or not promotion.is_active(now):
        return PromoValidationResponse(
            promotion_id=request.promotion_id,
            is_valid=False,
            reason="Promotion not found or expired",
        )

    return PromoValidationResponse(
        promotion_id=request.promotion_id,
        is_valid=True,
        discount_percentage=promotion.discount.percentage,
    )

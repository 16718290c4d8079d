# Pricing Service API models

from .pricing import PricingRequest, PricingResponse
from .product import ProductResponse, ProductListResponse
from .promotion import PromotionResponse, PromoValidationRequest, PromoValidationResponse
from .inventory import InventoryResponse, ReservationRequest
from .cart import CartResponse, CartItemResponse, CreateCartRequest, AddToCartRequest
from .order import OrderResponse, OrderItemResponse, UpdateOrderStatusRequest

__all__ = [
    "PricingRequest",
    "PricingResponse",
    "ProductResponse",
    "ProductListResponse",
    "PromotionResponse",
    "PromoValidationRequest",
    "PromoValidationResponse",
    "InventoryResponse",
    "ReservationRequest",
    "CartResponse",
    "CartItemResponse",
    "CreateCartRequest",
    "AddToCartRequest",
    "OrderResponse",
    "OrderItemResponse",
    "UpdateOrderStatusRequest",
]

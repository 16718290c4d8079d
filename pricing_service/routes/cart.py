"""Cart API routes"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from commerce_domain import (
    Cart,
    EmptyCartError,
    InsufficientStockError,
    ProductNotFoundError,
    is_valid_sku,
)

from ..core.config import settings
from ..database.carts import CartDatabase
from ..database.orders import OrderDatabase
from ..database.products import ProductCatalog
from ..dependencies import (
    get_cart_db,
    get_checkout_service,
    get_order_db,
    get_product_catalog,
)
from ..models.cart import AddToCartRequest, CartResponse, CreateCartRequest
from ..models.order import OrderResponse
from ..services.checkout import CheckoutService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _get_cart_or_404(carts: CartDatabase, cart_id: str) -> Cart:
    cart = carts.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


@router.post("", response_model=CartResponse)
async def create_cart(
    request: CreateCartRequest,
    carts: CartDatabase = Depends(get_cart_db),
):
    """Create a new shopping cart"""
    cart = carts.create_cart(request.customer_id)
    return CartResponse.from_domain(
        cart,
        message="Cart created",
        currency=settings.default_currency,
    )


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(
    cart_id: str,
    carts: CartDatabase = Depends(get_cart_db),
):
    """Get cart by ID"""
    return CartResponse.from_domain(
        _get_cart_or_404(carts, cart_id),
        currency=settings.default_currency,
    )


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(
    cart_id: str,
    request: AddToCartRequest,
    carts: CartDatabase = Depends(get_cart_db),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Add an item to the cart at the product's current price"""
    _get_cart_or_404(carts, cart_id)

    if not is_valid_sku(request.sku):
        raise HTTPException(status_code=400, detail=f"Invalid SKU format: {request.sku}")

    product = catalog.find_product(request.sku)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    updated_cart = carts.add_item(cart_id, product, request.quantity)
    return CartResponse.from_domain(
        updated_cart,
        message=f"Added {request.quantity}x {product.name} to cart",
        currency=settings.default_currency,
    )


@router.post("/{cart_id}/checkout", response_model=OrderResponse)
async def checkout(
    cart_id: str,
    carts: CartDatabase = Depends(get_cart_db),
    orders: OrderDatabase = Depends(get_order_db),
    checkout_service: CheckoutService = Depends(get_checkout_service),
):
    """Price the cart, reserve stock and place a pending order"""
    cart = _get_cart_or_404(carts, cart_id)

    try:
        order = checkout_service.checkout(cart)
    except EmptyCartError:
        raise HTTPException(status_code=400, detail="Cart is empty")
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InsufficientStockError as e:
        logger.warning(f"Checkout of cart {cart_id} failed: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    orders.add_order(order)

    # Cart is consumed by a successful checkout
    carts.delete_cart(cart_id)

    return OrderResponse.from_domain(order)

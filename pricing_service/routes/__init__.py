# API Routes

from .pricing import router as pricing_router
from .products import router as products_router
from .promotions import router as promotions_router
from .inventory import router as inventory_router
from .cart import router as cart_router
from .orders import router as orders_router

__all__ = [
    "pricing_router",
    "products_router",
    "promotions_router",
    "inventory_router",
    "cart_router",
    "orders_router",
]

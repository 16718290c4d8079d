# Database modules

from .products import ProductCatalog, sample_products
from .promotions import PromotionDirectory, sample_promotions
from .inventory import InventoryDatabase, sample_inventory
from .carts import CartDatabase
from .orders import OrderDatabase
from ..core.config import settings

# Singleton instances
if settings.seed_sample_data:
    product_catalog = ProductCatalog(sample_products(settings.default_currency))
    promotion_directory = PromotionDirectory(
        sample_promotions(
            widget_days=settings.widget_promotion_days,
            clearance_days=settings.clearance_promotion_days,
        )
    )
    inventory_db = InventoryDatabase(sample_inventory())
else:
    product_catalog = ProductCatalog()
    promotion_directory = PromotionDirectory()
    inventory_db = InventoryDatabase()

cart_db = CartDatabase()
order_db = OrderDatabase()

__all__ = [
    "ProductCatalog",
    "PromotionDirectory",
    "InventoryDatabase",
    "CartDatabase",
    "OrderDatabase",
    "sample_products",
    "sample_promotions",
    "sample_inventory",
    "product_catalog",
    "promotion_directory",
    "inventory_db",
    "cart_db",
    "order_db",
]

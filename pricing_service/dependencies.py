"""
FastAPI dependencies.

Stores default to the module-level singletons in ``database``; tests
swap them through ``app.dependency_overrides``.
"""

from fastapi import Depends

from . import database
from .core.config import settings
from .database import (
    CartDatabase,
    InventoryDatabase,
    OrderDatabase,
    ProductCatalog,
    PromotionDirectory,
)
from .services import CheckoutService, PricingCalculator


def get_product_catalog() -> ProductCatalog:
    return database.product_catalog


def get_promotion_directory() -> PromotionDirectory:
    return database.promotion_directory


def get_inventory_db() -> InventoryDatabase:
    return database.inventory_db


def get_cart_db() -> CartDatabase:
    return database.cart_db


def get_order_db() -> OrderDatabase:
    return database.order_db


def get_pricing_calculator(
    catalog: ProductCatalog = Depends(get_product_catalog),
    promotions: PromotionDirectory = Depends(get_promotion_directory),
) -> PricingCalculator:
    return PricingCalculator(catalog, promotions)


def get_checkout_service(
    calculator: PricingCalculator = Depends(get_pricing_calculator),
    inventory: InventoryDatabase = Depends(get_inventory_db),
) -> CheckoutService:
    return CheckoutService(calculator, inventory, currency=settings.default_currency)

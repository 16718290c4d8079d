"""Shared pytest fixtures for pricing tests"""

import pytest
from fastapi.testclient import TestClient

from pricing_service import dependencies
from pricing_service.database import (
    CartDatabase,
    InventoryDatabase,
    OrderDatabase,
    ProductCatalog,
    PromotionDirectory,
    sample_inventory,
    sample_products,
    sample_promotions,
)
from pricing_service.main import app
from pricing_service.services import CheckoutService, PricingCalculator

from tests.factories import NOW


@pytest.fixture
def catalog() -> ProductCatalog:
    return ProductCatalog(sample_products())


@pytest.fixture
def promotions() -> PromotionDirectory:
    return PromotionDirectory(sample_promotions(now=NOW))


@pytest.fixture
def inventory() -> InventoryDatabase:
    return InventoryDatabase(sample_inventory())


@pytest.fixture
def calculator(catalog, promotions) -> PricingCalculator:
    return PricingCalculator(catalog, promotions, clock=lambda: NOW)


@pytest.fixture
def checkout_service(calculator, inventory) -> CheckoutService:
    return CheckoutService(calculator, inventory)


@pytest.fixture
def client(inventory):
    """TestClient bound to fresh, seeded stores"""
    catalog = ProductCatalog(sample_products())
    promotions = PromotionDirectory(sample_promotions())
    carts = CartDatabase()
    orders = OrderDatabase()

    app.dependency_overrides[dependencies.get_product_catalog] = lambda: catalog
    app.dependency_overrides[dependencies.get_promotion_directory] = lambda: promotions
    app.dependency_overrides[dependencies.get_inventory_db] = lambda: inventory
    app.dependency_overrides[dependencies.get_cart_db] = lambda: carts
    app.dependency_overrides[dependencies.get_order_db] = lambda: orders

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()

"""In-memory product catalog"""

from decimal import Decimal
from typing import Optional

from commerce_domain import Money, Product, SKU


def sample_products(currency: str = "USD") -> list[Product]:
    """Sample catalog used when seeding is enabled"""
    return [
        Product(
            sku=SKU("WIDGET-001"),
            name="Standard Widget",
            category="Widgets",
            base_price=Money(Decimal("29.99"), currency),
            tags=["popular"],
        ),
        Product(
            sku=SKU("GADGET-001"),
            name="Premium Gadget",
            category="Gadgets",
            base_price=Money(Decimal("99.99"), currency),
            tags=["premium"],
        ),
        Product(
            sku=SKU("TOOL-001"),
            name="Basic Tool",
            category="Tools",
            base_price=Money(Decimal("15.49"), currency),
            tags=["clearance"],
        ),
    ]


class ProductCatalog:
    """In-memory product catalog keyed by SKU code"""

    def __init__(self, products: Optional[list[Product]] = None):
        self.products: dict[str, Product] = {}
        for product in products or []:
            self.add_product(product)

    def add_product(self, product: Product) -> None:
        self.products[product.sku.code] = product

    def find_product(self, sku_code: str) -> Optional[Product]:
        """Get a product by SKU code"""
        return self.products.get(sku_code)

    def list_products(
        self,
        category: Optional[str] = None,
        active_only: bool = False,
    ) -> list[Product]:
        """List products, optionally filtered by category and active flag"""
        results = list(self.products.values())

        if category:
            results = [p for p in results if p.category == category]

        if active_only:
            results = [p for p in results if p.is_active]

        return results

    def categories(self) -> list[str]:
        """Distinct categories in catalog order"""
        return list(dict.fromkeys(p.category for p in self.products.values()))

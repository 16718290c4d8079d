"""Product models for the pricing service"""

from commerce_domain import Product

from .base import ApiModel, JsonDecimal


class ProductResponse(ApiModel):
    """Product in the catalog"""
    sku: str
    name: str
    category: str
    base_price: JsonDecimal
    currency: str = "USD"
    is_active: bool = True
    tags: list[str] = []

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            sku=product.sku.code,
            name=product.name,
            category=product.category,
            base_price=product.base_price.amount,
            currency=product.base_price.currency,
            is_active=product.is_active,
            tags=list(product.tags),
        )


class ProductListResponse(ApiModel):
    """Response from product listing"""
    products: list[ProductResponse]
    total: int

"""Product API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..database.products import ProductCatalog
from ..dependencies import get_product_catalog
from ..models.product import ProductListResponse, ProductResponse

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[str] = Query(None, description="Filter by category"),
    active_only: bool = Query(False, description="Only show active products"),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """List products in the catalog"""
    products = catalog.list_products(category=category, active_only=active_only)
    return ProductListResponse(
        products=[ProductResponse.from_domain(p) for p in products],
        total=len(products),
    )


@router.get("/categories", response_model=list[str])
async def list_categories(catalog: ProductCatalog = Depends(get_product_catalog)):
    """List all product categories"""
    return catalog.categories()


@router.get("/{sku}", response_model=ProductResponse)
async def get_product(
    sku: str,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Get a product by SKU"""
    product = catalog.find_product(sku)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse.from_domain(product)

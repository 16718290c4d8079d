"""
Pricing Service Application

Prices products with promotional discounts and hosts the supporting
catalog, promotion, inventory, cart and order endpoints.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables before settings are read
load_dotenv()

from .core.config import settings
from .database import product_catalog, promotion_directory
from .routes import (
    cart_router,
    inventory_router,
    orders_router,
    pricing_router,
    products_router,
    promotions_router,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(
        f"Catalog: {len(product_catalog.products)} products, "
        f"{len(promotion_directory.promotions)} promotions"
    )
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Promotion-aware pricing for the commerce workshop catalog",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(pricing_router)
app.include_router(products_router)
app.include_router(promotions_router)
app.include_router(inventory_router)
app.include_router(cart_router)
app.include_router(orders_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "Pricing Service API",
        "docs": "/docs",
        "endpoints": {
            "pricing": "/api/pricing/calculate",
            "products": "/api/products",
            "promotions": "/api/promotions",
            "inventory": "/api/inventory",
            "cart": "/api/cart",
            "orders": "/api/orders",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "pricing-service",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pricing_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

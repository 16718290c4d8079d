"""
Pricing API Client

Async HTTP client for services that quote prices or place orders through
the pricing service.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class PricingClient:
    """Client for the pricing service HTTP API"""

    def __init__(
        self,
        base_url: str = "http://localhost:8001",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize pricing client.

        Args:
            base_url: Base URL of the pricing service
            timeout: Request timeout in seconds
            transport: Optional transport, e.g. ``httpx.ASGITransport`` to
                call an in-process app
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> "PricingClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Make an HTTP request and decode the JSON body"""
        response = await self._http_client.request(
            method=method,
            url=path,
            json=body,
            params=params,
            headers={"Accept": "application/json"},
        )

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            response.raise_for_status()

        return response.json()

    async def health(self) -> dict:
        return await self._request("GET", "/health")

    # ==================== Pricing APIs ====================

    async def calculate_price(self, sku: str, quantity: int, customer_id: str = "") -> dict:
        """Price a quantity of one SKU"""
        return await self._request(
            "POST",
            "/api/pricing/calculate",
            body={"sku": sku, "quantity": quantity, "customerId": customer_id},
        )

    # ==================== Catalog APIs ====================

    async def list_products(self, category: Optional[str] = None) -> dict:
        params = {"category": category} if category else None
        return await self._request("GET", "/api/products", params=params)

    async def get_product(self, sku: str) -> dict:
        """Get product details"""
        return await self._request("GET", f"/api/products/{sku}")

    async def list_promotions(self) -> list[dict]:
        """List promotions running now"""
        return await self._request("GET", "/api/promotions")

    async def validate_promotion(self, promotion_id: str, customer_id: Optional[str] = None) -> dict:
        body = {"promotionId": promotion_id}
        if customer_id:
            body["customerId"] = customer_id
        return await self._request("POST", "/api/promotions/validate", body=body)

    # ==================== Cart & Order APIs ====================

    async def create_cart(self, customer_id: str = "") -> dict:
        """Create a new shopping cart"""
        return await self._request("POST", "/api/cart", body={"customerId": customer_id})

    async def add_to_cart(self, cart_id: str, sku: str, quantity: int = 1) -> dict:
        """Add item to cart"""
        return await self._request(
            "POST",
            f"/api/cart/{cart_id}/items",
            body={"sku": sku, "quantity": quantity},
        )

    async def checkout(self, cart_id: str) -> dict:
        """Turn a cart into a pending order"""
        return await self._request("POST", f"/api/cart/{cart_id}/checkout")

    async def get_order(self, order_id: str) -> dict:
        """Get order details"""
        return await self._request("GET", f"/api/orders/{order_id}")

    async def update_order_status(self, order_id: str, status: str) -> dict:
        return await self._request(
            "POST",
            f"/api/orders/{order_id}/status",
            body={"status": status},
        )

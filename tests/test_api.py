"""HTTP API tests"""

from decimal import Decimal

import pytest


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["service"] == "pricing-service"


class TestPricingApi:

    def test_calculate_widget(self, client):
        response = client.post(
            "/api/pricing/calculate",
            json={"sku": "WIDGET-001", "quantity": 2, "customerId": "cust1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["sku"] == "WIDGET-001"
        assert body["quantity"] == 2
        assert body["basePrice"] == pytest.approx(59.98)
        assert body["discount"] == pytest.approx(5.998)
        assert body["total"] == pytest.approx(53.982)
        assert body["unitPrice"] == pytest.approx(29.99)
        assert body["promotionId"] == "PROMO-WIDGET-10"

    def test_calculate_tool(self, client):
        body = client.post(
            "/api/pricing/calculate",
            json={"sku": "TOOL-001", "quantity": 1, "customerId": "cust1"},
        ).json()

        assert body["discount"] == pytest.approx(3.8725)
        assert body["total"] == pytest.approx(11.6175)

    def test_amounts_are_json_numbers(self, client):
        response = client.post(
            "/api/pricing/calculate",
            json={"sku": "TOOL-001", "quantity": 1, "customerId": "cust1"},
        )

        assert '"total":11.6175' in response.text
        assert response.json()["total"] == float(Decimal("11.6175"))

    def test_unknown_sku(self, client):
        response = client.post(
            "/api/pricing/calculate",
            json={"sku": "NOPE-999", "quantity": 1, "customerId": "cust1"},
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found: NOPE-999"


class TestCatalogApi:

    def test_list_products(self, client):
        body = client.get("/api/products").json()
        assert body["total"] == 3
        assert body["products"][0]["basePrice"] == pytest.approx(29.99)

    def test_get_product(self, client):
        assert client.get("/api/products/TOOL-001").json()["category"] == "Tools"
        assert client.get("/api/products/NOPE-999").status_code == 404

    def test_list_promotions(self, client):
        ids = [p["id"] for p in client.get("/api/promotions").json()]
        assert ids == ["PROMO-WIDGET-10", "PROMO-CLEARANCE-25"]

    def test_get_promotion_includes_description(self, client):
        body = client.get("/api/promotions/PROMO-WIDGET-10").json()
        assert body["name"] == "10% off Widgets"
        assert body["description"] == "Save 10% on every item in the Widgets category"
        assert body["discountPercentage"] == 10

    def test_get_missing_promotion(self, client):
        response = client.get("/api/promotions/NOPE")
        assert response.status_code == 404
        assert response.json() == {"error": "Promotion not found", "id": "NOPE"}

    def test_validate_promotion(self, client):
        body = client.post(
            "/api/promotions/validate",
            json={"promotionId": "PROMO-CLEARANCE-25", "customerId": "cust1"},
        ).json()
        assert body["isValid"] is True
        assert body["discountPercentage"] == pytest.approx(25)

    def test_validate_unknown_promotion(self, client):
        body = client.post("/api/promotions/validate", json={"promotionId": "NOPE"}).json()
        assert body == {
            "promotionId": "NOPE",
            "isValid": False,
            "reason": "Promotion not found or expired",
        }


class TestInventoryApi:

    def test_reserve_and_release(self, client):
        body = client.post("/api/inventory/TOOL-001/reserve", json={"quantity": 5}).json()
        assert body["availableQuantity"] == 45
        assert body["reservedQuantity"] == 5
        assert body["totalQuantity"] == 50

        body = client.post("/api/inventory/TOOL-001/release", json={"quantity": 5}).json()
        assert body["reservedQuantity"] == 0

    def test_reserve_too_many(self, client):
        response = client.post("/api/inventory/GADGET-001/reserve", json={"quantity": 26})
        assert response.status_code == 409

    def test_release_more_than_reserved(self, client):
        response = client.post("/api/inventory/GADGET-001/release", json={"quantity": 1})
        assert response.status_code == 400

    def test_unknown_sku(self, client):
        assert client.get("/api/inventory/NOPE-999").status_code == 404


class TestCartAndOrderApi:

    def _cart_id(self, client) -> str:
        return client.post("/api/cart", json={"customerId": "cust1"}).json()["id"]

    def test_add_items_and_subtotal(self, client):
        cart_id = self._cart_id(client)
        client.post(f"/api/cart/{cart_id}/items", json={"sku": "WIDGET-001", "quantity": 1})
        body = client.post(
            f"/api/cart/{cart_id}/items", json={"sku": "WIDGET-001", "quantity": 1}
        ).json()

        assert body["itemCount"] == 2
        assert len(body["items"]) == 1
        assert body["subtotal"] == pytest.approx(59.98)

    def test_add_invalid_sku_format(self, client):
        cart_id = self._cart_id(client)
        response = client.post(f"/api/cart/{cart_id}/items", json={"sku": "a b", "quantity": 1})
        assert response.status_code == 400

    def test_add_unknown_product(self, client):
        cart_id = self._cart_id(client)
        response = client.post(f"/api/cart/{cart_id}/items", json={"sku": "NOPE-999", "quantity": 1})
        assert response.status_code == 404

    def test_add_non_positive_quantity(self, client):
        cart_id = self._cart_id(client)
        response = client.post(f"/api/cart/{cart_id}/items", json={"sku": "TOOL-001", "quantity": 0})
        assert response.status_code == 422

    def test_missing_cart(self, client):
        assert client.get("/api/cart/missing").status_code == 404

    def test_checkout_empty_cart(self, client):
        cart_id = self._cart_id(client)
        assert client.post(f"/api/cart/{cart_id}/checkout").status_code == 400

    def test_checkout_and_lifecycle(self, client):
        cart_id = self._cart_id(client)
        client.post(f"/api/cart/{cart_id}/items", json={"sku": "WIDGET-001", "quantity": 2})

        order = client.post(f"/api/cart/{cart_id}/checkout").json()
        assert order["status"] == "pending"
        assert order["total"] == pytest.approx(53.982)
        assert order["appliedPromotions"] == ["PROMO-WIDGET-10"]
        assert client.get(f"/api/cart/{cart_id}").status_code == 404

        order_id = order["id"]
        assert client.get(f"/api/orders/{order_id}").json()["customerId"] == "cust1"
        assert [o["id"] for o in client.get("/api/orders").json()] == [order_id]

        confirmed = client.post(f"/api/orders/{order_id}/status", json={"status": "confirmed"})
        assert confirmed.json()["status"] == "confirmed"

        illegal = client.post(f"/api/orders/{order_id}/status", json={"status": "delivered"})
        assert illegal.status_code == 409

    def test_checkout_insufficient_stock(self, client):
        cart_id = self._cart_id(client)
        client.post(f"/api/cart/{cart_id}/items", json={"sku": "GADGET-001", "quantity": 30})

        response = client.post(f"/api/cart/{cart_id}/checkout")

        assert response.status_code == 409
        assert client.get(f"/api/cart/{cart_id}").status_code == 200

    def test_missing_order(self, client):
        assert client.get("/api/orders/missing").status_code == 404
        response = client.post("/api/orders/missing/status", json={"status": "confirmed"})
        assert response.status_code == 404

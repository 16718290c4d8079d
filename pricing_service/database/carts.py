"""Cart storage for the pricing service"""

from typing import Optional

from commerce_domain import Cart, Product, Quantity


class CartDatabase:
    """In-memory cart storage"""

    def __init__(self):
        self.carts: dict[str, Cart] = {}

    def create_cart(self, customer_id: str = "") -> Cart:
        """Create a new cart"""
        cart = Cart(customer_id=customer_id)
        self.carts[cart.id] = cart
        return cart

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def add_item(
        self,
        cart_id: str,
        product: Product,
        quantity: int = 1,
    ) -> Optional[Cart]:
        """Add a product to the cart at its current base price"""
        cart = self.get_cart(cart_id)
        if not cart:
            return None

        cart.add_item(product.sku, Quantity(quantity), product.base_price)
        return cart

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            return True
        return False

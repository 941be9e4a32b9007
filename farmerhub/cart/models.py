"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal

from farmerhub.models import Product
from farmerhub.services.money import multiply


@dataclass
class CartLine:
    """One aggregated (product, quantity) pair in the cart."""
    product: Product
    quantity: int = 1

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def unit_price(self) -> Decimal:
        return self.product.unit_price

    @property
    def total_price(self) -> Decimal:
        """Total price for all units."""
        return multiply(self.product.unit_price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary for display layers."""
        return {
            "product_name": self.product.name,
            "category": self.product.category.value,
            "quantity": self.quantity,
            "unit_price": str(self.product.unit_price),
            "total_price": str(self.total_price),
        }

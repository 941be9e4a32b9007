"""Starter products loaded into an empty catalog."""
from decimal import Decimal

from farmerhub.models import Category, Product

_STARTER_PRODUCTS = [
    ("Organic Apples", "Freshly picked Himalayan apples.", Category.FRUITS, "150.0", "vendor1"),
    ("Farm Tomatoes", "Juicy red tomatoes from local farm.", Category.VEGETABLES, "35.0", "vendor2"),
    ("Basmati Rice (10kg)", "Aged Basmati rice, premium quality.", Category.GRAINS, "800.0", "vendor3"),
    ("Bananas (Dwarf Cavendish)", "Sweet and nutritious bananas.", Category.FRUITS, "60.0", "vendor1"),
    ("Spinach (Palak)", "Leafy green spinach, 1kg bundle.", Category.VEGETABLES, "40.0", "vendor2"),
    ("Wheat Flour (Atta)", "Whole wheat atta, 5kg bag.", Category.GRAINS, "250.0", "vendor3"),
]


def seed_products() -> list[Product]:
    """Return a fresh list of the six starter products."""
    return [
        Product(
            name=name,
            description=description,
            category=category,
            unit_price=Decimal(price),
            listed_by=listed_by,
        )
        for name, description, category, price, listed_by in _STARTER_PRODUCTS
    ]

"""Catalog package: starter data and the in-memory catalog."""
from .seed import seed_products
from .service import Catalog

__all__ = [
    "Catalog",
    "seed_products",
]

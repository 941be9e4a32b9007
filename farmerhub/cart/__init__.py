"""Cart package: line model and session cart."""
from .models import CartLine
from .service import CartSession

__all__ = [
    "CartLine",
    "CartSession",
]

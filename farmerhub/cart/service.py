"""
Cart Session - in-memory shopping cart for the active user.

Lines are merged by product name, not by listing identity: two distinct
listings that share a name end up on the same line.
"""
from decimal import Decimal
from typing import Optional

from farmerhub.logging import get_logger, sanitize_string_for_logging
from farmerhub.models import Product
from farmerhub.services.money import format_money

from .models import CartLine

logger = get_logger(__name__)


class CartSession:
    """
    Mapping of product -> quantity for one session.

    Usage:
        cart = CartSession()
        cart.add_item(product)
        total = cart.checkout()
    """

    def __init__(self, currency: str = "INR"):
        self.currency = currency
        self._lines: list[CartLine] = []

    def _find_line(self, name: str) -> Optional[CartLine]:
        return next((line for line in self._lines if line.product.name == name), None)

    def add_item(self, product: Product) -> CartLine:
        """Add one unit; increments the line whose product has the same name."""
        # TODO: key lines by a stable product id once listings carry one
        line = self._find_line(product.name)
        if line is not None:
            line.quantity += 1
        else:
            line = CartLine(product=product, quantity=1)
            self._lines.append(line)
        logger.debug(f"Cart: {sanitize_string_for_logging(product.name)} x{line.quantity}")
        return line

    def lines(self) -> list[CartLine]:
        """Snapshot of the lines in insertion order."""
        return [CartLine(product=line.product, quantity=line.quantity) for line in self._lines]

    def subtotal(self) -> Decimal:
        """Sum of quantity x unit price, computed on every call."""
        return sum((line.total_price for line in self._lines), Decimal("0"))

    def item_count(self) -> int:
        """Total units across all lines."""
        return sum(line.quantity for line in self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def checkout(self) -> Decimal:
        """Simulated checkout: return the amount due, then empty the cart."""
        total = self.subtotal()
        units = self.item_count()
        self._lines.clear()
        logger.info(f"Checkout simulated: {units} item(s), total {format_money(total, self.currency)}")
        return total

    def clear(self) -> None:
        """Empty the cart without checking out."""
        self._lines.clear()

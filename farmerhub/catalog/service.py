"""
Catalog Service

In-memory product listings: category filtering and seller listings.
Not persisted across runs.
"""
from decimal import Decimal
from typing import Optional, Union

from farmerhub.errors import ListingResult, ValidationError, ValidationReason
from farmerhub.logging import get_logger, sanitize_string_for_logging
from farmerhub.models import ALL_CATEGORIES, Category, Product
from farmerhub.services.money import parse_decimal

from .seed import seed_products

logger = get_logger(__name__)


def _coerce_category(value: Union[Category, str]) -> Optional[Category]:
    if isinstance(value, Category):
        return value
    try:
        return Category(value)
    except ValueError:
        return None


class Catalog:
    """Ordered collection of product listings."""

    def __init__(self, products: Optional[list[Product]] = None):
        self._products: list[Product] = list(products or [])

    def __len__(self) -> int:
        return len(self._products)

    @staticmethod
    def categories() -> list[Category]:
        """Categories a seller can list under."""
        return list(Category)

    def seed(self) -> list[Product]:
        """Load the starter products if the catalog is empty."""
        if not self._products:
            self._products.extend(seed_products())
            logger.info(f"Seeded catalog with {len(self._products)} products")
        return list(self._products)

    def list(self, category: Union[Category, str, None] = None) -> list[Product]:
        """
        Products in insertion order.

        None or "All" returns everything; any other value keeps only the
        products in that category (an unknown category matches nothing).
        """
        if category is None or category == ALL_CATEGORIES:
            return list(self._products)
        wanted = _coerce_category(category)
        return [p for p in self._products if p.category == wanted]

    def add(
        self,
        name: str,
        description: str,
        category: Union[Category, str],
        unit_price: Union[Decimal, int, float, str],
        listed_by: str,
    ) -> ListingResult:
        """Validate and append a new listing. Names need not be unique."""
        name = (name or "").strip()
        description = (description or "").strip()

        if not name or not description:
            return self._reject(ValidationReason.EMPTY_FIELDS, name)

        price = parse_decimal(unit_price)
        if price is None:
            return self._reject(ValidationReason.INVALID_PRICE, name)
        if price <= 0:
            return self._reject(ValidationReason.NON_POSITIVE_PRICE, name)

        resolved = _coerce_category(category)
        if resolved is None:
            return self._reject(ValidationReason.INVALID_CATEGORY, name)

        product = Product(
            name=name,
            description=description,
            category=resolved,
            unit_price=price,
            listed_by=listed_by,
        )
        self._products.append(product)
        logger.info(
            f"Listed {sanitize_string_for_logging(name)} in {resolved.value} "
            f"by {sanitize_string_for_logging(listed_by)}"
        )
        return ListingResult(success=True, product=product)

    @staticmethod
    def _reject(reason: ValidationReason, name: str) -> ListingResult:
        logger.info(f"Listing rejected ({reason.value}) for {sanitize_string_for_logging(name)}")
        return ListingResult(success=False, error=ValidationError.of(reason))

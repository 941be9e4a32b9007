"""Domain Models - pydantic entities for accounts and products."""
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, field_validator

from farmerhub.services.money import parse_decimal as _parse_decimal


class Category(str, Enum):
    """Product categories offered in the marketplace."""
    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    GRAINS = "Grains"


# Filter value meaning "no category filter"
ALL_CATEGORIES = "All"


class Account(BaseModel):
    """Registered user credentials and contact email."""
    username: str  # original casing, used for display
    password: str
    email: str

    class Config:
        extra = "ignore"  # Ignore unknown fields from older snapshots

    @property
    def key(self) -> str:
        """Case-insensitive store key."""
        return self.username.lower()


class Product(BaseModel):
    """A product listing. Immutable once created."""
    name: str
    description: str
    category: Category
    unit_price: Decimal
    listed_by: str

    class Config:
        frozen = True

    @field_validator("unit_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        price = _parse_decimal(v)
        if price is None:
            raise ValueError("unit_price must be a number")
        if price <= 0:
            raise ValueError("unit_price must be positive")
        return price

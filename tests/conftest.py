"""Pytest configuration and fixtures"""
import os
from decimal import Decimal

import pytest

# Set test environment variables before the logger configures itself
os.environ.setdefault("LOG_LEVEL", "WARNING")

from farmerhub.auth import CredentialStorage, CredentialStore
from farmerhub.cart import CartSession
from farmerhub.catalog import Catalog
from farmerhub.config import Settings
from farmerhub.models import Category, Product
from farmerhub.session import SessionController


@pytest.fixture
def data_file(tmp_path):
    """Path for a credential snapshot inside the test's temp dir"""
    return tmp_path / "users.jsonl"


@pytest.fixture
def storage(data_file):
    return CredentialStorage(data_file)


@pytest.fixture
def store(storage):
    """Credential store loaded from an empty location (default account seeded)"""
    credential_store = CredentialStore(storage)
    credential_store.load()
    return credential_store


@pytest.fixture
def catalog():
    """Catalog seeded with the six starter products"""
    seeded = Catalog()
    seeded.seed()
    return seeded


@pytest.fixture
def cart():
    return CartSession()


@pytest.fixture
def controller(store, catalog, cart):
    return SessionController(store, catalog, cart)


@pytest.fixture
def settings(data_file):
    return Settings(data_file=data_file, currency="INR")


@pytest.fixture
def sample_product():
    """Sample product"""
    return Product(
        name="Apples",
        description="Crisp red apples",
        category=Category.FRUITS,
        unit_price=Decimal("120.50"),
        listed_by="farmer",
    )

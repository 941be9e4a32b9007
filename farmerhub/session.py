"""
Session Controller - single active user state machine.

States: LOGGED_OUT (initial) and LOGGED_IN.
    LOGGED_OUT --login ok--> LOGGED_IN
    LOGGED_IN  --logout----> LOGGED_OUT (cart cleared)
    LOGGED_OUT --register--> LOGGED_OUT (username pre-filled for login)
"""
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from farmerhub.auth import CredentialStore
from farmerhub.cart import CartLine, CartSession
from farmerhub.catalog import Catalog
from farmerhub.errors import (
    AuthResult,
    ListingResult,
    RegistrationResult,
    ValidationError,
    ValidationReason,
)
from farmerhub.logging import get_logger, sanitize_string_for_logging
from farmerhub.models import Account, Category, Product

logger = get_logger(__name__)


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


class SessionController:
    """Binds the active account to the cart and sequences login/logout."""

    def __init__(self, store: CredentialStore, catalog: Catalog, cart: CartSession):
        self.store = store
        self.catalog = catalog
        self.cart = cart
        self.active_account: Optional[Account] = None
        self.prefill_username: str = ""

    @property
    def state(self) -> SessionState:
        return SessionState.LOGGED_IN if self.active_account else SessionState.LOGGED_OUT

    @property
    def is_logged_in(self) -> bool:
        return self.active_account is not None

    # Auth

    def login(self, identifier: str, password: str) -> AuthResult:
        result = self.store.authenticate(identifier, password)
        if result.success:
            # Switching accounts ends the previous session and its cart
            if self.active_account is not None and self.active_account.key != result.account.key:
                self.logout()
            self.active_account = result.account
            self.prefill_username = ""
            logger.info(f"Logged in as {sanitize_string_for_logging(result.account.username)}")
        return result

    def logout(self) -> None:
        if self.active_account is not None:
            logger.info(f"Logged out {sanitize_string_for_logging(self.active_account.username)}")
        self.active_account = None
        self.cart.clear()

    def register(
        self,
        username: str,
        password: str,
        email: str,
        confirm_password: Optional[str] = None,
    ) -> RegistrationResult:
        """Register without logging in; on success the username is pre-filled for login."""
        result = self.store.register(username, password, email, confirm_password)
        if result.success:
            self.prefill_username = result.account.username
        return result

    def resolve_for_reset(self, identifier: str) -> Optional[Account]:
        return self.store.resolve_for_reset(identifier)

    def profile(self) -> Optional[Account]:
        """The active account, for a profile view."""
        return self.active_account

    # Catalog

    def list_products(self, category: Union[Category, str, None] = None) -> list[Product]:
        return self.catalog.list(category)

    def list_product(
        self,
        name: str,
        description: str,
        category: Union[Category, str],
        unit_price,
    ) -> ListingResult:
        """Seller listing action; the listing is attributed to the active account."""
        if self.active_account is None:
            return ListingResult(success=False, error=ValidationError.of(ValidationReason.NOT_LOGGED_IN))
        return self.catalog.add(name, description, category, unit_price, self.active_account.username)

    # Cart

    def add_to_cart(self, product: Product) -> CartLine:
        return self.cart.add_item(product)

    def cart_lines(self) -> list[CartLine]:
        return self.cart.lines()

    def subtotal(self) -> Decimal:
        return self.cart.subtotal()

    def item_count(self) -> int:
        return self.cart.item_count()

    def checkout(self) -> Decimal:
        return self.cart.checkout()

"""
Error taxonomy for the FarmerHub core.

Every business outcome is returned as a value: reason enums, small result
dataclasses, and centralized diagnostic messages (no exceptions for control
flow).
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from farmerhub.models import Account, Product


# Registration errors
ERROR_EMPTY_FIELDS = "All fields are required"
ERROR_PASSWORD_MISMATCH = "Passwords do not match"
ERROR_USERNAME_TOO_SHORT = "Username must be at least 4 characters long"
ERROR_INVALID_EMAIL = "Invalid email format"
ERROR_WEAK_PASSWORD = (
    "Password must be 8+ characters and contain an uppercase letter, "
    "a digit and a special character (@#$%^&+=)"
)
ERROR_DUPLICATE_USERNAME = "User already exists"

# Auth errors
ERROR_USER_NOT_FOUND = "User not found"
ERROR_WRONG_PASSWORD = "Invalid password"
ERROR_NOT_LOGGED_IN = "No active account"

# Listing errors
ERROR_INVALID_PRICE = "Price must be a valid number"
ERROR_NON_POSITIVE_PRICE = "Price must be greater than zero"
ERROR_INVALID_CATEGORY = "Unknown product category"

# Store errors
ERROR_STORE_READ = "Failed to read credential snapshot"
ERROR_STORE_WRITE = "Failed to write credential snapshot"


class ValidationReason(str, Enum):
    """Why a registration or listing was rejected."""
    EMPTY_FIELDS = "empty_fields"
    PASSWORD_MISMATCH = "password_mismatch"
    USERNAME_TOO_SHORT = "username_too_short"
    INVALID_EMAIL = "invalid_email"
    WEAK_PASSWORD = "weak_password"
    DUPLICATE_USERNAME = "duplicate_username"
    INVALID_PRICE = "invalid_price"
    NON_POSITIVE_PRICE = "non_positive_price"
    INVALID_CATEGORY = "invalid_category"
    NOT_LOGGED_IN = "not_logged_in"


_REASON_MESSAGES = {
    ValidationReason.EMPTY_FIELDS: ERROR_EMPTY_FIELDS,
    ValidationReason.PASSWORD_MISMATCH: ERROR_PASSWORD_MISMATCH,
    ValidationReason.USERNAME_TOO_SHORT: ERROR_USERNAME_TOO_SHORT,
    ValidationReason.INVALID_EMAIL: ERROR_INVALID_EMAIL,
    ValidationReason.WEAK_PASSWORD: ERROR_WEAK_PASSWORD,
    ValidationReason.DUPLICATE_USERNAME: ERROR_DUPLICATE_USERNAME,
    ValidationReason.INVALID_PRICE: ERROR_INVALID_PRICE,
    ValidationReason.NON_POSITIVE_PRICE: ERROR_NON_POSITIVE_PRICE,
    ValidationReason.INVALID_CATEGORY: ERROR_INVALID_CATEGORY,
    ValidationReason.NOT_LOGGED_IN: ERROR_NOT_LOGGED_IN,
}


class AuthError(str, Enum):
    """Login failure kinds."""
    NOT_FOUND = "not_found"
    WRONG_PASSWORD = "wrong_password"

    @property
    def detail(self) -> str:
        if self is AuthError.NOT_FOUND:
            return ERROR_USER_NOT_FOUND
        return ERROR_WRONG_PASSWORD


@dataclass(frozen=True)
class ValidationError:
    """A rejected registration or listing."""
    reason: ValidationReason
    detail: str = ""
    failed_rules: tuple[str, ...] = ()  # password policy rules that failed

    @classmethod
    def of(cls, reason: ValidationReason, failed_rules: tuple[str, ...] = ()) -> "ValidationError":
        return cls(reason=reason, detail=_REASON_MESSAGES[reason], failed_rules=failed_rules)


@dataclass(frozen=True)
class StoreIOError:
    """Persistence read/write failure (recovered, never raised)."""
    operation: str  # 'load' or 'save'
    path: str
    detail: str


@dataclass
class RegistrationResult:
    """Outcome of CredentialStore.register."""
    success: bool
    account: Optional["Account"] = None
    error: Optional[ValidationError] = None

    @property
    def reason(self) -> Optional[ValidationReason]:
        return self.error.reason if self.error else None


@dataclass
class AuthResult:
    """Outcome of CredentialStore.authenticate."""
    success: bool
    account: Optional["Account"] = None
    error: Optional[AuthError] = None


@dataclass
class ListingResult:
    """Outcome of Catalog.add."""
    success: bool
    product: Optional["Product"] = None
    error: Optional[ValidationError] = None

    @property
    def reason(self) -> Optional[ValidationReason]:
        return self.error.reason if self.error else None


__all__ = [
    "ValidationReason",
    "ValidationError",
    "AuthError",
    "StoreIOError",
    "RegistrationResult",
    "AuthResult",
    "ListingResult",
]

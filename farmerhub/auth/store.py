"""
Credential Store - case-insensitive username -> Account table.

Handles registration validation, login lookup and the simulated
forgot-password resolution. Every outcome is returned as a result value.
"""
from typing import Optional

from farmerhub.errors import (
    AuthError,
    AuthResult,
    RegistrationResult,
    StoreIOError,
    ValidationError,
    ValidationReason,
)
from farmerhub.logging import get_logger, sanitize_string_for_logging
from farmerhub.models import Account

from .storage import CredentialStorage
from .validators import is_valid_email, is_valid_username, password_policy_failures

logger = get_logger(__name__)

DEFAULT_USERNAME = "farmer"
DEFAULT_PASSWORD = "Pass123!"
DEFAULT_EMAIL = "farm@hub.com"


def default_account() -> Account:
    """Account seeded when the snapshot is missing, corrupt or empty."""
    return Account(username=DEFAULT_USERNAME, password=DEFAULT_PASSWORD, email=DEFAULT_EMAIL)


class CredentialStore:
    """
    Owns the account table.

    Keys are lower-cased usernames; the Account keeps the original casing.
    Email is not indexed: reset lookup falls back to a linear scan.
    """

    def __init__(self, storage: Optional[CredentialStorage] = None):
        self.storage = storage
        self._accounts: dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and username.strip().lower() in self._accounts

    def get(self, username: str) -> Optional[Account]:
        return self._accounts.get(username.strip().lower())

    def load(self) -> dict[str, Account]:
        """Replace the table with the durable snapshot, seeding the default account if empty."""
        loaded = self.storage.load() if self.storage else {}
        self._accounts = dict(loaded)
        if not self._accounts:
            account = default_account()
            self._accounts[account.key] = account
            logger.info("Seeded default account")
        return dict(self._accounts)

    def save(self) -> Optional[StoreIOError]:
        """Flush the table to durable storage."""
        if self.storage is None:
            return None
        return self.storage.save(self._accounts)

    def register(
        self,
        username: str,
        password: str,
        email: str,
        confirm_password: Optional[str] = None,
    ) -> RegistrationResult:
        """
        Validate and store a new account.

        Checks run in a fixed order and the first failure is reported:
        empty fields, password confirmation, username length, email format,
        password policy, duplicate username.
        """
        username = (username or "").strip()
        email = (email or "").strip()
        password = password or ""

        fields = [username, password, email]
        if confirm_password is not None:
            fields.append(confirm_password)
        if not all(fields):
            return self._reject(ValidationReason.EMPTY_FIELDS, username)

        if confirm_password is not None and confirm_password != password:
            return self._reject(ValidationReason.PASSWORD_MISMATCH, username)

        if not is_valid_username(username):
            return self._reject(ValidationReason.USERNAME_TOO_SHORT, username)

        if not is_valid_email(email):
            return self._reject(ValidationReason.INVALID_EMAIL, username)

        failed_rules = password_policy_failures(password)
        if failed_rules:
            return self._reject(ValidationReason.WEAK_PASSWORD, username, failed_rules)

        key = username.lower()
        if key in self._accounts:
            return self._reject(ValidationReason.DUPLICATE_USERNAME, username)

        account = Account(username=username, password=password, email=email)
        self._accounts[key] = account
        logger.info(f"Registered account {sanitize_string_for_logging(username)}")
        return RegistrationResult(success=True, account=account)

    def authenticate(self, identifier: str, password: str) -> AuthResult:
        """Look up by lower-cased username and compare the password exactly."""
        account = self._accounts.get((identifier or "").strip().lower())
        if account is None:
            logger.info(f"{AuthError.NOT_FOUND.detail}: {sanitize_string_for_logging(identifier)}")
            return AuthResult(success=False, error=AuthError.NOT_FOUND)

        if account.password != password:
            logger.info(f"{AuthError.WRONG_PASSWORD.detail} for {sanitize_string_for_logging(account.username)}")
            return AuthResult(success=False, error=AuthError.WRONG_PASSWORD)

        return AuthResult(success=True, account=account)

    def resolve_for_reset(self, identifier: str) -> Optional[Account]:
        """
        Find the account a password reset notice would go to.

        Tries the username key first, then scans every account for a
        case-insensitive email match. No email is actually sent.
        """
        identifier = (identifier or "").strip()
        if not identifier:
            return None

        account = self._accounts.get(identifier.lower())
        if account is None:
            wanted = identifier.casefold()
            account = next(
                (acc for acc in self._accounts.values() if acc.email.casefold() == wanted),
                None,
            )

        if account is None:
            logger.info(f"Password reset: no account for {sanitize_string_for_logging(identifier)}")
        else:
            logger.info(f"Password reset notice simulated for {sanitize_string_for_logging(account.username)}")
        return account

    @staticmethod
    def _reject(
        reason: ValidationReason,
        username: str,
        failed_rules: tuple[str, ...] = (),
    ) -> RegistrationResult:
        logger.info(f"Registration rejected ({reason.value}) for {sanitize_string_for_logging(username)}")
        return RegistrationResult(success=False, error=ValidationError.of(reason, failed_rules))

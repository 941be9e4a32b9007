"""Auth package: credential validation, storage, and the store facade."""
from .storage import CredentialStorage
from .store import CredentialStore, default_account

__all__ = [
    "CredentialStorage",
    "CredentialStore",
    "default_account",
]

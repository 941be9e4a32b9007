"""
Credential snapshot storage (JSON Lines file).

One record per account with the keys `username`, `password` and `email`.
Record order is not significant.
"""
import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from farmerhub.errors import ERROR_STORE_READ, ERROR_STORE_WRITE, StoreIOError
from farmerhub.logging import get_logger
from farmerhub.models import Account

logger = get_logger(__name__)


class CredentialStorage:
    """Reads and writes the durable username -> Account snapshot."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.last_error: Optional[StoreIOError] = None

    def load(self) -> dict[str, Account]:
        """
        Read the snapshot.

        A missing file is not an error. An unreadable or corrupt file is
        logged and yields an empty mapping; this never raises.
        """
        self.last_error = None
        if not self.path.exists():
            logger.info(f"Credential snapshot {self.path} not found, starting empty")
            return {}

        accounts: dict[str, Account] = {}
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                for line_no, line in enumerate(fh, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    data = json.loads(line)
                    if not isinstance(data, dict):
                        raise ValueError(f"line {line_no}: expected an object")
                    account = Account(**data)
                    accounts[account.key] = account
        except (OSError, ValueError, TypeError, PydanticValidationError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            self.last_error = StoreIOError(operation="load", path=str(self.path), detail=str(e))
            logger.error(f"{ERROR_STORE_READ} {self.path}: {e}")
            return {}

        logger.info(f"Loaded {len(accounts)} account(s) from {self.path}")
        return accounts

    def save(self, accounts: dict[str, Account]) -> Optional[StoreIOError]:
        """
        Write the full snapshot in a single pass.

        Best effort: a crash mid-write can leave a truncated file. Failures
        are logged and returned, never raised.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as fh:
                for account in accounts.values():
                    fh.write(json.dumps(account.model_dump(), ensure_ascii=False))
                    fh.write("\n")
        except OSError as e:
            error = StoreIOError(operation="save", path=str(self.path), detail=str(e))
            self.last_error = error
            logger.error(f"{ERROR_STORE_WRITE} {self.path}: {e}")
            return error

        self.last_error = None
        logger.info(f"Saved {len(accounts)} account(s) to {self.path}")
        return None

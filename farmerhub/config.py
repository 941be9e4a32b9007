"""
Settings - environment-driven configuration.

Values come from the process environment; a `.env` file in the working
directory is loaded first when present.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_FILE = "farmerhub_users.jsonl"
DEFAULT_CURRENCY = "INR"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the FarmerHub core."""
    data_file: Path = Path(DEFAULT_DATA_FILE)
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (after loading .env)."""
        load_dotenv()
        return cls(
            data_file=Path(os.environ.get("FARMERHUB_DATA_FILE", DEFAULT_DATA_FILE)),
            currency=os.environ.get("FARMERHUB_CURRENCY", DEFAULT_CURRENCY).upper(),
        )

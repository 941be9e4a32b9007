"""
Logger setup for the FarmerHub core.

The root logger is configured once, on first import, with a stdout handler.
Modules take a named logger:

    from farmerhub.logging import get_logger
    logger = get_logger(__name__)

Usernames, emails and product names come from end users; pass them through
sanitize_string_for_logging before logging. Passwords are never logged.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    """LOG_LEVEL from the environment, INFO when unset or unknown."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Attach the stdout handler unless the host application already did."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())

    # FARMERHUB_ENV=production drops timestamps
    is_production = os.environ.get("FARMERHUB_ENV") == "production"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT))

    root.addHandler(handler)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Named logger for a farmerhub module (pass __name__)."""
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    # Newlines in a username must not start a fake log record
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make a username, email or product name safe to put in a log line.

    Control characters are escaped and the result is cut to max_length.
    Empty values become "N/A".
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_string_for_logging",
]

"""
Logging for shopcart.

One stdout handler is attached to the root logger the first time this
module is imported; every shopcart module then asks for its own logger:

    from shopcart.logging import get_logger
    logger = get_logger(__name__)

LOG_LEVEL picks the level. SHOPCART_ENV=production drops timestamps,
since the process supervisor adds its own.

Catalog titles are remote text and may carry newlines, so they go through
sanitize_string_for_logging before they are interpolated into a message.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Chatty third-party loggers kept at WARNING
QUIET_LOGGERS = ("httpx", "httpcore")


def _get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Attach the stdout handler unless the host (pytest, uvicorn) already did."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = _get_log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    is_production = os.environ.get("SHOPCART_ENV") == "production"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT))
    root.addHandler(handler)

    # One line per catalog request is noise next to the cart's own logs
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a shopcart module (pass __name__)."""
    return logging.getLogger(name)


_CONTROL_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""}


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make catalog-sourced text safe to interpolate into a log line.

    Line breaks and tabs are escaped so a product title cannot forge extra
    log records, and long titles are cut to max_length characters.

    Returns:
        The cleaned text, or "N/A" for None or an empty title
    """
    if not value:
        return "N/A"
    safe_value = "".join(_CONTROL_ESCAPES.get(ch, ch) for ch in str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_string_for_logging",
]

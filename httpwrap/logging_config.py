"""
logging_config.py
------------------

Shared logging setup for httpwrap. It uses Python's built-in
``logging`` module rather than ``print`` so that applications decide
where the output goes. Every line the client emits is a short,
human-readable sentence; nothing here serialises structured records.

Import ``logger`` and call its methods instead of ``logging.info``
directly. ``configure_logging`` is optional: libraries should not
touch handlers unless the host application asks them to.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Mapping, Optional, Union

from httpwrap.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# Header names whose values never reach the logs.
SENSITIVE_HEADERS = {"authorization", "proxy-authorization", "cookie", "x-api-key"}

logger = logging.getLogger("httpwrap")


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Calling this more than once does not stack handlers. When *level* is
    omitted the value of ``HTTPWRAP_LOG_LEVEL`` is used.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not any(getattr(h, "_httpwrap", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._httpwrap = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def _sanitize_headers(headers: Any) -> dict:
    """Return a plain dict copy of *headers* without sensitive values.

    Accepts every header shape the client accepts. Anything else yields
    an empty dict.
    """
    if isinstance(headers, Mapping):
        items = list(headers.items())
    elif isinstance(headers, list):
        items = [tuple(pair) for pair in headers if len(pair) == 2]
    else:
        return {}
    return {str(k): v for k, v in items if str(k).lower() not in SENSITIVE_HEADERS}


def log_http_request(method: str, url: str, *, headers: Any = None, body_type: Optional[str] = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Only high-level information is recorded: method, URL, the type of
    the encoded body and, when ``HTTPWRAP_LOG_REQUEST_HEADERS`` is on,
    the request headers with credentials removed.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    parts = [f"{method} {url}"]
    if body_type is not None:
        parts.append(f"body={body_type}")
    if headers is not None and get_settings().log_request_headers:
        parts.append(f"headers={_sanitize_headers(headers)}")
    logger.debug("Outbound request " + " ".join(parts))

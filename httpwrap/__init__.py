"""
httpwrap package
----------------

Convenience layer over ``httpx``: verb-named async methods, automatic
request body encoding and response body decoding by content type,
and status logging. Importing ``httpwrap`` exposes the client and the
``Blob`` container used for binary payloads.
"""

from .clients.http_client import HTTPClient
from .logging_config import configure_logging
from .schemas import Blob

__all__ = ["HTTPClient", "Blob", "configure_logging"]

"""
Client implementations built on the helpers in :mod:`httpwrap.core`.
"""

from .http_client import HTTPClient

__all__ = ["HTTPClient"]

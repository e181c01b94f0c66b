"""
Data containers shared by the client and its callers.
"""

from .blob import Blob

__all__ = ["Blob"]

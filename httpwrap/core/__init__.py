"""
Core helpers package for httpwrap.

This package holds the pieces the client is assembled from: header
access, body preparation, response decoding, status classification
and settings. Each module can be used and tested on its own.
"""

__all__ = []

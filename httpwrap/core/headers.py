"""
core/headers.py
----------------

Case-insensitive access to header collections of several shapes.

Callers may hand the client headers as an :class:`httpx.Headers`
instance, as a list of ``[name, value]`` pairs or as a plain dict.
Each shape gets a small accessor implementing ``get`` and ``set`` so
the rest of the client never branches on the representation. All
accessors mutate the collection they wrap; nothing is copied.

Unrecognised shapes are wrapped in a null accessor: lookups return
``None`` and writes are silently dropped.
"""

from __future__ import annotations

from typing import Any, List, Mapping, MutableMapping, Optional, Protocol

import httpx


class HeaderAccessor(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MapHeaders:
    """Accessor for :class:`httpx.Headers`, which is already case-insensitive."""

    def __init__(self, headers: httpx.Headers) -> None:
        self.headers = headers

    def get(self, key: str) -> Optional[str]:
        return self.headers.get(key)

    def set(self, key: str, value: str) -> None:
        self.headers[key] = value


class PairListHeaders:
    """Accessor for an ordered list of ``(name, value)`` pairs.

    ``set`` replaces the value of the first pair whose name matches,
    keeping the original spelling of the name, or appends a new pair.
    List pairs are updated in place; tuple pairs are swapped for a new
    tuple at the same index.
    """

    def __init__(self, headers: List[Any]) -> None:
        self.headers = headers

    def _index(self, key: str) -> int:
        wanted = key.lower()
        for index, pair in enumerate(self.headers):
            if str(pair[0]).lower() == wanted:
                return index
        return -1

    def get(self, key: str) -> Optional[str]:
        index = self._index(key)
        return self.headers[index][1] if index != -1 else None

    def set(self, key: str, value: str) -> None:
        index = self._index(key)
        if index == -1:
            self.headers.append([key, value])
            return
        pair = self.headers[index]
        if isinstance(pair, list):
            pair[1] = value
        else:
            self.headers[index] = (pair[0], value)


class DictHeaders:
    """Accessor for a plain mapping with arbitrary key casing.

    Read-only mappings can be looked up and sent; ``set`` leaves them
    untouched.
    """

    def __init__(self, headers: Mapping[str, Any]) -> None:
        self.headers = headers

    def _key(self, key: str) -> Optional[str]:
        wanted = key.lower()
        return next((k for k in self.headers if str(k).lower() == wanted), None)

    def get(self, key: str) -> Optional[str]:
        existing = self._key(key)
        return self.headers[existing] if existing is not None else None

    def set(self, key: str, value: str) -> None:
        if not isinstance(self.headers, MutableMapping):
            return
        existing = self._key(key)
        self.headers[existing if existing is not None else key] = value


class NullHeaders:
    """Accessor used for shapes we do not recognise."""

    def __init__(self, headers: Any = None) -> None:
        self.headers = headers

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str) -> None:
        return None


def _is_pair_list(headers: Any) -> bool:
    return isinstance(headers, list) and all(
        isinstance(pair, (list, tuple)) and len(pair) == 2 for pair in headers
    )


def accessor_for(headers: Any) -> HeaderAccessor:
    """Pick the accessor matching the shape of *headers*.

    ``httpx.Headers`` is checked first because it is also a mutable
    mapping and must keep its own case-insensitive semantics.
    """
    if isinstance(headers, httpx.Headers):
        return MapHeaders(headers)
    if _is_pair_list(headers):
        return PairListHeaders(headers)
    if isinstance(headers, Mapping):
        return DictHeaders(headers)
    return NullHeaders(headers)


def get_header(headers: Any, key: str) -> Optional[str]:
    """Return the value of header *key* (any casing) or ``None``."""
    return accessor_for(headers).get(key)


def set_header(headers: Any, key: str, value: str) -> None:
    """Set header *key* (any casing) on *headers* in place."""
    accessor_for(headers).set(key, value)


def to_httpx_headers(headers: Any) -> httpx.Headers:
    """Copy any supported shape into a fresh :class:`httpx.Headers` for sending.

    Duplicate names in a pair list are preserved. Unknown shapes send no
    headers at all.
    """
    if isinstance(headers, httpx.Headers):
        return httpx.Headers(headers)
    if _is_pair_list(headers):
        return httpx.Headers([(str(k), str(v)) for k, v in headers])
    if isinstance(headers, Mapping):
        return httpx.Headers({str(k): str(v) for k, v in headers.items()})
    return httpx.Headers()

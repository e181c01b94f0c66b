"""
core/decoding.py
-----------------

Response body decoding driven by the ``Content-Type`` header.

The policy lives in :data:`CONTENT_TYPE_RULES`, an ordered tuple of
``(substring, strategy)`` pairs. The first substring found in the
header value (case-insensitively, so parameters such as ``charset``
do not matter) selects the strategy; a missing header or a type with
no rule falls back to plain text with a warning. Decoding never fails
because of an unknown type, only because the body itself is broken
(invalid JSON, malformed XML and so on), and those errors propagate.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

import httpx
from lxml import etree
from starlette.datastructures import Headers
from starlette.formparsers import MultiPartParser

from httpwrap.logging_config import logger
from httpwrap.schemas import Blob

TEXT = "text"
JSON = "json"
XML = "xml"
MULTIPART = "multipart"
URLENCODED = "urlencoded"
BLOB = "blob"

CONTENT_TYPE_RULES: Tuple[Tuple[str, str], ...] = (
    ("application/json", JSON),
    # text based formats
    ("text/plain", TEXT),
    ("text/html", TEXT),
    ("text/csv", TEXT),
    ("text/markdown", TEXT),
    ("application/x-yaml", TEXT),
    ("text/yaml", TEXT),
    ("application/xml", XML),
    ("text/xml", XML),
    ("multipart/form-data", MULTIPART),
    ("application/x-www-form-urlencoded", URLENCODED),
    ("application/octet-stream", BLOB),
    # office documents and PDFs
    ("application/pdf", BLOB),
    ("application/rtf", BLOB),
    ("application/msword", BLOB),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", BLOB),
    ("application/vnd.ms-excel", BLOB),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", BLOB),
    ("application/vnd.ms-powerpoint", BLOB),
    ("application/vnd.openxmlformats-officedocument.presentationml.presentation", BLOB),
    # images
    ("image/png", BLOB),
    ("image/jpeg", BLOB),
    ("image/gif", BLOB),
    ("image/webp", BLOB),
    ("image/bmp", BLOB),
    ("image/svg+xml", BLOB),
    # audio
    ("audio/mpeg", BLOB),
    ("audio/wav", BLOB),
    ("audio/ogg", BLOB),
    ("audio/aac", BLOB),
    ("audio/flac", BLOB),
    ("audio/webm", BLOB),
    # video
    ("video/mp4", BLOB),
    ("video/webm", BLOB),
    ("video/ogg", BLOB),
    ("video/avi", BLOB),
    ("video/mpeg", BLOB),
    ("video/quicktime", BLOB),
    # archives
    ("application/zip", BLOB),
    ("application/x-7z-compressed", BLOB),
    ("application/x-rar-compressed", BLOB),
    ("application/x-tar", BLOB),
    ("application/gzip", BLOB),
)

# No DTD entities, no network fetches while parsing untrusted documents.
_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def classify(content_type: str) -> Optional[str]:
    """Return the decode strategy for *content_type*, or ``None`` if unhandled."""
    lowered = content_type.lower()
    for pattern, strategy in CONTENT_TYPE_RULES:
        if pattern in lowered:
            return strategy
    return None


async def decode_text(response: httpx.Response) -> str:
    await response.aread()
    return response.text


async def decode_json(response: httpx.Response) -> Any:
    await response.aread()
    return response.json()


async def decode_xml(response: httpx.Response) -> Any:
    """Parse the body into an :class:`lxml.etree._ElementTree` document."""
    await response.aread()
    return etree.fromstring(response.content, _XML_PARSER).getroottree()


async def decode_multipart(response: httpx.Response) -> Any:
    """Parse a ``multipart/form-data`` body into a starlette ``FormData``.

    File parts come back as ``UploadFile`` objects, text parts as
    strings. The body is already in memory, so the part, file and field
    limits starlette applies to uploads are lifted.
    """
    await response.aread()
    headers = Headers(headers={"content-type": response.headers["content-type"]})
    parser = MultiPartParser(
        headers,
        response.aiter_bytes(),
        max_files=float("inf"),
        max_fields=float("inf"),
        max_part_size=len(response.content),
    )
    return await parser.parse()


async def decode_urlencoded(response: httpx.Response) -> httpx.QueryParams:
    await response.aread()
    return httpx.QueryParams(response.text)


async def decode_blob(response: httpx.Response) -> Blob:
    await response.aread()
    return Blob(data=response.content, type=response.headers.get("content-type", ""))


DECODERS: Dict[str, Callable[[httpx.Response], Awaitable[Any]]] = {
    TEXT: decode_text,
    JSON: decode_json,
    XML: decode_xml,
    MULTIPART: decode_multipart,
    URLENCODED: decode_urlencoded,
    BLOB: decode_blob,
}


async def handle_content_type(response: httpx.Response) -> Any:
    """Decode *response* according to its ``Content-Type`` header.

    Exactly one decoder runs. A missing header or an unknown type is
    logged at WARNING and the body is returned as text.
    """
    content_type = response.headers.get("content-type")
    if not content_type:
        logger.warning("No Content-Type header found in response")
        return await decode_text(response)

    strategy = classify(content_type)
    if strategy is None:
        logger.warning(f"Unhandled content type: {content_type}")
        return await decode_text(response)
    return await DECODERS[strategy](response)

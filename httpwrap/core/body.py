"""
core/body.py
-------------

Request body preparation.

``handle_body`` decides what goes on the wire and ``handle_headers``
adds the JSON content type when the body is about to be serialised.
Bodies that are already wire-ready (text, raw bytes, :class:`Blob`,
multipart :class:`FormData`, URL-encoded :class:`httpx.QueryParams`)
pass through untouched; everything else that is not ``None`` becomes
compact JSON text. GET and HEAD never carry a body.

``request_content`` turns the prepared body into keyword arguments
for :meth:`httpx.AsyncClient.build_request`, filling in the default
content type for text, blobs and URL-encoded forms the way browsers
do.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

import httpx
from pydantic import BaseModel
from starlette.datastructures import FormData, UploadFile

from httpwrap.core.headers import get_header, set_header
from httpwrap.schemas import Blob

BODYLESS_METHODS = {"GET", "HEAD"}

PASS_THROUGH_TYPES = (str, bytes, bytearray, memoryview, Blob, FormData, httpx.QueryParams)

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain;charset=UTF-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"


def is_pass_through(body: Any) -> bool:
    """Return ``True`` when *body* is already in a wire-ready shape."""
    return isinstance(body, PASS_THROUGH_TYPES)


def _to_json(body: Any) -> str:
    if isinstance(body, BaseModel):
        return body.model_dump_json()
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def handle_body(method: str, body: Any) -> Any:
    """Prepare *body* for a *method* request.

    :return: the body unchanged when it is wire-ready, its JSON text
        when it is any other value, or ``None`` when nothing should be
        sent.
    """
    if method.upper() in BODYLESS_METHODS:
        return None
    if is_pass_through(body):
        return body
    if body is not None:
        return _to_json(body)
    return None


def handle_headers(headers: Any, body: Any) -> Any:
    """Default ``Content-Type`` to JSON for bodies that will be serialised.

    A content type already present (in any casing) is never replaced.
    *headers* is modified in place and returned.
    """
    if body is not None and not is_pass_through(body) and not get_header(headers, "Content-Type"):
        set_header(headers, "Content-Type", JSON_CONTENT_TYPE)
    return headers


def _form_parts(form: FormData) -> List[Tuple[str, Any]]:
    # Text fields travel as nameless file parts so httpx always emits
    # multipart, even for forms without uploads.
    parts: List[Tuple[str, Any]] = []
    for name, value in form.multi_items():
        if isinstance(value, UploadFile):
            parts.append((name, (value.filename, value.file, value.content_type)))
        else:
            parts.append((name, (None, value)))
    return parts


def request_content(body: Any, headers: httpx.Headers) -> Dict[str, Any]:
    """Map a prepared body onto ``httpx`` request arguments.

    *headers* is the outgoing :class:`httpx.Headers` and receives the
    default content type when the caller did not choose one.
    """
    if body is None:
        return {}
    if isinstance(body, FormData):
        return {"files": _form_parts(body)}
    if isinstance(body, httpx.QueryParams):
        headers.setdefault("Content-Type", FORM_CONTENT_TYPE)
        return {"content": str(body)}
    if isinstance(body, Blob):
        if body.type:
            headers.setdefault("Content-Type", body.type)
        return {"content": body.data}
    if isinstance(body, str):
        headers.setdefault("Content-Type", TEXT_CONTENT_TYPE)
        return {"content": body}
    return {"content": bytes(body)}

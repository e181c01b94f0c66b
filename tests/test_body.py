import json

import httpx
import pytest
from pydantic import BaseModel
from starlette.datastructures import FormData

from httpwrap import Blob
from httpwrap.core.body import (
    FORM_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
    handle_body,
    handle_headers,
    is_pass_through,
    request_content,
)


class Item(BaseModel):
    name: str
    qty: int


PASS_THROUGH = [
    "raw",
    b"\x00\x01",
    bytearray(b"abc"),
    memoryview(b"abc"),
    Blob(data=b"png", type="image/png"),
    FormData([("a", "1")]),
    httpx.QueryParams({"a": "1"}),
]


@pytest.mark.parametrize("method", ["GET", "HEAD", "get", "head"])
@pytest.mark.parametrize("body", [{"a": 1}, "raw", b"bytes", [1, 2], 0, None])
def test_bodyless_methods_never_send_a_body(method, body):
    assert handle_body(method, body) is None


def test_objects_become_compact_json():
    assert handle_body("POST", {"a": 1}) == '{"a":1}'
    assert handle_body("PUT", [1, "two", None]) == '[1,"two",null]'
    assert handle_body("PATCH", 0) == "0"
    assert handle_body("POST", Item(name="spoon", qty=2)) == '{"name":"spoon","qty":2}'


@pytest.mark.parametrize("body", PASS_THROUGH, ids=lambda b: type(b).__name__)
def test_wire_ready_bodies_pass_through(body):
    assert is_pass_through(body)
    assert handle_body("POST", body) is body


def test_absent_body():
    assert handle_body("POST", None) is None
    assert handle_body("DELETE", None) is None


def test_json_body_gets_json_content_type():
    headers = {}
    assert handle_headers(headers, {"a": 1}) is headers
    assert headers == {"Content-Type": "application/json"}


def test_existing_content_type_is_kept():
    headers = {"content-type": "text/plain"}
    handle_headers(headers, {"a": 1})
    assert headers == {"content-type": "text/plain"}


@pytest.mark.parametrize("body", PASS_THROUGH + [None], ids=lambda b: type(b).__name__)
def test_no_content_type_for_wire_ready_or_absent_bodies(body):
    headers = [["Accept", "*/*"]]
    handle_headers(headers, body)
    assert headers == [["Accept", "*/*"]]


def test_handle_headers_on_httpx_headers():
    headers = httpx.Headers()
    handle_headers(headers, {"a": 1})
    assert headers["content-type"] == "application/json"


def test_request_content_defaults():
    headers = httpx.Headers()
    assert request_content("hi", headers) == {"content": "hi"}
    assert headers["content-type"] == TEXT_CONTENT_TYPE

    headers = httpx.Headers()
    assert request_content(httpx.QueryParams({"a": "1", "b": "x y"}), headers) == {"content": "a=1&b=x+y"}
    assert headers["content-type"] == FORM_CONTENT_TYPE

    headers = httpx.Headers()
    assert request_content(Blob(data=b"\x89PNG", type="image/png"), headers) == {"content": b"\x89PNG"}
    assert headers["content-type"] == "image/png"

    headers = httpx.Headers()
    assert request_content(bytearray(b"ab"), headers) == {"content": b"ab"}
    assert "content-type" not in headers

    assert request_content(None, httpx.Headers()) == {}


def test_request_content_respects_caller_content_type():
    headers = httpx.Headers({"Content-Type": "application/json"})
    request_content('{"a":1}', headers)
    assert headers["content-type"] == "application/json"


def test_request_content_form_data_goes_multipart():
    content = request_content(FormData([("a", "1"), ("b", "2")]), httpx.Headers())
    assert content == {"files": [("a", (None, "1")), ("b", (None, "2"))]}


@pytest.mark.parametrize("body", [0, False, [], {}], ids=repr)
def test_falsy_json_bodies_still_get_json_content_type(body):
    headers = {}
    handle_headers(headers, body)
    assert headers == {"Content-Type": "application/json"}
    assert handle_body("POST", body) == json.dumps(body)


def test_non_ascii_json_is_not_escaped():
    assert handle_body("POST", {"name": "café"}) == '{"name":"café"}'

"""
core/status.py
---------------

Human-readable classification of HTTP status codes.

:data:`STATUS_CODES` is a read-only mapping from status code to a
:class:`StatusInfo` carrying the log level (``info``, ``warn`` or
``error``) and a one-line description. ``handle_status_code`` logs a
response against it. Codes missing from the table are logged at
WARNING with the server's own reason phrase. Logging is the only
effect; nothing here raises.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

import httpx

from httpwrap.logging_config import logger


class StatusInfo(NamedTuple):
    level: str
    message: str


LEVELS = {"info": logging.INFO, "warn": logging.WARNING, "error": logging.ERROR}

STATUS_CODES: Mapping[int, StatusInfo] = MappingProxyType({
    # 1xx Informational
    100: StatusInfo("info", "Continue: The client should continue with its request."),
    101: StatusInfo("info", "Switching Protocols: The server is switching protocols."),
    102: StatusInfo("info", "Processing: The server is processing the request, but no response is available yet."),
    103: StatusInfo("info", "Early Hints: The server is sending some response headers before the final response."),
    # 2xx Success
    200: StatusInfo("info", "OK: The request has succeeded."),
    201: StatusInfo("info", "Created: The request has been fulfilled and resulted in a new resource being created."),
    202: StatusInfo("info", "Accepted: The request has been accepted for processing, but the processing has not been completed."),
    203: StatusInfo("info", "Non-Authoritative Information: The server is returning information that is not from its origin."),
    204: StatusInfo("info", "No Content: The server successfully processed the request, but is not returning any content."),
    205: StatusInfo("info", "Reset Content: The server successfully processed the request, but requires the client to reset the document view."),
    206: StatusInfo("info", "Partial Content: The server is delivering only part of the resource due to a range header sent by the client."),
    207: StatusInfo("info", "Multi-Status: The message body contains multiple status codes for different operations."),
    208: StatusInfo("info", "Already Reported: The members of a DAV binding have already been enumerated."),
    226: StatusInfo("info", "IM Used: The server has fulfilled the request and the response is a representation of the result of one or more instance-manipulations applied to the current instance."),
    # 3xx Redirection
    300: StatusInfo("warn", "Multiple Choices: The request has more than one possible response. User-agent or user should choose one of them."),
    301: StatusInfo("warn", "Moved Permanently: The URL of the requested resource has been changed permanently."),
    302: StatusInfo("warn", "Found: The requested resource has been temporarily moved to a different URI."),
    303: StatusInfo("warn", "See Other: The server is redirecting to a different URI."),
    304: StatusInfo("info", "Not Modified: The resource has not been modified since the last request."),
    305: StatusInfo("warn", "Use Proxy: The requested resource is available only through a proxy."),
    307: StatusInfo("warn", "Temporary Redirect: The server is redirecting to a different URI, but the request method should not be changed."),
    308: StatusInfo("warn", "Permanent Redirect: The server is redirecting to a different URI, and the request method should not be changed."),
    # 4xx Client Error
    400: StatusInfo("error", "Bad Request: The server could not understand the request due to invalid syntax."),
    401: StatusInfo("error", "Unauthorized: The client must authenticate itself to get the requested response."),
    402: StatusInfo("error", "Payment Required: Reserved for future use."),
    403: StatusInfo("error", "Forbidden: The client does not have access rights to the content."),
    404: StatusInfo("error", "Not Found: The server cannot find the requested resource."),
    405: StatusInfo("error", "Method Not Allowed: The request method is known by the server but has been disabled and cannot be used."),
    406: StatusInfo("error", "Not Acceptable: The server cannot produce a response matching the list of acceptable values defined in the request's proactive content negotiation headers."),
    407: StatusInfo("error", "Proxy Authentication Required: The client must first authenticate itself with the proxy."),
    408: StatusInfo("error", "Request Timeout: The server would like to shut down this unused connection."),
    409: StatusInfo("error", "Conflict: The request could not be processed because of conflict in the request, such as an edit conflict between multiple simultaneous updates."),
    410: StatusInfo("error", "Gone: The requested resource is no longer available at the server and no forwarding address is known."),
    411: StatusInfo("error", "Length Required: The server refuses to accept the request without a defined Content-Length."),
    412: StatusInfo("error", "Precondition Failed: The server does not meet one of the preconditions that the requester put on the request."),
    413: StatusInfo("error", "Payload Too Large: The request is larger than the server is willing or able to process."),
    414: StatusInfo("error", "URI Too Long: The URI requested by the client is longer than the server is willing to interpret."),
    415: StatusInfo("error", "Unsupported Media Type: The media format of the requested data is not supported by the server."),
    416: StatusInfo("error", "Range Not Satisfiable: The range specified by the Range header field in the request cannot be fulfilled."),
    417: StatusInfo("error", "Expectation Failed: The server cannot meet the requirements of the Expect header field."),
    418: StatusInfo("error", "I'm a teapot: The server refuses the attempt to brew coffee with a teapot."),
    421: StatusInfo("error", "Misdirected Request: The request was directed at a server that is not able to produce a response."),
    422: StatusInfo("error", "Unprocessable Entity: The request was well-formed but was unable to be followed due to semantic errors."),
    423: StatusInfo("error", "Locked: The resource that is being accessed is locked."),
    424: StatusInfo("error", "Failed Dependency: The request failed due to failure of a previous request."),
    425: StatusInfo("error", "Too Early: Indicates that the server is unwilling to risk processing a request that might be replayed."),
    426: StatusInfo("error", "Upgrade Required: The server refuses to perform the request using the current protocol but might be willing to do so after the client upgrades to a different protocol."),
    428: StatusInfo("error", "Precondition Required: The origin server requires the request to be conditional."),
    429: StatusInfo("error", "Too Many Requests: The user has sent too many requests in a given amount of time."),
    431: StatusInfo("error", "Request Header Fields Too Large: The server is unwilling to process the request because its header fields are too large."),
    451: StatusInfo("error", "Unavailable For Legal Reasons: The user requested a resource that cannot be legally provided, such as a web page censored by a government."),
    # 5xx Server Error
    500: StatusInfo("error", "Internal Server Error: The server has encountered a situation it doesn't know how to handle."),
    501: StatusInfo("error", "Not Implemented: The request method is not supported by the server and cannot be handled."),
    502: StatusInfo("error", "Bad Gateway: The server, while acting as a gateway or proxy, received an invalid response from the upstream server."),
    503: StatusInfo("error", "Service Unavailable: The server is not ready to handle the request."),
    504: StatusInfo("error", "Gateway Timeout: The server, while acting as a gateway or proxy, did not get a response in time from the upstream server."),
    505: StatusInfo("error", "HTTP Version Not Supported: The HTTP version used in the request is not supported by the server."),
    506: StatusInfo("error", "Variant Also Negotiates: The server has an internal configuration error."),
    507: StatusInfo("error", "Insufficient Storage: The server is unable to store the representation needed to complete the request."),
    508: StatusInfo("error", "Loop Detected: The server detected an infinite loop while processing the request."),
    510: StatusInfo("error", "Not Extended: Further extensions to the request are required for the server to fulfill it."),
    511: StatusInfo("error", "Network Authentication Required: The client needs to authenticate to gain network access."),
})


def resource_url(response: httpx.Response) -> str:
    """Return the URL the response came from, or an empty string if unknown."""
    try:
        return str(response.url)
    except RuntimeError:
        # response built without a request
        return ""


def describe_status(status: int) -> Optional[StatusInfo]:
    return STATUS_CODES.get(status)


async def handle_status_code(response: httpx.Response) -> None:
    """Log *response*'s status at the level the table assigns to it."""
    status = response.status_code
    url = resource_url(response)
    info = describe_status(status)
    if info is not None:
        logger.log(LEVELS[info.level], f"{status} {info.message} Resource: {url}")
    else:
        logger.warning(f"Unhandled status code: {status} - {response.reason_phrase}. Resource: {url}")

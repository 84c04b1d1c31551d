from __future__ import annotations

import logging
import re

import httpx

from ._config import ClientSettings, build_client
from ._exceptions import InvalidMethod
from ._formatter import describe_error, format_error, format_response
from ._models import Invocation, ResultEnvelope

logger = logging.getLogger("httpenvelope.transport")

# RFC 7230 section 3.2.6 "token".
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

_SUPPORTED_SCHEMES = ("http", "https")

# ValueError covers InvalidMethod and header values that cannot be encoded.
REQUEST_CONSTRUCTION_ERRORS = (
    httpx.InvalidURL,
    httpx.UnsupportedProtocol,
    ValueError,
)


def build_request(client: httpx.Client, invocation: Invocation) -> httpx.Request:
    """Build the request for ``invocation`` without sending it.

    Raises :class:`InvalidMethod`, :class:`httpx.InvalidURL` or
    :class:`httpx.UnsupportedProtocol` when no valid request can be formed.
    """
    method = invocation.method or "GET"
    if not _METHOD_TOKEN.fullmatch(method):
        raise InvalidMethod(method)

    request = client.build_request(
        method,
        invocation.url,
        headers=invocation.headers,
        content=invocation.body.encode("utf-8", "surrogateescape"),
    )

    scheme = request.url.scheme
    if not scheme:
        raise httpx.UnsupportedProtocol(
            "Request URL is missing an 'http://' or 'https://' protocol.",
            request=request,
        )
    if scheme not in _SUPPORTED_SCHEMES:
        raise httpx.UnsupportedProtocol(
            f"Request URL has an unsupported protocol '{scheme}://'.",
            request=request,
        )
    return request


def exchange(client: httpx.Client, invocation: Invocation) -> ResultEnvelope:
    """Send one request over ``client`` and capture the response or the failure."""
    try:
        request = build_request(client, invocation)
    except REQUEST_CONSTRUCTION_ERRORS as exc:
        logger.debug("Could not build request: %s", describe_error(exc))
        return format_error(exc)

    logger.debug("%s %s", request.method, request.url)
    try:
        response = client.send(request)
    except httpx.HTTPError as exc:
        logger.debug("Request failed: %s", describe_error(exc))
        return format_error(exc)

    logger.debug(
        "Received %d %s (%d bytes)",
        response.status_code,
        response.reason_phrase,
        len(response.content),
    )
    return format_response(response)


def send(
    invocation: Invocation,
    settings: ClientSettings | None = None,
    client: httpx.Client | None = None,
) -> ResultEnvelope:
    """Perform ``invocation`` and return its :class:`ResultEnvelope`.

    A client passed in by the caller is left open; otherwise a client is
    built from ``settings`` and closed before returning.
    """
    if client is not None:
        return exchange(client, invocation)

    with build_client(settings) as owned_client:
        return exchange(owned_client, invocation)

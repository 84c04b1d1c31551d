from __future__ import annotations

import json
import logging
import typing

from ._exceptions import UsageError
from ._models import Invocation

logger = logging.getLogger("httpenvelope.builder")


def decode_headers(text: str) -> dict[str, str]:
    """Decode the ``headers_json`` argument into a name -> value mapping.

    Decoding never fails: malformed JSON, ``null`` or any non-object value
    give an empty mapping, and entries whose value is not a string are
    dropped while the remaining ones are kept.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        logger.debug("Ignoring malformed headers JSON: %r", text)
        return {}

    if not isinstance(data, dict):
        logger.debug("Ignoring headers JSON that is not an object: %r", text)
        return {}

    headers: dict[str, str] = {}
    for name, value in data.items():
        if isinstance(value, str):
            headers[name] = value
        else:
            logger.debug("Dropping header %r with non-string value %r", name, value)
    return headers


def parse_invocation(argv: typing.Sequence[str]) -> Invocation:
    """Turn ``<method> <url> [headers_json] [body]`` into an :class:`Invocation`.

    Raises :class:`UsageError` when method or URL is missing.
    """
    if len(argv) < 2:
        raise UsageError()

    method, url = argv[0], argv[1]
    headers_json = argv[2] if len(argv) > 2 else "{}"
    body = argv[3] if len(argv) > 3 else ""

    if len(argv) > 4:
        logger.debug("Ignoring %d extra argument(s)", len(argv) - 4)

    return Invocation(
        method=method.upper(),
        url=url,
        headers=decode_headers(headers_json),
        body=body,
    )

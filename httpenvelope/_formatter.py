from __future__ import annotations

import httpx

from ._models import ResultEnvelope


def canonical_header_name(name: str) -> str:
    """Return ``name`` in canonical form, e.g. ``content-type`` -> ``Content-Type``."""
    return "-".join(part.capitalize() for part in name.split("-"))


def group_headers(headers: httpx.Headers) -> dict[str, list[str]]:
    """Group header values by canonical name.

    Names are sorted; values keep their arrival order.
    """
    grouped: dict[str, list[str]] = {}
    for name, value in headers.multi_items():
        grouped.setdefault(canonical_header_name(name), []).append(value)
    return dict(sorted(grouped.items()))


def format_response(response: httpx.Response) -> ResultEnvelope:
    # The raw payload is reported regardless of any declared charset.
    body = response.content.decode("utf-8", errors="replace")
    return ResultEnvelope.success(
        status=response.status_code,
        headers=group_headers(response.headers),
        body=body,
    )


def describe_error(exc: BaseException) -> str:
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"


def format_error(exc: BaseException) -> ResultEnvelope:
    return ResultEnvelope.failure(describe_error(exc))

from __future__ import annotations

USAGE = "Usage: http_client <method> <url> [headers_json] [body]"


class EnvelopeError(Exception):
    """Base class for errors raised by httpenvelope itself."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(EnvelopeError):
    """Too few command-line arguments were supplied."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


class InvalidMethod(EnvelopeError, ValueError):
    """The HTTP method is not a valid RFC 7230 token."""

    def __init__(self, method: str) -> None:
        super().__init__(f"invalid method {method!r}")
        self.method = method

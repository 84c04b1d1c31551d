# ruff: noqa: I001
from .__version__ import __description__, __title__, __version__
from ._builder import decode_headers, parse_invocation
from ._config import DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT, ClientSettings, build_client
from ._exceptions import USAGE, EnvelopeError, InvalidMethod, UsageError
from ._formatter import canonical_header_name, format_error, format_response
from ._models import Invocation, ResultEnvelope
from ._transport import build_request, send
from .cli import main, run

_EXCLUDED_FROM_ALL = {"cli", "main"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)

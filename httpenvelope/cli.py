from __future__ import annotations

import contextlib
import logging
import sys
import typing

import click
import httpx
from rich.console import Console
from rich.logging import RichHandler

from .__version__ import __version__
from ._builder import parse_invocation
from ._config import ClientSettings
from ._exceptions import UsageError
from ._models import ResultEnvelope
from ._transport import send

# ---------------------------------------------------------------------------
# Diagnostics (stderr only, never mixed into the JSON on stdout)
# ---------------------------------------------------------------------------


@contextlib.contextmanager
def log_to_stderr(enabled: bool) -> typing.Iterator[None]:
    """Attach a rich stderr handler to the package logger for the block."""
    if not enabled:
        yield
        return

    logger = logging.getLogger("httpenvelope")
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def run(
    argv: typing.Sequence[str],
    settings: ClientSettings | None = None,
    client: httpx.Client | None = None,
) -> ResultEnvelope:
    """Parse ``argv``, send the request and return the envelope to print."""
    try:
        invocation = parse_invocation(argv)
    except UsageError as exc:
        return ResultEnvelope.failure(exc.message)
    return send(invocation, settings=settings, client=client)


# ---------------------------------------------------------------------------
# CLI command
# ---------------------------------------------------------------------------


@click.command(
    help=(
        "Send one HTTP request and print status, headers and body as JSON.\n\n"
        "Errors are reported in the JSON 'error' field; the exit status is 0 "
        "unless --fail is given."
    ),
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.argument("method", required=False)
@click.argument("url", required=False)
@click.argument("headers_json", required=False)
@click.argument("body", required=False)
@click.argument("extra", nargs=-1)
@click.option(
    "--fail",
    is_flag=True,
    default=False,
    help="Exit with status 1 when the result carries an error.",
)
@click.option(
    "--verbose", is_flag=True, default=False, help="Log diagnostics to stderr."
)
@click.version_option(__version__, prog_name="http_client")
def main(
    method: str | None,
    url: str | None,
    headers_json: str | None,
    body: str | None,
    extra: tuple[str, ...],
    fail: bool,
    verbose: bool,
) -> None:
    argv = [arg for arg in (method, url, headers_json, body) if arg is not None]
    argv.extend(extra)

    with log_to_stderr(verbose):
        envelope = run(argv)

    click.echo(envelope.to_json())

    if fail and not envelope.ok:
        sys.exit(1)

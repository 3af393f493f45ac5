import asyncio
from typing import Optional

import click
from httpx import TransportError

from .._genapi import GenApi
from .._utils.constants import BODYLESS_METHODS, HEADER_ACCEPT
from ..models.errors import BaseUrlMissingError, CredentialsMissingError
from ..models.exceptions import ApiClientError
from ._utils._common import load_body, parse_pairs
from ._utils._console import ConsoleLogger

console = ConsoleLogger()

_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]
_ACCEPT = ["application/json", "application/xml", "text/plain", "text/html"]


@click.command()
@click.argument("endpoint")
@click.option(
    "-X",
    "--method",
    type=click.Choice(_METHODS, case_sensitive=False),
    default="GET",
    show_default=True,
    help="HTTP method",
)
@click.option(
    "--accept",
    type=click.Choice(_ACCEPT),
    default="application/json",
    show_default=True,
    help="Accept header (client defaults take precedence)",
)
@click.option("-q", "--query", multiple=True, help="Query parameter as key=value")
@click.option("-H", "--header", multiple=True, help="Extra header as Name: value")
@click.option("-d", "--data", default=None, help="JSON request body")
@click.option(
    "-f",
    "--file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File containing the JSON request body",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def request(
    endpoint: str,
    method: str,
    accept: str,
    query: tuple[str, ...],
    header: tuple[str, ...],
    data: Optional[str],
    file: Optional[str],
    debug: bool,
) -> None:
    """Send a request to ENDPOINT using the GENAPI_* configuration."""

    params = parse_pairs(query, "--query")
    headers = parse_pairs(header, "--header", separators=(":", "="))
    body = load_body(data, file)

    try:
        sdk = GenApi(debug=debug)
    except (BaseUrlMissingError, CredentialsMissingError) as e:
        console.error(e.message)
        return

    console.config(f"Auth scheme: {sdk.config.auth.kind}")
    if body is not None and method.upper() in BODYLESS_METHODS:
        console.warning(f"{method.upper()} requests never carry a body; ignoring it.")
    if HEADER_ACCEPT.lower() in (key.lower() for key in headers):
        console.hint("--header Accept overrides --accept")

    async def _send():
        async with sdk.api_client as client:
            return await client.request_async(
                endpoint,
                method=method.upper(),  # type: ignore[arg-type]
                accept=accept,  # type: ignore[arg-type]
                body=body,
                query=params,
                extra_headers=headers,
            )

    try:
        with console.spinner(f"{method.upper()} {endpoint} ..."):
            result = asyncio.run(_send())
    except ApiClientError as e:
        console.error(str(e))
        return
    except TransportError as e:
        console.error(f"Network error: {e}")
        return

    console.result(result)

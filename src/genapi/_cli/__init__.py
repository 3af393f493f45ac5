import importlib.metadata

import click

from .cli_request import request as request  # type: ignore


def _get_safe_version() -> str:
    """Get the version of the genapi-client package."""
    try:
        version = importlib.metadata.version("genapi-client")
        return version
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


@click.group()
@click.version_option(
    _get_safe_version(),
    prog_name="genapi",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Generic HTTP API client."""


cli.add_command(request)

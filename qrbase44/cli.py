"""Command-line interface for qrbase44 using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click
from qrbase44 import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """qrbase44: URL- and QR-safe encoding of binary data."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from qrbase44.commands.encode import encode  # noqa: E402
from qrbase44.commands.decode import decode  # noqa: E402
from qrbase44.commands.length import length  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(length)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()

"""CLI command encoding bytes into qrbase44 symbols.

Bytes are given as a hex string or read raw from a file. Without ``--bits``
the byte-pair scheme is used; with ``--bits N`` the input is encoded
bit-optimally as an N-bit value.

Examples
--------
  qrbase44 encode 48656c6c6f
  qrbase44 encode --bits 128 --input uuid.bin
  qrbase44 encode --variant 43 ff
"""

from __future__ import annotations

from pathlib import Path

import click

from qrbase44.codec import get_codec
from qrbase44.config import Config, SUPPORTED_VARIANTS
from qrbase44.errors import QRBaseError


@click.command(name="encode")
@click.argument("hex_data", required=False)
@click.option(
    "input_path",
    "--input",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
    help="Read raw bytes from this file instead of HEX_DATA",
)
@click.option(
    "bits",
    "--bits",
    type=click.IntRange(min=0),
    required=False,
    help="Encode bit-optimally as a value of exactly this many bits",
)
@click.option(
    "variant",
    "--variant",
    type=click.Choice(SUPPORTED_VARIANTS),
    default=Config.DEFAULT_VARIANT,
    show_default=True,
    help="Alphabet variant",
)
def encode(hex_data: str | None, input_path: Path | None, bits: int | None, variant: str) -> None:
    """Encode HEX_DATA (or --input) and print the symbol string."""

    if (hex_data is None) == (input_path is None):
        raise click.UsageError("Provide exactly one of HEX_DATA or --input.")

    if input_path is not None:
        data = input_path.read_bytes()
    else:
        try:
            data = bytes.fromhex(hex_data)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="HEX_DATA") from exc

    codec = get_codec(variant)
    try:
        text = codec.encode(data) if bits is None else codec.encode_bits(bits, data)
    except QRBaseError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(text)

"""CLI command decoding qrbase44 symbols back into bytes.

Examples
--------
  qrbase44 decode L1
  qrbase44 decode --bits 8 1L
  qrbase44 decode --bits 128 --output uuid.bin 000000000000000000000000
"""

from __future__ import annotations

from pathlib import Path

import click

from qrbase44.codec import get_codec
from qrbase44.config import Config, SUPPORTED_VARIANTS
from qrbase44.errors import QRBaseError


@click.command(name="decode")
@click.argument("symbols")
@click.option(
    "bits",
    "--bits",
    type=click.IntRange(min=0),
    required=False,
    help="Decode a bit-optimal string holding exactly this many bits",
)
@click.option(
    "variant",
    "--variant",
    type=click.Choice(SUPPORTED_VARIANTS),
    default=Config.DEFAULT_VARIANT,
    show_default=True,
    help="Alphabet variant",
)
@click.option(
    "output",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Write raw bytes to this file instead of printing hex",
)
def decode(symbols: str, bits: int | None, variant: str, output: Path | None) -> None:
    """Decode SYMBOLS and print the bytes as hex."""

    codec = get_codec(variant)
    try:
        data = codec.decode(symbols) if bits is None else codec.decode_bits(bits, symbols)
    except QRBaseError as exc:
        raise click.ClickException(str(exc)) from exc

    if output is None:
        click.echo(data.hex())
        return
    output.write_bytes(data)
    click.echo(f"Wrote {len(data)} bytes: {output}")

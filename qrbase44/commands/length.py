"""CLI command comparing encoded lengths of both schemes for a bit length."""

from __future__ import annotations

import click

from qrbase44.bits import byte_length
from qrbase44.codec import get_codec
from qrbase44.config import Config, SUPPORTED_VARIANTS


@click.command(name="length")
@click.option(
    "bits",
    "--bits",
    type=click.IntRange(min=0),
    required=True,
    help="Bit length of the value to encode",
)
@click.option(
    "variant",
    "--variant",
    type=click.Choice(SUPPORTED_VARIANTS),
    default=Config.DEFAULT_VARIANT,
    show_default=True,
    help="Alphabet variant",
)
def length(bits: int, variant: str) -> None:
    """Print symbol counts of bit-optimal and byte-pair encoding."""

    codec = get_codec(variant)
    n_bytes = byte_length(bits)
    click.echo(f"Alphabet: {codec.alphabet.name} (R={codec.radix})")
    click.echo(f"Bits: {bits} ({n_bytes} bytes)")
    click.echo(f"encode_bits: {codec.encoded_length(bits)} symbols")
    click.echo(f"encode: {codec.pair_encoded_length(n_bytes)} symbols")

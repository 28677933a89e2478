"""Codec facade binding an alphabet variant to both encoding schemes.

`Codec` is constructed once with an alphabet and then offers the byte-pair
scheme (`encode` / `decode`) and the bit-optimal scheme (`encode_bits` /
`decode_bits`). The module-level functions use the default variant from
`Config`.

Examples
--------
>>> codec = get_codec("43")
>>> codec.encode(b"\\xff")
'.5'
>>> codec.encoded_length(256)
48
>>> encoded_length(256)
47
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from qrbase44 import bits as _bits
from qrbase44 import pair as _pair
from qrbase44.alphabet import Alphabet, BASE44_ALPHABET, get_alphabet
from qrbase44.backends import RadixBackend
from qrbase44.config import get_config
from qrbase44.threshold import bit_capacity, digit_count


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Codec:
    """Encoder/decoder over one fixed alphabet.

    Parameters
    ----------
    alphabet:
        Symbol set used as digits; defaults to the 44-symbol alphabet.
    """

    alphabet: Alphabet = BASE44_ALPHABET

    @property
    def radix(self) -> int:
        return self.alphabet.size

    # Byte-pair scheme --------------------------------------------------------
    def encode(self, data: bytes) -> str:
        """Encode ``data`` two bytes at a time (2 bytes -> 3 symbols)."""

        return _pair.encode_pairs(memoryview(data).tobytes(), self.alphabet)

    def decode(self, text: str) -> bytes:
        """Inverse of `encode`."""

        return _pair.decode_pairs(text, self.alphabet)

    # Bit-optimal scheme ------------------------------------------------------
    def encode_bits(
        self, bit_length: int, data: bytes, *, backend: RadixBackend | str | None = None
    ) -> str:
        """Encode a ``bit_length``-bit buffer in the minimal number of symbols."""

        return _bits.encode_bits(bit_length, data, self.alphabet, backend)

    def decode_bits(
        self, bit_length: int, text: str, *, backend: RadixBackend | str | None = None
    ) -> bytes:
        """Inverse of `encode_bits` for the same ``bit_length``."""

        return _bits.decode_bits(bit_length, text, self.alphabet, backend)

    # Sizing ------------------------------------------------------------------
    def encoded_length(self, bit_length: int) -> int:
        """Symbols produced by `encode_bits` for ``bit_length`` bits."""

        return digit_count(bit_length, self.radix)

    def bit_capacity(self, symbols: int) -> int:
        """Largest bit length that `encode_bits` fits in ``symbols`` symbols."""

        return bit_capacity(symbols, self.radix)

    def pair_encoded_length(self, byte_count: int) -> int:
        """Symbols produced by `encode` for ``byte_count`` bytes."""

        return _pair.pair_encoded_length(byte_count)


def get_codec(variant: str | int | None = None) -> Codec:
    """Return the codec for ``variant`` ("44" or "43"; default from `Config`)."""

    if variant is None:
        variant = get_config().DEFAULT_VARIANT
    alphabet = get_alphabet(variant)
    _LOGGER.debug("variant %s -> codec over %s (R=%d)", variant, alphabet.name, alphabet.size)
    return Codec(alphabet)


def encode(data: bytes) -> str:
    """Byte-pair encode ``data`` with the default alphabet."""

    return get_codec().encode(data)


def decode(text: str) -> bytes:
    """Byte-pair decode ``text`` with the default alphabet."""

    return get_codec().decode(text)


def encode_bits(bit_length: int, data: bytes) -> str:
    """Bit-optimal encode with the default alphabet."""

    return get_codec().encode_bits(bit_length, data)


def decode_bits(bit_length: int, text: str) -> bytes:
    """Bit-optimal decode with the default alphabet."""

    return get_codec().decode_bits(bit_length, text)


def encoded_length(bit_length: int) -> int:
    """`digit_count` for the default alphabet."""

    return get_codec().encoded_length(bit_length)

"""
qrbase44: URL- and QR-safe encoding of binary data.

Encodes bytes into the 44-symbol (or 43-symbol) subset of the QR alphanumeric
character set, either two bytes at a time or bit-optimally for a declared bit
length, and decodes them back losslessly.
"""

__all__ = [
    "Alphabet",
    "BASE44_ALPHABET",
    "BASE43_ALPHABET",
    "get_alphabet",
    "Config",
    "DEFAULT_VARIANT",
    "get_config",
    "__version__",
    # Errors
    "QRBaseError",
    "InvalidCharacterError",
    "DanglingGroupError",
    "LengthMismatchError",
    "ValueOverflowError",
    "InvalidBitPaddingError",
    # Sizing
    "digit_count",
    "bit_capacity",
    # Codec (lazy-imported via __getattr__)
    "Codec",
    "get_codec",
    "encode",
    "decode",
    "encode_bits",
    "decode_bits",
    "encoded_length",
]

__version__ = "0.1.0"

from typing import Any

from qrbase44.alphabet import Alphabet, BASE44_ALPHABET, BASE43_ALPHABET, get_alphabet
from qrbase44.config import Config, DEFAULT_VARIANT, get_config
from qrbase44.errors import (
    QRBaseError,
    InvalidCharacterError,
    DanglingGroupError,
    LengthMismatchError,
    ValueOverflowError,
    InvalidBitPaddingError,
)
from qrbase44.threshold import digit_count, bit_capacity


_CODEC_EXPORTS = {
    "Codec",
    "get_codec",
    "encode",
    "decode",
    "encode_bits",
    "decode_bits",
    "encoded_length",
}


def __getattr__(name: str) -> Any:  # lazy attribute access so numpy loads on first codec use
    if name in _CODEC_EXPORTS:
        from qrbase44 import codec as _codec

        return getattr(_codec, name)
    raise AttributeError(f"module 'qrbase44' has no attribute {name!r}")

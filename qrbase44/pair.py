"""Byte-pair codec: 2 bytes -> 3 symbols, a trailing byte -> 2 symbols.

Each pair ``(b0, b1)`` forms ``v = b0 * 256 + b1`` and is written as three
digits, least significant first: ``v = c0 + c1 * R + c2 * R**2``. A final
single byte is written as two digits in the same order. This is the layout
of RFC 9285 (Base45) applied to a 44- or 43-symbol alphabet.

Examples
--------
>>> from qrbase44.alphabet import BASE43_ALPHABET
>>> encode_pairs(b"A", BASE43_ALPHABET)
'M1'
>>> decode_pairs("3JZ", BASE43_ALPHABET)
b'\\xff\\xff'
"""

from __future__ import annotations

from qrbase44.alphabet import Alphabet
from qrbase44.errors import DanglingGroupError, ValueOverflowError


_PAIR_LIMIT = 1 << 16
_BYTE_LIMIT = 1 << 8


def _check_radix(alphabet: Alphabet) -> int:
    radix = alphabet.size
    if radix**3 < _PAIR_LIMIT or radix**2 < _BYTE_LIMIT:
        raise ValueError(
            f"Alphabet {alphabet.name} (R={radix}) is too small for byte-pair coding; need R >= 41."
        )
    return radix


def pair_encoded_length(byte_count: int) -> int:
    """Return the number of symbols `encode_pairs` emits for ``byte_count`` bytes."""

    if byte_count < 0:
        raise ValueError("byte_count must be non-negative.")
    pairs, tail = divmod(byte_count, 2)
    return 3 * pairs + 2 * tail


def pair_decoded_length(symbol_count: int) -> int:
    """Return the number of bytes a byte-pair string of ``symbol_count`` symbols holds.

    Raises `DanglingGroupError` when the count is not a sequence of complete
    3-groups optionally followed by one 2-group.
    """

    if symbol_count < 0:
        raise ValueError("symbol_count must be non-negative.")
    groups, rest = divmod(symbol_count, 3)
    if rest == 1:
        raise DanglingGroupError(symbol_count)
    return 2 * groups + (1 if rest == 2 else 0)


def encode_pairs(data: bytes, alphabet: Alphabet) -> str:
    """Encode ``data`` with the byte-pair scheme. Total: never fails."""

    radix = _check_radix(alphabet)
    symbols = alphabet.symbols
    out: list[str] = []
    end = len(data) - len(data) % 2
    for i in range(0, end, 2):
        value = data[i] * 256 + data[i + 1]
        value, c0 = divmod(value, radix)
        c2, c1 = divmod(value, radix)
        out.append(symbols[c0] + symbols[c1] + symbols[c2])
    if end < len(data):
        c1, c0 = divmod(data[end], radix)
        out.append(symbols[c0] + symbols[c1])
    return "".join(out)


def decode_pairs(text: str, alphabet: Alphabet) -> bytes:
    """Decode a byte-pair string back to bytes.

    Groups are processed left to right, so the first problem in reading
    order is the one reported.

    Raises
    ------
    InvalidCharacterError
        A symbol is not in ``alphabet``; reports its position.
    ValueOverflowError
        A 3-group encodes a value >= 65536 or a 2-group a value >= 256.
    DanglingGroupError
        A single symbol remains after the complete groups.
    """

    radix = _check_radix(alphabet)
    digit_of = alphabet.digit_of
    n = len(text)
    out = bytearray()
    i = 0
    while i + 2 < n:
        value = (
            digit_of(text[i], i)
            + digit_of(text[i + 1], i + 1) * radix
            + digit_of(text[i + 2], i + 2) * radix * radix
        )
        if value >= _PAIR_LIMIT:
            raise ValueOverflowError(f"a 2-byte group (3 symbols at position {i})")
        out += value.to_bytes(2, "big")
        i += 3
    if i < n:
        if i + 1 == n:
            # An invalid lone symbol is reported as such before the grouping error.
            digit_of(text[i], i)
            raise DanglingGroupError(n)
        value = digit_of(text[i], i) + digit_of(text[i + 1], i + 1) * radix
        if value >= _BYTE_LIMIT:
            raise ValueOverflowError(f"a 1-byte group (2 symbols at position {i})")
        out.append(value)
    return bytes(out)

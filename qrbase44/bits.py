"""Bit-optimal fixed-length codec.

A buffer declared to hold exactly ``n`` bits is read as a big-endian unsigned
integer ``V < 2**n`` and written as ``D(n)`` base-R digits, most significant
first, padded with leading zero digits. ``D(n)`` is the smallest digit count
with ``R**D >= 2**n``, so the output length depends on ``n`` alone and is the
minimum possible for that bit length.

The buffer has ``ceil(n / 8)`` bytes. Its ``8 * ceil(n / 8) - n`` spare bits
are the top bits of the first byte: they must be zero on encode and are
always zero on decode.

Examples
--------
>>> from qrbase44.alphabet import BASE44_ALPHABET
>>> encode_bits(8, b"A", BASE44_ALPHABET)
'1L'
>>> decode_bits(8, "1L", BASE44_ALPHABET)
b'A'
"""

from __future__ import annotations

from typing import Any

from qrbase44.alphabet import Alphabet
from qrbase44.backends import RadixBackend, get_backend, select_backend, supports
from qrbase44.errors import InvalidBitPaddingError, LengthMismatchError, ValueOverflowError
from qrbase44.threshold import digit_count


def byte_length(bit_length: int) -> int:
    """Return ``ceil(bit_length / 8)``, the buffer size for ``bit_length`` bits."""

    return (bit_length + 7) // 8


def _resolve_backend(bit_length: int, backend: RadixBackend | str | None) -> RadixBackend:
    if backend is None:
        return select_backend(bit_length)
    if isinstance(backend, str):
        backend = get_backend(backend)
    if not supports(backend, bit_length):
        raise ValueError(
            f"Backend {backend.name} holds at most {backend.max_bits} bits; "
            f"bit_length={bit_length} requested."
        )
    return backend


def _check_bit_length(bit_length: int) -> None:
    if bit_length < 0:
        raise ValueError(f"bit_length must be non-negative, got {bit_length}.")


def to_digits(backend: RadixBackend, value: Any, radix: int, count: int) -> list[int]:
    """Write ``value`` as exactly ``count`` base-``radix`` digits, most significant first."""

    digits = [0] * count
    for i in reversed(range(count)):
        value, digits[i] = backend.divmod(value, radix)
    if not backend.is_zero(value):
        raise ValueOverflowError(f"{count} base-{radix} digits")
    return digits


def from_digits(backend: RadixBackend, digits: list[int], radix: int) -> Any:
    """Inverse of `to_digits`: ``sum(d_i * radix**(D-1-i))``."""

    value = backend.zero()
    for digit in digits:
        value = backend.mul_add(value, radix, digit)
    return value


def encode_bits(
    bit_length: int,
    data: bytes,
    alphabet: Alphabet,
    backend: RadixBackend | str | None = None,
) -> str:
    """Encode the ``bit_length``-bit value in ``data`` as ``D(bit_length)`` symbols.

    Parameters
    ----------
    bit_length:
        Exact number of significant bits, n >= 0.
    data:
        Big-endian buffer of ``ceil(n / 8)`` bytes with zero padding bits.
    alphabet:
        Symbol set; its size is the radix.
    backend:
        Optional backend instance or name overriding the dispatcher.

    Raises
    ------
    LengthMismatchError
        ``data`` is not ``ceil(n / 8)`` bytes long.
    InvalidBitPaddingError
        One of the top padding bits of ``data`` is set.
    """

    _check_bit_length(bit_length)
    data = memoryview(data).tobytes()
    expected = byte_length(bit_length)
    if len(data) != expected:
        raise LengthMismatchError(expected, len(data), unit="bytes")
    padding = 8 * expected - bit_length
    if padding and data[0] >> (8 - padding):
        raise InvalidBitPaddingError(bit_length, padding)

    impl = _resolve_backend(bit_length, backend)
    radix = alphabet.size
    value = impl.from_bytes(data)
    digits = to_digits(impl, value, radix, digit_count(bit_length, radix))
    return alphabet.from_digits(digits)


def decode_bits(
    bit_length: int,
    text: str,
    alphabet: Alphabet,
    backend: RadixBackend | str | None = None,
) -> bytes:
    """Decode ``D(bit_length)`` symbols back into ``ceil(bit_length / 8)`` bytes.

    Raises
    ------
    LengthMismatchError
        ``text`` does not have exactly ``D(bit_length)`` symbols.
    InvalidCharacterError
        A symbol is outside ``alphabet``; reports its position.
    ValueOverflowError
        The digits spell a value >= 2**bit_length.
    """

    _check_bit_length(bit_length)
    radix = alphabet.size
    expected = digit_count(bit_length, radix)
    if len(text) != expected:
        raise LengthMismatchError(expected, len(text), unit="symbols")
    digits = alphabet.to_digits(text)

    impl = _resolve_backend(bit_length, backend)
    value = from_digits(impl, digits, radix)
    if not impl.fits_bits(value, bit_length):
        raise ValueOverflowError(f"{bit_length} bits")
    return impl.to_bytes(value, byte_length(bit_length))

"""Native 64-bit backend: the value lives in a single ``numpy.uint64``.

All operands are kept as ``numpy.uint64`` so arithmetic never promotes to
float or to Python's unbounded ``int``. Multiplication is checked against
the 64-bit range before it is performed, since numpy wraps silently.
"""

from __future__ import annotations

import numpy as np

from qrbase44.errors import ValueOverflowError


_U64_MAX = np.uint64(0xFFFF_FFFF_FFFF_FFFF)
_BYTE_SHIFT = np.uint64(8)


class Native64Backend:
    """Unsigned 64-bit arithmetic for bit lengths up to 64."""

    name = "native64"
    max_bits: int | None = 64

    def zero(self) -> np.uint64:
        return np.uint64(0)

    def from_bytes(self, data: bytes) -> np.uint64:
        if len(data) > 8:
            raise ValueError(f"{self.name} holds at most 8 bytes, got {len(data)}.")
        value = np.uint64(0)
        for byte in data:
            value = (value << _BYTE_SHIFT) | np.uint64(byte)
        return value

    def to_bytes(self, value: np.uint64, length: int) -> bytes:
        return int(value).to_bytes(length, "big")

    def divmod(self, value: np.uint64, divisor: int) -> tuple[np.uint64, int]:
        quotient, remainder = divmod(value, np.uint64(divisor))
        return quotient, int(remainder)

    def mul_add(self, value: np.uint64, factor: int, addend: int) -> np.uint64:
        f = np.uint64(factor)
        a = np.uint64(addend)
        if value > (_U64_MAX - a) // f:
            raise ValueOverflowError("the 64-bit native range")
        return value * f + a

    def fits_bits(self, value: np.uint64, bit_length: int) -> bool:
        if bit_length >= 64:
            return True
        return bool(value >> np.uint64(bit_length) == 0)

    def is_zero(self, value: np.uint64) -> bool:
        return bool(value == 0)

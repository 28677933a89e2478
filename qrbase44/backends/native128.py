"""Native 128-bit backend: four ``numpy.uint32`` limbs, most significant first.

numpy has no 128-bit integer, so the value is held as a fixed array of 32-bit
limbs and every limb operation runs in ``numpy.uint64``. With divisors and
factors below 2**32 the intermediates ``(remainder << 32) | limb`` and
``limb * factor + carry`` always fit in 64 bits.
"""

from __future__ import annotations

import numpy as np

from qrbase44.errors import ValueOverflowError


_LIMBS = 4
_LIMB_BITS = 32
_LIMB_SHIFT = np.uint64(_LIMB_BITS)
_LIMB_MASK = np.uint64(0xFFFF_FFFF)


class Native128Backend:
    """Unsigned 128-bit arithmetic for bit lengths up to 128."""

    name = "native128"
    max_bits: int | None = 128

    def zero(self) -> np.ndarray:
        return np.zeros(_LIMBS, dtype=np.uint32)

    def from_bytes(self, data: bytes) -> np.ndarray:
        width = _LIMBS * 4
        if len(data) > width:
            raise ValueError(f"{self.name} holds at most {width} bytes, got {len(data)}.")
        return np.frombuffer(data.rjust(width, b"\x00"), dtype=">u4").astype(np.uint32)

    def to_bytes(self, value: np.ndarray, length: int) -> bytes:
        raw = value.astype(">u4").tobytes()
        return raw[len(raw) - length :]

    def divmod(self, value: np.ndarray, divisor: int) -> tuple[np.ndarray, int]:
        d = np.uint64(divisor)
        quotient = np.empty_like(value)
        remainder = np.uint64(0)
        for i in range(_LIMBS):
            current = (remainder << _LIMB_SHIFT) | np.uint64(value[i])
            quotient[i] = current // d
            remainder = current % d
        return quotient, int(remainder)

    def mul_add(self, value: np.ndarray, factor: int, addend: int) -> np.ndarray:
        f = np.uint64(factor)
        carry = np.uint64(addend)
        result = np.empty_like(value)
        for i in reversed(range(_LIMBS)):
            current = np.uint64(value[i]) * f + carry
            result[i] = current & _LIMB_MASK
            carry = current >> _LIMB_SHIFT
        if carry:
            raise ValueOverflowError("the 128-bit native range")
        return result

    def _bit_length(self, value: np.ndarray) -> int:
        for i in range(_LIMBS):
            limb = int(value[i])
            if limb:
                return (_LIMBS - 1 - i) * _LIMB_BITS + limb.bit_length()
        return 0

    def fits_bits(self, value: np.ndarray, bit_length: int) -> bool:
        return self._bit_length(value) <= bit_length

    def is_zero(self, value: np.ndarray) -> bool:
        return not value.any()

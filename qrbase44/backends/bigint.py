"""Arbitrary-precision backend built on Python's ``int``."""

from __future__ import annotations


class BigIntBackend:
    """Unbounded arithmetic for any bit length."""

    name = "bigint"
    max_bits: int | None = None

    def zero(self) -> int:
        return 0

    def from_bytes(self, data: bytes) -> int:
        return int.from_bytes(data, "big")

    def to_bytes(self, value: int, length: int) -> bytes:
        return value.to_bytes(length, "big")

    def divmod(self, value: int, divisor: int) -> tuple[int, int]:
        return divmod(value, divisor)

    def mul_add(self, value: int, factor: int, addend: int) -> int:
        return value * factor + addend

    def fits_bits(self, value: int, bit_length: int) -> bool:
        return value >> bit_length == 0

    def is_zero(self, value: int) -> bool:
        return value == 0

"""Integer backend interface for the big-radix converter.

A backend stores the unsigned value of a bit buffer in one particular
representation and offers the handful of operations radix conversion needs.
Backends differ only in speed and in the widest value they can hold; for any
value within that width they must produce identical results.
"""

from __future__ import annotations

from typing import Any, Protocol


class RadixBackend(Protocol):
    """Protocol implemented by every integer representation.

    Attributes
    ----------
    name:
        Registry key, e.g., "native64".
    max_bits:
        Widest bit length the representation holds, or None if unbounded.
    """

    name: str
    max_bits: int | None

    def zero(self) -> Any:  # pragma: no cover - protocol
        """Return the representation of 0."""
        ...

    def from_bytes(self, data: bytes) -> Any:  # pragma: no cover - protocol
        """Interpret ``data`` as a big-endian unsigned integer."""
        ...

    def to_bytes(self, value: Any, length: int) -> bytes:  # pragma: no cover - protocol
        """Return ``value`` as ``length`` big-endian bytes."""
        ...

    def divmod(self, value: Any, divisor: int) -> tuple[Any, int]:  # pragma: no cover - protocol
        """Return ``(value // divisor, value % divisor)`` for a small divisor."""
        ...

    def mul_add(self, value: Any, factor: int, addend: int) -> Any:  # pragma: no cover - protocol
        """Return ``value * factor + addend``.

        Raises `ValueOverflowError` if the result exceeds the representation.
        """
        ...

    def fits_bits(self, value: Any, bit_length: int) -> bool:  # pragma: no cover - protocol
        """Return True if ``value < 2**bit_length``."""
        ...

    def is_zero(self, value: Any) -> bool:  # pragma: no cover - protocol
        ...


def supports(backend: RadixBackend, bit_length: int) -> bool:
    """Return True if ``backend`` can hold every ``bit_length``-bit value."""

    return backend.max_bits is None or bit_length <= backend.max_bits

"""Exception types raised when decoding or validating codec input.

Every rejection of malformed input derives from `QRBaseError`, itself a
`ValueError`, so callers can catch either the precise type or the whole
family. Errors carry the fields needed to report the failure; no partial
output is ever returned alongside them.
"""

from __future__ import annotations


class QRBaseError(ValueError):
    """Base class for all input rejections raised by qrbase44."""


class InvalidCharacterError(QRBaseError):
    """A symbol outside the configured alphabet was found at ``position``."""

    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(f"invalid symbol {char!r} at position {position}")


class DanglingGroupError(QRBaseError):
    """Byte-pair input does not split into 3-groups plus an optional 2-group."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"dangling symbol group: {length} symbols cannot form complete groups")


class LengthMismatchError(QRBaseError):
    """Input length differs from the length implied by the bit length."""

    def __init__(self, expected: int, actual: int, unit: str = "symbols") -> None:
        self.expected = expected
        self.actual = actual
        self.unit = unit
        super().__init__(f"expected {expected} {unit}, got {actual}")


class ValueOverflowError(QRBaseError):
    """Reconstructed value does not fit the declared byte or bit length."""

    def __init__(self, limit: str) -> None:
        self.limit = limit
        super().__init__(f"decoded value overflows {limit}")


class InvalidBitPaddingError(QRBaseError):
    """Padding bits above ``bit_length`` are set in the input buffer."""

    def __init__(self, bit_length: int, padding_bits: int) -> None:
        self.bit_length = bit_length
        self.padding_bits = padding_bits
        super().__init__(
            f"value does not fit in {bit_length} bits: "
            f"the top {padding_bits} padding bit(s) of the first byte must be zero"
        )

"""Exact digit-count threshold for the bit-optimal codec.

For a bit length ``n`` and radix ``R``, ``digit_count(n, R)`` is the smallest
``D`` with ``R**D >= 2**n``. The count is found with exact integer
multiplication only: a logarithm rounded near a power of ``R`` gives an
off-by-one ``D`` at exactly the bit lengths where it matters.

Examples
--------
>>> digit_count(128, 44)
24
>>> digit_count(256, 44), digit_count(256, 43)
(47, 48)
>>> bit_capacity(19, 44)
103
"""

from __future__ import annotations


def _check_radix(radix: int) -> None:
    if radix < 2:
        raise ValueError(f"radix must be at least 2, got {radix}.")


def digit_count(bit_length: int, radix: int) -> int:
    """Return the minimal ``D`` such that ``radix**D >= 2**bit_length``.

    ``digit_count(0, radix)`` is 0: a zero-bit value encodes to no symbols.
    """

    if bit_length < 0:
        raise ValueError(f"bit_length must be non-negative, got {bit_length}.")
    _check_radix(radix)

    target = 1 << bit_length
    capacity = 1
    digits = 0
    while capacity < target:
        capacity *= radix
        digits += 1
    return digits


def bit_capacity(digits: int, radix: int) -> int:
    """Return the largest bit length whose `digit_count` is at most ``digits``."""

    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}.")
    _check_radix(radix)

    # 2**n <= radix**digits  <=>  n <= bit_length(radix**digits) - 1
    return (radix**digits).bit_length() - 1

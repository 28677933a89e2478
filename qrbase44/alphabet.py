"""Alphabet definitions and symbol/digit mapping.

This module defines the `Alphabet` class and the two URL-safe alphabets drawn
from the QR alphanumeric character set. Each symbol's index in the alphabet
is its digit value in a positional numeral system of radix ``size``.

Examples
--------
>>> from qrbase44.alphabet import BASE44_ALPHABET
>>> BASE44_ALPHABET.size
44
>>> BASE44_ALPHABET.digit_of("Z")
35
>>> BASE44_ALPHABET.from_digits([1, 21])
'1L'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Self
import math

from qrbase44.errors import InvalidCharacterError


_DIGITS_AND_LETTERS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class Alphabet:
    """An ordered, duplicate-free symbol set used as numeral digits.

    Parameters
    ----------
    symbols:
        Immutable ordered collection of single-character symbols. The index
        of a symbol is its digit value.
    name:
        Human-friendly name, e.g., "Base44".
    include_dollar:
        Whether the ``$`` symbol is part of the alphabet.
    """

    symbols: tuple[str, ...]
    name: str
    include_dollar: bool
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = {ch: i for i, ch in enumerate(self.symbols)}
        if len(index) != len(self.symbols):
            raise ValueError(f"Alphabet {self.name!r} contains repeated symbols.")
        if any(len(ch) != 1 for ch in self.symbols):
            raise ValueError(f"Alphabet {self.name!r} symbols must be single characters.")
        object.__setattr__(self, "_index", MappingProxyType(index))

    @property
    def size(self) -> int:
        """Number of symbols R, the radix of the numeral system."""

        return len(self.symbols)

    @property
    def log2_size(self) -> float:
        """log2(R): information carried by one symbol (informative only)."""

        return math.log2(self.size)

    def is_valid_char(self, char: str) -> bool:
        """Return True if `char` is a member of the alphabet."""

        return char in self._index

    def symbol_of(self, digit: int) -> str:
        """Return the symbol whose digit value is ``digit``."""

        if not 0 <= digit < self.size:
            raise ValueError(f"Digit {digit} outside 0..{self.size - 1} for {self.name}.")
        return self.symbols[digit]

    def digit_of(self, char: str, position: int = 0) -> int:
        """Return the digit value of ``char``.

        ``position`` is only used to report where an invalid symbol was found.
        """

        try:
            return self._index[char]
        except KeyError as exc:
            raise InvalidCharacterError(position, char) from exc

    def to_digits(self, text: str) -> list[int]:
        """Map each symbol of ``text`` to its digit value."""

        return [self.digit_of(ch, pos) for pos, ch in enumerate(text)]

    def from_digits(self, digits: Iterable[int]) -> str:
        """Inverse of `to_digits`: digit values -> symbol string."""

        return "".join(self.symbol_of(d) for d in digits)

    def variant(self, *, include_dollar: bool | None = None) -> Self:
        """Return a new Alphabet with ``$`` added or removed.

        Symbols are rebuilt from the digits and letters followed by the QR
        punctuation marks, so digit values stay in QR alphanumeric order.
        """

        new_include_dollar = self.include_dollar if include_dollar is None else include_dollar
        punctuation = "$%*+-./:" if new_include_dollar else "%*+-./:"
        symbols = tuple(_DIGITS_AND_LETTERS + punctuation)
        return Alphabet(
            symbols=symbols,
            name=f"Base{len(symbols)}",
            include_dollar=new_include_dollar,
        )


# Predefined alphabets: QR alphanumeric mode without the space character.
BASE44_ALPHABET = Alphabet(
    symbols=tuple(_DIGITS_AND_LETTERS + "$%*+-./:"),
    name="Base44",
    include_dollar=True,
)

BASE43_ALPHABET = BASE44_ALPHABET.variant(include_dollar=False)


def get_alphabet(variant: str | int) -> Alphabet:
    """Return a predefined `Alphabet` by variant (``"44"``/``"43"``) or name.

    Raises a `ValueError` with available options if the variant is unknown.
    """

    registry: dict[str, Alphabet] = {
        "44": BASE44_ALPHABET,
        "43": BASE43_ALPHABET,
        BASE44_ALPHABET.name: BASE44_ALPHABET,  # "Base44"
        BASE43_ALPHABET.name: BASE43_ALPHABET,  # "Base43"
    }

    try:
        return registry[str(variant)]
    except KeyError as exc:
        options = ", ".join(sorted(registry.keys()))
        raise ValueError(f"Unknown alphabet variant: {variant!r}. Available: {options}") from exc

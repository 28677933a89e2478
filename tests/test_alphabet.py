import pytest

from qrbase44.alphabet import (
    Alphabet,
    BASE44_ALPHABET,
    BASE43_ALPHABET,
    get_alphabet,
)
from qrbase44.errors import InvalidCharacterError


def test_base44_alphabet_size():
    """Base44 is the QR alphanumeric set minus space."""

    assert BASE44_ALPHABET.size == 44
    assert " " not in BASE44_ALPHABET.symbols


def test_base43_alphabet_matches_qr_subset():
    """Base43 additionally drops '$' and keeps QR alphanumeric order."""

    assert BASE43_ALPHABET.size == 43
    assert "".join(BASE43_ALPHABET.symbols) == "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ%*+-./:"
    assert "$" not in BASE43_ALPHABET.symbols


def test_digit_values():
    assert BASE44_ALPHABET.digit_of("0") == 0
    assert BASE44_ALPHABET.digit_of("Z") == 35
    assert BASE44_ALPHABET.digit_of("$") == 36
    assert BASE44_ALPHABET.digit_of(":") == 43
    assert BASE43_ALPHABET.digit_of("%") == 36
    assert BASE43_ALPHABET.digit_of(":") == 42


def test_symbol_of_is_inverse_of_digit_of():
    for alphabet in (BASE44_ALPHABET, BASE43_ALPHABET):
        for digit in range(alphabet.size):
            assert alphabet.digit_of(alphabet.symbol_of(digit)) == digit


def test_symbol_of_out_of_range():
    with pytest.raises(ValueError):
        BASE44_ALPHABET.symbol_of(44)
    with pytest.raises(ValueError):
        BASE43_ALPHABET.symbol_of(-1)


def test_invalid_character_reports_position():
    with pytest.raises(InvalidCharacterError) as info:
        BASE44_ALPHABET.digit_of(" ", 5)
    assert info.value.position == 5
    assert info.value.char == " "


def test_to_digits_and_back():
    digits = BASE44_ALPHABET.to_digits("0A:")
    assert digits == [0, 10, 43]
    assert BASE44_ALPHABET.from_digits(digits) == "0A:"


def test_to_digits_lowercase_rejected():
    """Only upper-case letters belong to the alphabet."""

    with pytest.raises(InvalidCharacterError) as info:
        BASE43_ALPHABET.to_digits("AbC")
    assert info.value.position == 1


def test_dollar_rejected_by_base43():
    assert BASE44_ALPHABET.is_valid_char("$") is True
    assert BASE43_ALPHABET.is_valid_char("$") is False


def test_log2_size():
    """log2(43) ~= 5.426 bits/symbol."""

    assert abs(BASE43_ALPHABET.log2_size - 5.426) < 0.001


def test_variant_restores_dollar():
    assert BASE43_ALPHABET.variant(include_dollar=True) == BASE44_ALPHABET
    assert BASE44_ALPHABET.variant(include_dollar=False) == BASE43_ALPHABET


def test_repeated_symbols_rejected():
    with pytest.raises(ValueError):
        Alphabet(symbols=tuple("0123456789AA"), name="Broken", include_dollar=False)


def test_get_alphabet():
    assert get_alphabet("44") is BASE44_ALPHABET
    assert get_alphabet(43) is BASE43_ALPHABET
    assert get_alphabet("Base43") is BASE43_ALPHABET
    with pytest.raises(ValueError):
        get_alphabet("45")

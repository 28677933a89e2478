import pytest

from qrbase44.threshold import bit_capacity, digit_count


@pytest.mark.parametrize(
    "bits, radix, expected",
    [
        (0, 44, 0),
        (1, 44, 1),
        (5, 44, 1),
        (6, 44, 2),
        (8, 44, 2),
        (16, 44, 3),
        (64, 44, 12),
        (103, 44, 19),
        (103, 43, 19),
        (128, 44, 24),
        (128, 43, 24),
        (256, 44, 47),
        (256, 43, 48),
    ],
)
def test_digit_count_known_values(bits: int, radix: int, expected: int):
    assert digit_count(bits, radix) == expected


@pytest.mark.parametrize("radix", [43, 44])
def test_digit_count_is_minimal_and_monotonic(radix: int):
    previous = 0
    for n in range(0, 600):
        d = digit_count(n, radix)
        assert radix**d >= 2**n
        if n > 0:
            assert radix ** (d - 1) < 2**n
        assert d >= previous
        previous = d


def test_digit_count_at_exact_powers():
    """Powers of the radix that are also powers of two sit exactly on the threshold."""

    assert digit_count(2, 4) == 1
    assert digit_count(3, 4) == 2
    assert digit_count(4, 4) == 2
    assert digit_count(5, 4) == 3
    assert digit_count(6, 8) == 2
    assert digit_count(7, 8) == 3
    assert digit_count(17, 2) == 17


def test_digit_count_rejects_bad_input():
    with pytest.raises(ValueError):
        digit_count(-1, 44)
    with pytest.raises(ValueError):
        digit_count(8, 1)


def test_bit_capacity_known_values():
    assert bit_capacity(0, 44) == 0
    assert bit_capacity(19, 44) == 103
    assert bit_capacity(24, 44) == 131
    assert bit_capacity(47, 44) == 256
    assert bit_capacity(3, 4) == 6


@pytest.mark.parametrize("radix", [43, 44])
def test_bit_capacity_inverts_digit_count(radix: int):
    for digits in range(0, 80):
        cap = bit_capacity(digits, radix)
        assert digit_count(cap, radix) <= digits
        assert digit_count(cap + 1, radix) > digits

import logging
import random

import pytest

import qrbase44
from qrbase44.alphabet import BASE44_ALPHABET, BASE43_ALPHABET
from qrbase44.codec import Codec, decode, decode_bits, encode, encode_bits, encoded_length, get_codec
from qrbase44.errors import (
    DanglingGroupError,
    InvalidBitPaddingError,
    InvalidCharacterError,
    LengthMismatchError,
    QRBaseError,
    ValueOverflowError,
)


def test_default_codec_is_base44():
    assert get_codec().alphabet is BASE44_ALPHABET
    assert Codec().alphabet is BASE44_ALPHABET
    assert get_codec("43").alphabet is BASE43_ALPHABET
    assert get_codec("43").radix == 43


def test_unknown_variant():
    with pytest.raises(ValueError):
        get_codec("45")


def test_module_functions_use_default_variant():
    assert encode(b"A") == "L1"
    assert decode("L1") == b"A"
    assert encode_bits(8, b"A") == "1L"
    assert decode_bits(8, "1L") == b"A"
    assert encoded_length(256) == 47


def test_variants_differ():
    codec43 = get_codec("43")
    assert codec43.encode(b"A") == "M1"
    assert codec43.encoded_length(256) == 48


def test_empty_input():
    assert encode(b"") == ""
    assert decode("") == b""


def test_random_roundtrip():
    rng = random.Random(42)
    for codec in (get_codec("44"), get_codec("43")):
        for length in range(0, 41):
            data = bytes(rng.getrandbits(8) for _ in range(length))
            assert codec.decode(codec.encode(data)) == data
            assert codec.decode_bits(8 * length, codec.encode_bits(8 * length, data)) == data


def test_sizing_helpers():
    codec = Codec()
    assert codec.bit_capacity(47) == 256
    assert codec.pair_encoded_length(32) == 48
    assert codec.encoded_length(0) == 0


def test_backend_override():
    codec = Codec()
    assert codec.encode_bits(8, b"A", backend="bigint") == "1L"
    assert codec.decode_bits(8, "1L", backend="native128") == b"A"


def test_rejections_propagate():
    with pytest.raises(InvalidCharacterError):
        decode("0a0")
    with pytest.raises(DanglingGroupError):
        decode("0000")
    with pytest.raises(LengthMismatchError):
        decode_bits(8, "AAA")
    with pytest.raises(ValueOverflowError):
        decode(":::")
    with pytest.raises(InvalidBitPaddingError):
        encode_bits(4, b"\x10")


@pytest.mark.parametrize(
    "error",
    [DanglingGroupError(4), InvalidCharacterError(0, " "), LengthMismatchError(2, 3), ValueOverflowError("8 bits")],
)
def test_errors_are_value_errors(error):
    assert isinstance(error, QRBaseError)
    assert isinstance(error, ValueError)
    assert str(error)


def test_package_exports():
    assert qrbase44.encode is encode
    assert qrbase44.Codec is Codec
    assert qrbase44.digit_count(128, 44) == 24
    with pytest.raises(AttributeError):
        qrbase44.does_not_exist


def test_non_buffer_input_rejected():
    """An int is not a byte buffer and must not be read as that many zero bytes."""

    with pytest.raises(TypeError):
        encode(3)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        encode_bits(24, 3)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        get_codec("43").encode([1, 2])  # type: ignore[arg-type]
    assert encode(bytearray(b"A")) == encode(memoryview(b"A")) == "L1"


def test_get_codec_logs_construction(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="qrbase44.codec"):
        get_codec("43")
    assert any("Base43" in record.getMessage() for record in caplog.records)

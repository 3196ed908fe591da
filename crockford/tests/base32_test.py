import pytest

from crockford.core.errors import DecodeError
from crockford.utils.alphabet import (
    LOWERCASE_ALPHABET,
    LOWERCASE_CHECKSUM,
    UPPERCASE_ALPHABET,
    UPPERCASE_CHECKSUM,
)
from crockford.utils.base32 import LOWER, UPPER, Encoding, encoded_len, decoded_len, encoding_for


def test_alphabets():
    """Test the alphabet invariants."""
    for alphabet in (LOWERCASE_ALPHABET, UPPERCASE_ALPHABET):
        assert len(alphabet) == 32
        assert len(set(alphabet)) == 32
        assert not set(alphabet) & set("ILOUilou")
    assert len(UPPERCASE_CHECKSUM) == len(LOWERCASE_CHECKSUM) == 37
    assert UPPERCASE_CHECKSUM[:32] == UPPERCASE_ALPHABET
    assert LOWERCASE_CHECKSUM[:32] == LOWERCASE_ALPHABET
    assert LOWERCASE_ALPHABET.upper() == UPPERCASE_ALPHABET


def test_encode_known_values():
    assert UPPER.encode(b"") == ""
    assert UPPER.encode(b"f") == "CR"
    assert UPPER.encode(b"\xff" * 5) == "ZZZZZZZZ"
    assert LOWER.encode(b"\x00" * 5) == "00000000"


def test_encoded_lengths():
    assert encoded_len(5) == 8
    assert encoded_len(10) == 16
    assert encoded_len(16) == 26
    assert decoded_len(26) == 16
    assert len(UPPER.encode(bytes(16))) == 26


def test_decode_unpadded():
    assert UPPER.decode("CR") == b"f"
    assert UPPER.decode(b"ZZZZZZZZ") == b"\xff" * 5
    assert LOWER.decode("01jn7w80") == bytes([0x00, 0x65, 0x53, 0xF1, 0x00])


def test_decode_rejects_invalid_symbols():
    """Test that decoding is strict; normalization is the caller's job."""
    for text in ("01JN7W8I", "01jn7w80", "01JN-7W8", "01JN7W8="):
        with pytest.raises(DecodeError):
            UPPER.decode(text)


def test_decode_rejects_invalid_length():
    with pytest.raises(DecodeError):
        UPPER.decode("0")
    with pytest.raises(ValueError):
        UPPER.decode("012")


def test_encoding_is_immutable():
    with pytest.raises(AttributeError):
        UPPER.alphabet = LOWERCASE_ALPHABET


def test_encoding_rejects_bad_alphabet():
    with pytest.raises(ValueError):
        Encoding("0123")
    with pytest.raises(ValueError):
        Encoding("0" * 32)


def test_encoding_for():
    assert encoding_for(True) is UPPER
    assert encoding_for(False) is LOWER

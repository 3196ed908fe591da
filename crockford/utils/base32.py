import base64
import binascii
from typing import Union

from crockford.core.errors import DecodeError
from crockford.utils.alphabet import LOWERCASE_ALPHABET, UPPERCASE_ALPHABET

# Alphabet used by the standard library transform (RFC 4648)
RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# Unpadded base32 text lengths that can never occur (mod 8)
_INVALID_REMAINDERS = {1, 3, 6}


def encoded_len(n: int) -> int:
    """Length of the unpadded encoding of n bytes."""
    return (n * 8 + 4) // 5


def decoded_len(n: int) -> int:
    """Number of bytes carried by n unpadded characters."""
    return n * 5 // 8


class Encoding:
    """Standard base32 bit-packing bound to a 32-symbol alphabet, no padding.

    The bit packing itself is done by ``base64.b32encode``/``b32decode``;
    only the symbols are remapped.
    """

    __slots__ = ("alphabet", "_to_alphabet", "_from_alphabet", "_symbols")

    def __init__(self, alphabet: str):
        if len(alphabet) != 32 or len(set(alphabet)) != 32:
            raise ValueError("alphabet must contain 32 distinct symbols")
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "_to_alphabet", bytes.maketrans(RFC4648_ALPHABET.encode(), alphabet.encode()))
        object.__setattr__(self, "_from_alphabet", bytes.maketrans(alphabet.encode(), RFC4648_ALPHABET.encode()))
        object.__setattr__(self, "_symbols", frozenset(alphabet.encode()))

    def __setattr__(self, name, value):
        raise AttributeError("Encoding is immutable")

    def __repr__(self) -> str:
        return f"Encoding({self.alphabet!r})"

    def encode(self, data: bytes) -> str:
        return self._encode(data).decode("ascii")

    def encode_into(self, view: memoryview, data: bytes) -> None:
        """Write the encoding of data into view, which must be sized exactly."""
        view[:] = self._encode(data)

    def _encode(self, data: bytes) -> bytes:
        return base64.b32encode(bytes(data)).rstrip(b"=").translate(self._to_alphabet)

    def decode(self, text: Union[str, bytes]) -> bytes:
        raw = text.encode("ascii", "replace") if isinstance(text, str) else bytes(text)
        shown = raw.decode("ascii", "replace")
        if len(raw) % 8 in _INVALID_REMAINDERS:
            raise DecodeError(f"invalid base32 length {len(raw)}", shown)
        bad = [chr(c) for c in raw if c not in self._symbols]
        if bad:
            raise DecodeError(f"invalid symbol {bad[0]!r} in {shown!r}", shown)
        padded = raw.translate(self._from_alphabet) + b"=" * (-len(raw) % 8)
        try:
            return base64.b32decode(padded)
        except binascii.Error as e:
            raise DecodeError(f"cannot decode {shown!r}: {e}", shown) from e


LOWER = Encoding(LOWERCASE_ALPHABET)
UPPER = Encoding(UPPERCASE_ALPHABET)


def encoding_for(uppercase: bool) -> Encoding:
    return UPPER if uppercase else LOWER

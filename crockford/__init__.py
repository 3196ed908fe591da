"""Crockford base32 encoding for short, sortable, typo-tolerant identifiers.

See https://www.crockford.com/base32.html
"""
from .core.errors import CrockfordError, DecodeError, EntropyError
from .utils.alphabet import (
    LOWERCASE_ALPHABET,
    LOWERCASE_CHECKSUM,
    UPPERCASE_ALPHABET,
    UPPERCASE_CHECKSUM,
)
from .utils.base32 import LOWER, UPPER, Encoding, encoding_for
from .utils.buffer import ByteBuffer, ensure
from .utils.encoding import (
    LEN_MD5,
    LEN_RANDOM,
    LEN_TIME,
    append_md5,
    append_normalized,
    append_random,
    append_time,
    checksum,
    decode_time,
    encode_md5,
    encode_random,
    encode_time,
    normalized,
    verify_checksum,
)

__all__ = [
    "CrockfordError",
    "DecodeError",
    "EntropyError",
    "LOWERCASE_ALPHABET",
    "LOWERCASE_CHECKSUM",
    "UPPERCASE_ALPHABET",
    "UPPERCASE_CHECKSUM",
    "LOWER",
    "UPPER",
    "Encoding",
    "encoding_for",
    "ByteBuffer",
    "ensure",
    "LEN_MD5",
    "LEN_RANDOM",
    "LEN_TIME",
    "append_md5",
    "append_normalized",
    "append_random",
    "append_time",
    "checksum",
    "decode_time",
    "encode_md5",
    "encode_random",
    "encode_time",
    "normalized",
    "verify_checksum",
]

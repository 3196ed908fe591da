import hashlib
import logging
import math
import secrets
from datetime import datetime
from typing import Optional, Union

from crockford.core.errors import DecodeError, handle_entropy_error
from crockford.utils.alphabet import CHECKSUM_BASE, checksum_alphabet
from crockford.utils.base32 import Encoding
from crockford.utils.buffer import ByteBuffer, ensure

logger = logging.getLogger(__name__)

# Fragment lengths (contractual)
LEN_TIME = 8
LEN_RANDOM = 8
LEN_MD5 = 26

TIME_BYTES = 5
RANDOM_BYTES = 5
TIME_MASK = (1 << (TIME_BYTES * 8)) - 1


def _unix_seconds(t: Union[datetime, int, float]) -> int:
    if isinstance(t, datetime):
        return math.floor(t.timestamp())
    return math.floor(t)


def encode_time(enc: Encoding, t: Union[datetime, int, float]) -> str:
    """Encode the Unix time as a 40-bit big endian number (8 characters).

    The result sorts lexicographically in time order.
    """
    return append_time(enc, t).decode()


def append_time(enc: Encoding, t: Union[datetime, int, float], dst: Optional[ByteBuffer] = None) -> ByteBuffer:
    """Append LEN_TIME characters with the Unix time encoded as a 40-bit number.

    Seconds outside 40 bits lose their high-order bits.
    """
    src = (_unix_seconds(t) & TIME_MASK).to_bytes(TIME_BYTES, "big")
    dst, tar = ensure(LEN_TIME, dst)
    enc.encode_into(tar, src)
    return dst


def decode_time(enc: Encoding, text: str) -> int:
    """Return the 40-bit Unix second count carried by a time fragment."""
    if len(text) != LEN_TIME:
        raise DecodeError(f"time fragment must be {LEN_TIME} symbols, got {len(text)}", text)
    return int.from_bytes(enc.decode(text), "big")


def encode_random(enc: Encoding) -> str:
    """Return LEN_RANDOM characters from 5 secure random bytes."""
    return append_random(enc).decode()


def append_random(enc: Encoding, dst: Optional[ByteBuffer] = None) -> ByteBuffer:
    """Append LEN_RANDOM characters from 5 secure random bytes onto dst.

    Raises EntropyError if the OS random source fails.
    """
    try:
        src = secrets.token_bytes(RANDOM_BYTES)
    except (OSError, NotImplementedError) as e:
        logger.error("Secure random source unavailable: %s", e)
        raise handle_entropy_error(e, RANDOM_BYTES) from e
    dst, tar = ensure(LEN_RANDOM, dst)
    enc.encode_into(tar, src)
    return dst


def encode_md5(enc: Encoding, src: bytes) -> str:
    """Return the LEN_MD5 character encoding of the MD5 digest of src."""
    return append_md5(enc, src).decode()


def append_md5(enc: Encoding, src: bytes, dst: Optional[ByteBuffer] = None) -> ByteBuffer:
    # 16 bytes -> 26 base32 characters. Fingerprint only, not collision resistant.
    digest = hashlib.md5(src, usedforsecurity=False).digest()
    dst, tar = ensure(LEN_MD5, dst)
    enc.encode_into(tar, digest)
    return dst


def mod(data: bytes, m: int) -> int:
    """Big endian modulus of a byte string."""
    rem = 0
    for c in data:
        rem = (rem * 256 + c) % m
    return rem


def checksum(body: bytes, uppercase: bool = True) -> str:
    """Return the check symbol for an unencoded body."""
    return checksum_alphabet(uppercase)[mod(body, CHECKSUM_BASE)]


def verify_checksum(body: bytes, symbol: str) -> bool:
    """Check a symbol of either case against the body."""
    canonical = normalized(symbol)
    return len(canonical) == 1 and canonical == checksum(body, True)


def _normalization_table():
    table = bytearray(range(256))
    keep = set(b"0123456789ABCDEFGHJKMNPQRSTVWXYZ*~$=U")
    for c in b"Oo":
        table[c] = ord("0")
        keep.add(c)
    for c in b"Ii":
        table[c] = ord("1")
        keep.add(c)
    for c in b"abcdefghjkmnpqrstvwxyzu":
        table[c] = c - 32
        keep.add(c)
    drop = bytes(c for c in range(256) if c not in keep)
    return bytes(table), drop

_NORM_TABLE, _NORM_DROP = _normalization_table()


def normalized(s: Union[str, bytes]) -> str:
    """Normalize Crockford encoded text to canonical uppercase symbols.

    Replaces I with 1 and O with 0, upper-cases, and removes characters
    with no mapping such as hyphens.
    """
    src = s.encode("utf-8") if isinstance(s, str) else s
    return append_normalized(None, src).decode()


def append_normalized(dst: Optional[ByteBuffer], src: bytes) -> ByteBuffer:
    """Append the normalized form of src onto dst and return it."""
    out = bytes(src).translate(_NORM_TABLE, _NORM_DROP)
    if dst is None:
        dst = ByteBuffer(capacity=len(src))
    dst.append(out)
    return dst

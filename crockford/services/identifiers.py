import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from crockford.core.errors import DecodeError
from crockford.utils.base32 import UPPER, encoding_for
from crockford.utils.buffer import ByteBuffer
from crockford.utils.encoding import (
    LEN_RANDOM,
    LEN_TIME,
    TIME_BYTES,
    append_random,
    append_time,
    checksum as checksum_symbol,
    encode_md5,
    normalized,
    verify_checksum,
)

logger = logging.getLogger(__name__)

LEN_BODY = LEN_TIME + LEN_RANDOM


@dataclass(frozen=True)
class MintedId:
    id: str
    time: str
    random: str
    checksum: Optional[str] = None


@dataclass(frozen=True)
class VerifiedId:
    normalized: str
    valid: bool
    timestamp: int


def new_id(uppercase: bool = True, checksum: bool = True, now: Union[datetime, int, None] = None) -> MintedId:
    """Mint a time-sortable id: time fragment, random fragment, check symbol."""
    enc = encoding_for(uppercase)
    buf = ByteBuffer(capacity=LEN_BODY + 1)
    append_time(enc, now if now is not None else datetime.now(), buf)
    append_random(enc, buf)
    body = buf.decode()

    symbol = None
    if checksum:
        symbol = checksum_symbol(enc.decode(body), uppercase)
        buf.append(symbol.encode("ascii"))

    minted = MintedId(id=buf.decode(), time=body[:LEN_TIME], random=body[LEN_TIME:], checksum=symbol)
    logger.debug("Minted id %s", minted.id)
    return minted


def content_id(content: bytes, uppercase: bool = True) -> str:
    return encode_md5(encoding_for(uppercase), content)


def verify_id(code: str, checksum: bool = True) -> VerifiedId:
    """Normalize user input and check it against its check symbol.

    Raises DecodeError when the body is not a valid id.
    """
    canonical = normalized(code)
    body, symbol = (canonical[:-1], canonical[-1:]) if checksum else (canonical, "")

    if len(body) != LEN_BODY:
        logger.debug("Rejected id %r: body length %d", code, len(body))
        raise DecodeError(f"id body must be {LEN_BODY} symbols, got {len(body)}", code)

    raw = UPPER.decode(body)
    valid = verify_checksum(raw, symbol) if checksum else True
    timestamp = int.from_bytes(raw[:TIME_BYTES], "big")
    return VerifiedId(normalized=canonical, valid=valid, timestamp=timestamp)


def group(code: str, size: int = 4, sep: str = "-") -> str:
    """Split code into hyphenated clusters for display."""
    if size <= 0:
        return code
    return sep.join(code[pos:pos + size] for pos in range(0, len(code), size))

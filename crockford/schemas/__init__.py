# re-export common schemas for simpler imports
from .ids import (
    ChecksumRequest,
    ChecksumResponse,
    HashRequest,
    HashResponse,
    IdCreateRequest,
    IdResponse,
    IdVerifyResponse,
    NormalizeRequest,
    NormalizeResponse,
)

__all__ = [
    "ChecksumRequest",
    "ChecksumResponse",
    "HashRequest",
    "HashResponse",
    "IdCreateRequest",
    "IdResponse",
    "IdVerifyResponse",
    "NormalizeRequest",
    "NormalizeResponse",
]

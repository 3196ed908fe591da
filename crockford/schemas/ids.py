from pydantic import BaseModel, Field, field_validator
from typing import Optional

from crockford.core.config import settings

# Request DTOs
class IdCreateRequest(BaseModel):
    uppercase: bool = settings.UPPERCASE
    checksum: bool = settings.CHECKSUM


class HashRequest(BaseModel):
    content: str = Field(..., max_length=1024 * 1024)


class NormalizeRequest(BaseModel):
    code: str = Field(..., max_length=256)


class ChecksumRequest(BaseModel):
    body_hex: str
    uppercase: bool = settings.UPPERCASE

    @field_validator('body_hex')
    def validate_body_hex(cls, v):
        try:
            bytes.fromhex(v)
        except ValueError:
            raise ValueError('body_hex must be an even-length hex string')
        return v


# Response DTOs
class IdResponse(BaseModel):
    id: str
    time: str
    random: str
    checksum: Optional[str] = None
    grouped: str


class IdVerifyResponse(BaseModel):
    normalized: str
    valid: bool
    timestamp: int


class HashResponse(BaseModel):
    hash: str


class NormalizeResponse(BaseModel):
    normalized: str


class ChecksumResponse(BaseModel):
    checksum: str

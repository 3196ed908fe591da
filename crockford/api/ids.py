from fastapi import APIRouter, HTTPException, status
from typing import Optional
import logging

from crockford.core.config import settings
from crockford.core.errors import DecodeError, EntropyError
from crockford.schemas.ids import (
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
from crockford.services import identifiers
from crockford.utils import encoding

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["ids"])

@router.post("/ids", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
def create_id_endpoint(id_request: IdCreateRequest):
    try:
        minted = identifiers.new_id(id_request.uppercase, id_request.checksum)
    except EntropyError as e:
        logger.error(f"Failed to mint id: {e}")
        raise HTTPException(status_code=503, detail="Secure random source unavailable")

    logger.info(f"API success: Minted {minted.id}")
    return IdResponse(
        id=minted.id,
        time=minted.time,
        random=minted.random,
        checksum=minted.checksum,
        grouped=identifiers.group(minted.id, settings.GROUP_SIZE),
    )

@router.get("/ids/{code}", response_model=IdVerifyResponse)
def verify_id_endpoint(code: str, checksum: Optional[bool] = None):
    if checksum is None:
        checksum = settings.CHECKSUM
    try:
        verified = identifiers.verify_id(code, checksum)
    except DecodeError as e:
        logger.warning(f"Verify 422: {code!r} is not a valid id: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return IdVerifyResponse(
        normalized=verified.normalized,
        valid=verified.valid,
        timestamp=verified.timestamp,
    )

@router.post("/hash", response_model=HashResponse)
def hash_endpoint(hash_request: HashRequest):
    content = hash_request.content.encode("utf-8")
    return HashResponse(hash=identifiers.content_id(content, settings.UPPERCASE))

@router.post("/normalize", response_model=NormalizeResponse)
def normalize_endpoint(normalize_request: NormalizeRequest):
    return NormalizeResponse(normalized=encoding.normalized(normalize_request.code))

@router.post("/checksum", response_model=ChecksumResponse)
def checksum_endpoint(checksum_request: ChecksumRequest):
    body = bytes.fromhex(checksum_request.body_hex)
    return ChecksumResponse(checksum=encoding.checksum(body, checksum_request.uppercase))

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from .schemas import GenerateKeyRequest, GenerateKeyResponse
from .service import generate_api_key, verify_admin_secret


router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/generate-key", response_model=GenerateKeyResponse)
async def generate_key(payload: GenerateKeyRequest) -> GenerateKeyResponse:
    """Issue a new random API key to holders of the admin secret."""
    if not verify_admin_secret(payload.secret):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid secret",
        )
    return GenerateKeyResponse(api_key=generate_api_key())

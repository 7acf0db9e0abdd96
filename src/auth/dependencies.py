from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from . import service

api_key_header = APIKeyHeader(name=service.API_KEY_HEADER, auto_error=False)


async def require_api_key(api_key: Optional[str] = Security(api_key_header)) -> str:
    """
    FastAPI dependency guarding data endpoints.

    Usage:
        @router.get("/feeds", dependencies=[Depends(require_api_key)])
    """
    if not service.verify_api_key(api_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Invalid API Key",
        )
    return api_key  # type: ignore[return-value]

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateKeyRequest(BaseModel):
    """Request body for POST /api/generate-key."""

    secret: Optional[str] = None


class GenerateKeyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    api_key: str = Field(..., alias="apiKey")
    message: str = "Simpan API Key ini dengan aman. Gunakan di header X-API-Key"

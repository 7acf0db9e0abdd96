"""
Request and response models for the Kurs Saldo API.

Field aliases keep the camelCase wire format the web client consumes.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.trending import parse_published


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    success: bool = True
    message: str = "Kurs Saldo API is running"
    version: str = "1.0.0"


class SourceOut(_CamelModel):
    name: str
    logo: str
    logo_url: Optional[str] = Field(None, alias="logoUrl")
    language: str


class SourcesResponse(BaseModel):
    """Response for GET /api/sources."""

    success: bool = True
    data: List[SourceOut] = Field(default_factory=list)


class FeedItemOut(_CamelModel):
    title: str
    description: str = ""
    link: str = ""
    pub_date: str = Field("", alias="pubDate")
    image: str = ""
    source: str
    logo: str = ""
    logo_url: Optional[str] = Field(None, alias="logoUrl")
    language: str = ""


class FeedsResponse(BaseModel):
    """Response for GET /api/feeds."""

    success: bool = True
    count: int = 0
    data: List[FeedItemOut] = Field(default_factory=list)


class KeywordOut(BaseModel):
    word: str
    count: int


class TrendingItemIn(_CamelModel):
    title: str = Field(..., min_length=1)
    pub_date: Optional[str] = Field(None, alias="pubDate")


class TrendingRequest(BaseModel):
    """Request body for POST /api/trending."""

    items: List[TrendingItemIn] = Field(default_factory=list)
    now: Optional[dt.datetime] = Field(None, description="Reference time; defaults to server time")

    @field_validator("now")
    @classmethod
    def now_in_utc_range(cls, value: Optional[dt.datetime]) -> Optional[dt.datetime]:
        if value is None:
            return None
        normalized = parse_published(value)
        if normalized is None:
            raise ValueError("now is outside the supported date range")
        return normalized


class TrendingResponse(BaseModel):
    """Response for /api/trending."""

    success: bool = True
    count: int = 0
    data: List[KeywordOut] = Field(default_factory=list)


class KursBIRowOut(_CamelModel):
    mata_uang: str = Field(..., alias="mataUang")
    nilai: str
    kurs_jual: str = Field(..., alias="kursJual")
    kurs_beli: str = Field(..., alias="kursBeli")
    kurs_tengah: str = Field(..., alias="kursTengah")


class KursBIResponse(_CamelModel):
    """Response for GET /api/kurs-bi."""

    success: bool = True
    tanggal: str
    tanggal_format: str = Field(..., alias="tanggalFormat")
    data: List[KursBIRowOut] = Field(default_factory=list)


class KursPajakRowOut(_CamelModel):
    mata_uang: str = Field(..., alias="mataUang")
    mata_uang_name: str = Field(..., alias="mataUangName")
    nilai: str
    kurs: str
    perubahan: str


class KursPajakResponse(_CamelModel):
    """Response for GET /api/kurs-pajak."""

    success: bool = True
    tanggal: str
    tanggal_mulai: str = Field(..., alias="tanggalMulai")
    tanggal_selesai: str = Field(..., alias="tanggalSelesai")
    tanggal_format_mulai: str = Field(..., alias="tanggalFormatMulai")
    tanggal_format_selesai: str = Field(..., alias="tanggalFormatSelesai")
    data: List[KursPajakRowOut] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str

"""
Unit tests for API-key auth utilities and dependencies (no HTTP).
"""

from __future__ import annotations

import string

import pytest
from fastapi import HTTPException

from src.auth import service
from src.auth.dependencies import require_api_key
from src.auth.service import (
    generate_api_key,
    verify_admin_secret,
    verify_api_key,
)


def test_verify_api_key_against_explicit_value():
    assert verify_api_key("abc123", expected="abc123")
    assert not verify_api_key("abc124", expected="abc123")
    assert not verify_api_key("", expected="abc123")
    assert not verify_api_key(None, expected="abc123")


def test_verify_api_key_uses_configured_key(monkeypatch):
    monkeypatch.setattr(service, "API_KEY", "kunci-uji")
    assert verify_api_key("kunci-uji")
    assert not verify_api_key("kunci-lain")


def test_empty_configured_secret_never_matches(monkeypatch):
    monkeypatch.setattr(service, "ADMIN_SECRET", "")
    assert not verify_admin_secret("")
    assert not verify_admin_secret("apa-saja")


def test_generate_api_key_is_random_hex():
    first = generate_api_key()
    second = generate_api_key()
    assert len(first) == 64
    assert set(first) <= set(string.hexdigits.lower())
    assert first != second


@pytest.mark.anyio
async def test_require_api_key_accepts_valid_key(monkeypatch):
    monkeypatch.setattr(service, "API_KEY", "kunci-uji")
    assert await require_api_key(api_key="kunci-uji") == "kunci-uji"


@pytest.mark.anyio
@pytest.mark.parametrize("candidate", [None, "", "salah"])
async def test_require_api_key_rejects_invalid_key(monkeypatch, candidate):
    monkeypatch.setattr(service, "API_KEY", "kunci-uji")
    with pytest.raises(HTTPException) as excinfo:
        await require_api_key(api_key=candidate)
    assert excinfo.value.status_code == 401
    assert excinfo.value.detail == "Unauthorized: Invalid API Key"

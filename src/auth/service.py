from __future__ import annotations

import hmac
import os
import secrets
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

project_root = Path(__file__).resolve().parents[2]
env_file = project_root / ".env"
if env_file.exists():
    load_dotenv(env_file)


API_KEY = os.getenv("API_KEY", "kurs-saldo-secret-key-2026")
ADMIN_SECRET = os.getenv("ADMIN_SECRET", "kurs-saldo-admin-2026")
API_KEY_HEADER = "X-API-Key"
API_KEY_BYTES = 32


def _matches(candidate: Optional[str], expected: str) -> bool:
    if not candidate or not expected:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def verify_api_key(candidate: Optional[str], expected: Optional[str] = None) -> bool:
    """Check a client-supplied key against the configured API key."""
    return _matches(candidate, API_KEY if expected is None else expected)


def verify_admin_secret(candidate: Optional[str], expected: Optional[str] = None) -> bool:
    return _matches(candidate, ADMIN_SECRET if expected is None else expected)


def generate_api_key() -> str:
    """Return a fresh random key (32 bytes, hex encoded)."""
    return secrets.token_hex(API_KEY_BYTES)

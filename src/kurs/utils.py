"""
Indonesian number and date helpers shared by the rate scrapers.
"""

from __future__ import annotations

import os
import re
from typing import Dict, NamedTuple

_NUMBER_PREFIX_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

BULAN_ID: Dict[str, str] = {
    "Januari": "01", "Februari": "02", "Maret": "03", "April": "04",
    "Mei": "05", "Juni": "06", "Juli": "07", "Agustus": "08",
    "September": "09", "Oktober": "10", "November": "11", "Desember": "12",
}


def get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def clean_cell(text: str) -> str:
    """Collapse non-breaking spaces and trim."""
    return (text or "").replace("\u00a0", " ").strip()


def parse_indonesian_number(raw: str) -> float:
    """
    Parse "16.211,50" style numbers (dot thousands, comma decimal).

    Only the leading numeric part is used ("12,5 %" -> 12.5); anything
    without a numeric prefix parses to 0.0.
    """
    normalized = (raw or "").strip().replace(".", "").replace(",", ".", 1)
    match = _NUMBER_PREFIX_RE.match(normalized)
    if not match:
        return 0.0
    return float(match.group(0))


def format_indonesian(num: float) -> str:
    """Format with two decimals, "." for thousands and "," for decimals."""
    text = f"{num:,.2f}"
    return text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")


def convert_tanggal(tanggal: str) -> str:
    """Convert "13 Februari 2026" to "13/02/2026"; other shapes are returned unchanged."""
    parts = tanggal.strip().split(" ")
    if len(parts) != 3:
        return tanggal
    dd, bulan, yyyy = parts
    mm = BULAN_ID.get(bulan, "00")
    return f"{dd.zfill(2)}/{mm}/{yyyy}"


class DateRange(NamedTuple):
    mulai: str
    selesai: str
    format_mulai: str
    format_selesai: str


def parse_date_range(text: str) -> DateRange:
    """Split "18 Februari 2026 - 24 Februari 2026" into its endpoints."""
    parts = [p.strip() for p in text.split(" - ")]
    if len(parts) != 2:
        return DateRange(text, text, text, text)
    return DateRange(parts[0], parts[1], convert_tanggal(parts[0]), convert_tanggal(parts[1]))

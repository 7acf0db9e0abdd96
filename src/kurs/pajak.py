"""
Ministry of Finance tax exchange rates (Kurs Pajak).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

import requests
import urllib3
from bs4 import BeautifulSoup

from .errors import KursScrapeError
from .utils import (
    clean_cell,
    format_indonesian,
    get_env_int,
    parse_date_range,
    parse_indonesian_number,
)

logger = logging.getLogger(__name__)

PAJAK_URL = "https://fiskal.kemenkeu.go.id/informasi-publik/kurs-pajak"
PAJAK_TIMEOUT_SECONDS = get_env_int("KURS_PAJAK_TIMEOUT_SECONDS", 15)
PAJAK_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}
VALIDITY_LABEL = "Tanggal Berlaku:"

_CODE_BRACKET_RE = re.compile(r"\((\w{3})\)")
_CODE_TRAILING_RE = re.compile(r"\b([A-Z]{3})$")
_SPACES_RE = re.compile(r"\s+")

# Rates for these currencies are quoted per 100 units.
PER_HUNDRED = {"JPY"}


@dataclass
class KursPajakRow:
    mata_uang: str
    mata_uang_name: str
    nilai: str
    kurs: str
    perubahan: str


@dataclass
class KursPajakResult:
    tanggal: str
    tanggal_mulai: str
    tanggal_selesai: str
    tanggal_format_mulai: str
    tanggal_format_selesai: str
    data: List[KursPajakRow] = field(default_factory=list)


def split_currency(full_name: str) -> tuple[str, str]:
    """Return (code, display name) for e.g. "Dolar Amerika Serikat (USD)"; code is "" if absent."""
    match = _CODE_BRACKET_RE.search(full_name) or _CODE_TRAILING_RE.search(full_name)
    if not match:
        return "", full_name
    name = _CODE_BRACKET_RE.sub("", full_name, count=1)
    name = _CODE_TRAILING_RE.sub("", name)
    return match.group(1), _SPACES_RE.sub(" ", name).strip()


def _find_validity(soup: BeautifulSoup) -> str:
    tanggal = ""
    for el in soup.select(".text-muted"):
        text = clean_cell(el.get_text())
        if VALIDITY_LABEL in text:
            tanggal = text.replace(VALIDITY_LABEL, "").strip()
    return tanggal


def parse_kurs_pajak(html: str) -> KursPajakResult:
    """Extract the validity period and rate table from the Kurs Pajak page."""
    soup = BeautifulSoup(html, "html.parser")

    tanggal = _find_validity(soup)
    if not tanggal:
        raise KursScrapeError("Tanggal berlaku tidak ditemukan")
    period = parse_date_range(tanggal)

    table = soup.select_one(".table")
    if table is None:
        raise KursScrapeError("Tabel kurs pajak tidak ditemukan. Struktur halaman mungkin berubah.")

    rows: List[KursPajakRow] = []
    trs = table.find_all("tr")
    for index, tr in enumerate(trs):
        if index == 0:
            continue
        cols = tr.find_all("td")
        if len(cols) < 3:
            continue
        # Four-column layout leads with a row number.
        offset = 1 if len(cols) >= 4 else 0
        full_name = clean_cell(cols[offset].get_text())
        kurs_raw = cols[offset + 1].get_text().strip()
        perubahan_raw = cols[offset + 2].get_text().strip()
        if not full_name or not kurs_raw:
            continue

        code, name = split_currency(full_name)
        if not code:
            continue
        perubahan = parse_indonesian_number(perubahan_raw) if perubahan_raw else 0.0
        rows.append(
            KursPajakRow(
                mata_uang=code,
                mata_uang_name=name,
                nilai="100" if code in PER_HUNDRED else "1",
                kurs=format_indonesian(parse_indonesian_number(kurs_raw)),
                perubahan=format_indonesian(perubahan),
            )
        )

    logger.info("Kurs pajak: %d table rows, %d parsed", len(trs), len(rows))
    if not rows:
        raise KursScrapeError(
            "Tidak ada data kurs yang berhasil diparse. Struktur tabel mungkin berubah."
        )

    return KursPajakResult(
        tanggal=tanggal,
        tanggal_mulai=period.mulai,
        tanggal_selesai=period.selesai,
        tanggal_format_mulai=period.format_mulai,
        tanggal_format_selesai=period.format_selesai,
        data=rows,
    )


def fetch_kurs_pajak(session: Optional[requests.Session] = None) -> KursPajakResult:
    """Download and parse the current Kurs Pajak period. TLS verification is off for this host."""
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    http = session or requests
    response = http.get(
        PAJAK_URL,
        headers=PAJAK_HEADERS,
        timeout=PAJAK_TIMEOUT_SECONDS,
        verify=False,
    )
    response.raise_for_status()
    return parse_kurs_pajak(response.text)

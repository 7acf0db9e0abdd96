"""
Bank Indonesia transaction rates (Kurs Transaksi BI).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from .errors import KursScrapeError
from .utils import (
    BULAN_ID,
    clean_cell,
    convert_tanggal,
    format_indonesian,
    get_env_int,
    parse_indonesian_number,
)

logger = logging.getLogger(__name__)

BI_URL = "https://www.bi.go.id/id/statistik/informasi-kurs/transaksi-bi/default.aspx"
BI_TABLE_SELECTOR = (
    "#ctl00_PlaceHolderMain_g_6c89d4ad_107f_437d_bd54_8fda17b556bf_ctl00_GridView1"
)
BI_TIMEOUT_SECONDS = get_env_int("KURS_BI_TIMEOUT_SECONDS", 20)
BI_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "id-ID,id;q=0.9,en;q=0.8",
    "Connection": "keep-alive",
}

_SPAN_DATE_RE = re.compile(r"(\d{1,2}\s\w+\s\d{4})")
_BODY_DATE_RE = re.compile(r"(\d{1,2}\s(?:" + "|".join(BULAN_ID) + r")\s\d{4})")


@dataclass
class KursBIRow:
    mata_uang: str
    nilai: str
    kurs_jual: str
    kurs_beli: str
    kurs_tengah: str


@dataclass
class KursBIResult:
    tanggal: str
    tanggal_format: str
    data: List[KursBIRow] = field(default_factory=list)


def _find_tanggal(soup: BeautifulSoup) -> str:
    tanggal = ""
    for span in soup.select("div.text-left span"):
        text = span.get_text().strip()
        if any(bulan in text for bulan in BULAN_ID):
            match = _SPAN_DATE_RE.search(text)
            if match:
                tanggal = match.group(1)
    if tanggal:
        return tanggal
    body = soup.body or soup
    match = _BODY_DATE_RE.search(body.get_text())
    return match.group(1) if match else ""


def parse_kurs_bi(html: str) -> KursBIResult:
    """Extract the publication date and rate table from a BI rates page."""
    soup = BeautifulSoup(html, "html.parser")
    tanggal = _find_tanggal(soup)

    table = soup.select_one(BI_TABLE_SELECTOR)
    if table is None:
        raise KursScrapeError("Tabel kurs BI tidak ditemukan. Struktur halaman mungkin berubah.")

    rows: List[KursBIRow] = []
    for index, tr in enumerate(table.find_all("tr")):
        if index == 0:
            continue
        cols = tr.find_all("td")
        if len(cols) < 4:
            continue
        mata_uang, nilai, jual, beli = (clean_cell(c.get_text()) for c in cols[:4])
        if not mata_uang:
            continue
        tengah = (parse_indonesian_number(jual) + parse_indonesian_number(beli)) / 2
        rows.append(
            KursBIRow(
                mata_uang=mata_uang,
                nilai=nilai,
                kurs_jual=jual,
                kurs_beli=beli,
                kurs_tengah=format_indonesian(tengah),
            )
        )
    logger.debug("Parsed %d BI rate rows for %s", len(rows), tanggal or "unknown date")
    return KursBIResult(tanggal=tanggal, tanggal_format=convert_tanggal(tanggal), data=rows)


def fetch_kurs_bi(session: Optional[requests.Session] = None) -> KursBIResult:
    """Download and parse today's BI transaction rates."""
    http = session or requests
    response = http.get(BI_URL, headers=BI_HEADERS, timeout=BI_TIMEOUT_SECONDS)
    response.raise_for_status()
    return parse_kurs_bi(response.text)

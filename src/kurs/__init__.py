"""
Exchange-rate scrapers for Bank Indonesia and Kurs Pajak tables.
"""

from .bi import KursBIResult, KursBIRow, fetch_kurs_bi, parse_kurs_bi
from .errors import KursScrapeError
from .pajak import KursPajakResult, KursPajakRow, fetch_kurs_pajak, parse_kurs_pajak, split_currency
from .utils import (
    BULAN_ID,
    convert_tanggal,
    format_indonesian,
    parse_date_range,
    parse_indonesian_number,
)

__all__ = [
    "BULAN_ID",
    "convert_tanggal",
    "fetch_kurs_bi",
    "fetch_kurs_pajak",
    "format_indonesian",
    "KursBIResult",
    "KursBIRow",
    "KursPajakResult",
    "KursPajakRow",
    "KursScrapeError",
    "parse_date_range",
    "parse_indonesian_number",
    "parse_kurs_bi",
    "parse_kurs_pajak",
    "split_currency",
]

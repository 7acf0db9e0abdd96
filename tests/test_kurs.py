"""
Tests for the BI and Kurs Pajak scrapers and their number/date helpers.
"""

from __future__ import annotations

import pytest

from src.kurs import (
    KursScrapeError,
    convert_tanggal,
    fetch_kurs_bi,
    fetch_kurs_pajak,
    format_indonesian,
    parse_date_range,
    parse_indonesian_number,
    parse_kurs_bi,
    parse_kurs_pajak,
    split_currency,
)
from src.kurs.bi import BI_URL
from src.kurs.pajak import PAJAK_URL
from src.kurs.utils import clean_cell, get_env_int

BI_HTML = """
<html><body>
  <div class="text-left"><span>Update Terakhir 13 Februari 2026</span></div>
  <table id="ctl00_PlaceHolderMain_g_6c89d4ad_107f_437d_bd54_8fda17b556bf_ctl00_GridView1">
    <tr><th>Mata Uang</th><th>Nilai</th><th>Kurs Jual</th><th>Kurs Beli</th><th></th></tr>
    <tr><td>USD </td><td>1</td><td>16.292,83</td><td>16.130,17</td><td></td></tr>
    <tr><td>JPY</td><td>100</td><td>10.598,12</td><td>10.491,88</td><td></td></tr>
    <tr><td colspan="4">Catatan</td></tr>
    <tr><td></td><td>1</td><td>1,00</td><td>1,00</td><td></td></tr>
  </table>
</body></html>
"""

PAJAK_HTML = """
<html><body>
  <p class="text-muted">Sumber: Kementerian Keuangan</p>
  <p class="text-muted">Tanggal Berlaku: 18 Februari 2026 - 24 Februari 2026</p>
  <table class="table">
    <tr><th>No</th><th>Mata Uang</th><th>Nilai</th><th>Perubahan</th></tr>
    <tr><td>1</td><td>Dolar Amerika Serikat (USD)</td><td>16.211,00</td><td>12,50</td></tr>
    <tr><td>2</td><td>Yen Jepang (JPY)</td><td>10.512,34</td><td>-5,00</td></tr>
    <tr><td>Euro EUR</td><td>17.650,20</td><td></td></tr>
    <tr><td>4</td><td>Lainnya</td><td>1,00</td><td>0</td></tr>
  </table>
</body></html>
"""


class _FakeResponse:
    def __init__(self, text: str):
        self.text = text

    def raise_for_status(self) -> None:
        return None


class _FakeSession:
    def __init__(self, text: str):
        self.text = text
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return _FakeResponse(self.text)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("16.211,50", 16211.5),
        ("1.000.000", 1000000.0),
        ("-12,5", -12.5),
        ("12,5 %", 12.5),
        ("", 0.0),
        ("n/a", 0.0),
    ],
)
def test_parse_indonesian_number(raw, expected):
    assert parse_indonesian_number(raw) == pytest.approx(expected)


def test_format_indonesian():
    assert format_indonesian(16211.5) == "16.211,50"
    assert format_indonesian(1234567.891) == "1.234.567,89"
    assert format_indonesian(0) == "0,00"
    assert format_indonesian(-5) == "-5,00"


def test_convert_tanggal():
    assert convert_tanggal("13 Februari 2026") == "13/02/2026"
    assert convert_tanggal("5 Mei 2026") == "05/05/2026"
    assert convert_tanggal("13 Smarch 2026") == "13/00/2026"
    assert convert_tanggal("Februari 2026") == "Februari 2026"


def test_parse_date_range():
    period = parse_date_range("18 Februari 2026 - 24 Februari 2026")
    assert period.mulai == "18 Februari 2026"
    assert period.selesai == "24 Februari 2026"
    assert period.format_mulai == "18/02/2026"
    assert period.format_selesai == "24/02/2026"
    single = parse_date_range("18 Februari 2026")
    assert single.mulai == single.selesai == "18 Februari 2026"


def test_clean_cell():
    assert clean_cell(" USD  ") == "USD"
    assert clean_cell(None) == ""


def test_get_env_int(monkeypatch):
    monkeypatch.setenv("KURS_TEST_TIMEOUT", "42")
    assert get_env_int("KURS_TEST_TIMEOUT", 5) == 42
    monkeypatch.setenv("KURS_TEST_TIMEOUT", "lama")
    assert get_env_int("KURS_TEST_TIMEOUT", 5) == 5
    monkeypatch.delenv("KURS_TEST_TIMEOUT")
    assert get_env_int("KURS_TEST_TIMEOUT", 5) == 5


def test_split_currency():
    assert split_currency("Dolar Amerika Serikat (USD)") == ("USD", "Dolar Amerika Serikat")
    assert split_currency("Euro EUR") == ("EUR", "Euro")
    assert split_currency("Lainnya") == ("", "Lainnya")


def test_parse_kurs_bi():
    result = parse_kurs_bi(BI_HTML)
    assert result.tanggal == "13 Februari 2026"
    assert result.tanggal_format == "13/02/2026"
    assert [r.mata_uang for r in result.data] == ["USD", "JPY"]
    usd = result.data[0]
    assert usd.nilai == "1"
    assert usd.kurs_jual == "16.292,83"
    assert usd.kurs_beli == "16.130,17"
    assert usd.kurs_tengah == "16.211,50"
    assert result.data[1].kurs_tengah == "10.545,00"


def test_parse_kurs_bi_date_from_body_text():
    html = BI_HTML.replace(
        '<div class="text-left"><span>Update Terakhir 13 Februari 2026</span></div>',
        "<p>Kurs per 2 Maret 2026</p>",
    )
    result = parse_kurs_bi(html)
    assert result.tanggal == "2 Maret 2026"
    assert result.tanggal_format == "02/03/2026"


def test_parse_kurs_bi_missing_table():
    with pytest.raises(KursScrapeError, match="Tabel kurs BI tidak ditemukan"):
        parse_kurs_bi("<html><body><p>Maintenance</p></body></html>")


def test_parse_kurs_pajak():
    result = parse_kurs_pajak(PAJAK_HTML)
    assert result.tanggal == "18 Februari 2026 - 24 Februari 2026"
    assert result.tanggal_mulai == "18 Februari 2026"
    assert result.tanggal_selesai == "24 Februari 2026"
    assert result.tanggal_format_mulai == "18/02/2026"
    assert result.tanggal_format_selesai == "24/02/2026"

    assert [r.mata_uang for r in result.data] == ["USD", "JPY", "EUR"]
    usd, jpy, eur = result.data
    assert usd.mata_uang_name == "Dolar Amerika Serikat"
    assert usd.nilai == "1"
    assert usd.kurs == "16.211,00"
    assert usd.perubahan == "12,50"
    assert jpy.nilai == "100"
    assert jpy.perubahan == "-5,00"
    assert eur.mata_uang_name == "Euro"
    assert eur.kurs == "17.650,20"
    assert eur.perubahan == "0,00"


def test_parse_kurs_pajak_missing_validity():
    html = PAJAK_HTML.replace("Tanggal Berlaku:", "Periode:")
    with pytest.raises(KursScrapeError, match="Tanggal berlaku tidak ditemukan"):
        parse_kurs_pajak(html)


def test_parse_kurs_pajak_missing_table():
    html = '<p class="text-muted">Tanggal Berlaku: 18 Februari 2026 - 24 Februari 2026</p>'
    with pytest.raises(KursScrapeError, match="Tabel kurs pajak tidak ditemukan"):
        parse_kurs_pajak(html)


def test_parse_kurs_pajak_no_rows():
    html = (
        '<p class="text-muted">Tanggal Berlaku: 18 Februari 2026 - 24 Februari 2026</p>'
        '<table class="table"><tr><th>Mata Uang</th></tr>'
        "<tr><td>1</td><td>Lainnya</td><td>1,00</td><td>0</td></tr></table>"
    )
    with pytest.raises(KursScrapeError, match="Tidak ada data kurs"):
        parse_kurs_pajak(html)


def test_fetch_kurs_bi_uses_session():
    session = _FakeSession(BI_HTML)
    result = fetch_kurs_bi(session=session)
    assert result.tanggal == "13 Februari 2026"
    url, kwargs = session.calls[0]
    assert url == BI_URL
    assert "User-Agent" in kwargs["headers"]


def test_fetch_kurs_pajak_skips_tls_verification():
    session = _FakeSession(PAJAK_HTML)
    result = fetch_kurs_pajak(session=session)
    assert len(result.data) == 3
    url, kwargs = session.calls[0]
    assert url == PAJAK_URL
    assert kwargs["verify"] is False

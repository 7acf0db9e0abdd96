"""
Title normalisation and tokenisation for keyword extraction.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Iterable, List, Optional

CDATA_RE = re.compile(r"<!\[cdata\[|\]\]>", re.IGNORECASE)
NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)

STOPWORDS = frozenset({
    "gara", "juta", "video", "jadi", "tembus", "harga", "yang", "dan", "di", "ke",
    "dari", "ini", "itu", "dengan", "untuk", "pada", "adalah", "akan", "telah",
    "atau", "bisa", "dapat", "sudah", "juga", "oleh", "dalam", "tidak", "ada",
    "hal", "saat", "lebih", "seperti", "antara", "karena",
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "her", "was",
    "one", "our", "out", "day", "get", "has", "him", "his", "how", "man", "new",
    "now", "old", "see", "two", "way", "who", "boy", "did", "its", "let", "put",
    "say", "she", "too", "use",
    "sebagai", "tersebut", "bahwa", "saya", "kami", "soal", "buka", "suara",
    "kata", "beri", "usai", "kali", "per", "hingga", "agar", "atas", "bagi",
    "pun", "kini", "masih", "sekitar", "bila", "meski",
})


def normalize_title(text: str) -> str:
    """Lower-case, drop CDATA markers and turn punctuation into spaces."""
    text = (text or "").lower()
    text = CDATA_RE.sub("", text)
    return NON_WORD_RE.sub(" ", text)


def iter_tokens(
    text: str,
    stop_words: Optional[AbstractSet[str]] = None,
    min_length: int = 3,
) -> Iterable[str]:
    """Yield title tokens that are long enough and not stop words."""
    if stop_words is None:
        stop_words = STOPWORDS
    for tok in normalize_title(text).split():
        if len(tok) < min_length:
            continue
        if tok in stop_words:
            continue
        yield tok


def tokenize(
    text: str,
    stop_words: Optional[AbstractSet[str]] = None,
    min_length: int = 3,
) -> List[str]:
    return list(iter_tokens(text, stop_words, min_length))

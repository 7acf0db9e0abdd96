"""
Tests for corpus statistics, scoring and diversity selection.
"""

from __future__ import annotations

import datetime as dt
import math

import pytest

from src.trending import (
    CorpusStats,
    NewsItem,
    Ngram,
    ScoredTerm,
    build_corpus_stats,
    has_overlap,
    score_terms,
    select_diverse,
)

NOW = dt.datetime(2026, 2, 13, 12, 0, tzinfo=dt.timezone.utc)


def _scored(term: str, score: float) -> ScoredTerm:
    kind = "bigram" if " " in term else "unigram"
    return ScoredTerm(
        term=term,
        kind=kind,
        score=score,
        term_frequency=1.0,
        document_frequency=1,
        idf=1.0,
    )


def test_add_document_dedupes_document_terms_but_not_frequency():
    stats = CorpusStats()
    ngrams = [Ngram("saham", "unigram", 1.0), Ngram("saham", "unigram", 1.0)]
    seen = stats.add_document(ngrams, time_weight=0.7)

    assert seen == {"saham"}
    assert stats.df("saham") == 1
    assert stats.terms["saham"].term_frequency == pytest.approx(1.4)
    assert stats.terms["saham"].total_recency_weight == pytest.approx(1.4)


def test_documents_without_terms_still_count():
    stats = CorpusStats()
    stats.add_document([], time_weight=1.0)
    stats.add_document([Ngram("emas", "unigram", 1.0)], time_weight=1.0)
    assert stats.total_documents == 2
    assert stats.document_terms[0] == set()


def test_every_term_belongs_to_some_document():
    items = [
        NewsItem("Rupiah Melemah Terhadap Dolar", NOW),
        NewsItem("Emas Antam Naik", NOW),
        NewsItem("di ke", NOW),
    ]
    stats = build_corpus_stats(items, NOW)
    in_docs = set().union(*stats.document_terms)
    assert set(stats.terms) == in_docs
    for term in stats.terms:
        assert stats.df(term) == sum(term in doc for doc in stats.document_terms)


def test_document_order_does_not_change_totals():
    items = [
        NewsItem("Saham Bank Menguat Tajam", NOW - dt.timedelta(hours=2)),
        NewsItem("Saham Teknologi Anjlok", NOW - dt.timedelta(hours=20)),
        NewsItem("Bank Sentral Tahan Suku Bunga", None),
    ]
    forward = build_corpus_stats(items, NOW)
    backward = build_corpus_stats(list(reversed(items)), NOW)
    assert forward.document_frequency == backward.document_frequency
    for term, data in forward.terms.items():
        other = backward.terms[term]
        assert data.term_frequency == pytest.approx(other.term_frequency)
        assert data.total_recency_weight == pytest.approx(other.total_recency_weight)


def test_score_formula_matches_components():
    items = [
        NewsItem("Emas Antam Naik", NOW),
        NewsItem("Emas Antam Turun", NOW),
        NewsItem("Rupiah Stabil", NOW - dt.timedelta(hours=8)),
        NewsItem("Ekspor Batubara Meningkat", NOW),
    ]
    scored = score_terms(build_corpus_stats(items, NOW))

    bigram = scored["emas antam"]
    tf = 2 * 1.3
    idf = math.log(4 / 3)
    expected = tf * idf * (1 + 2 / tf) * 1.3
    assert bigram.kind == "bigram"
    assert bigram.document_frequency == 2
    assert bigram.idf == pytest.approx(idf)
    assert bigram.score == pytest.approx(expected)

    unigram = scored["rupiah"]
    tf = 0.7
    expected = tf * math.log(4 / 2) * (1 + 0.7 / 1.0)
    assert unigram.score == pytest.approx(expected)


def test_score_empty_corpus():
    assert score_terms(CorpusStats()) == {}


def test_single_document_scores_are_negative_but_finite():
    scored = score_terms(build_corpus_stats([NewsItem("Rupiah Menguat", NOW)], NOW))
    assert scored
    for s in scored.values():
        assert math.isfinite(s.score)
        assert s.score < 0


def test_has_overlap():
    assert has_overlap("emas antam", "antam")
    assert has_overlap("naik tajam", "harga naik")
    assert not has_overlap("emas antam", "naik tajam")
    assert not has_overlap("emas", "emasnya")


def test_select_diverse_skips_overlapping_terms():
    scored = [
        _scored("emas antam", 9.0),
        _scored("antam", 8.0),
        _scored("naik tajam", 7.0),
        _scored("emas", 6.0),
        _scored("rupiah", 5.0),
    ]
    selected = select_diverse(scored)
    assert [s.term for s in selected] == ["emas antam", "naik tajam", "rupiah"]


def test_select_diverse_breaks_ties_lexically():
    scored = [_scored("saham", 2.0), _scored("bunga", 2.0), _scored("dolar", 2.0)]
    assert [s.term for s in select_diverse(scored)] == ["bunga", "dolar", "saham"]


def test_select_diverse_limit():
    scored = [_scored(f"kata{i:02d}", float(i)) for i in range(25)]
    selected = select_diverse(scored, limit=10)
    assert len(selected) == 10
    assert selected[0].term == "kata24"
    assert select_diverse(scored, limit=0) == []

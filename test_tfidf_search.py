#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Test TF-IDF term scoring
"""

import math

import pytest

from TermRetriever.build_inverted_index import InvertedIndex
from TermRetriever.main import SAMPLE_DOCUMENTS
from TermRetriever.preprocessing.document import Document
from TermRetriever.tfidf_search.tfidf_search import (
    TFIDFScorer,
    compute_corpus_size,
    compute_document_length,
    compute_idf,
    compute_tf,
)


@pytest.fixture
def index():
    inverted_index = InvertedIndex()
    inverted_index.build(SAMPLE_DOCUMENTS)
    return inverted_index


@pytest.fixture
def scorer(index):
    return TFIDFScorer(index)


def test_wild_in_document_five_is_positive(scorer):
    score = scorer.score("wild", 5)

    assert score > 0
    assert score == pytest.approx(0.25 * math.log(5))


def test_fox_in_document_one(scorer):
    # 1 occurrence out of 9 tokens, fox occurs in 3 of 5 documents
    assert scorer.score("fox", 1) == pytest.approx(math.log(5 / 3) / 9)


def test_quick_in_document_three(scorer):
    assert scorer.score("quick", 3) == pytest.approx(math.log(5 / 2) / 6)


def test_repeated_term_counts_every_occurrence(scorer):
    assert scorer.score("the", 1) == pytest.approx(2 / 9 * math.log(5 / 3))


def test_query_is_not_stemmed(scorer):
    assert scorer.score("lazy", 2) == 0.0
    assert scorer.score("LAZI", 2) == pytest.approx(math.log(5 / 2) / 5)


def test_missing_term_scores_zero(scorer):
    assert scorer.score("unicorn", 1) == 0.0


def test_term_absent_from_document_scores_zero(scorer):
    assert scorer.score("wild", 1) == 0.0
    assert scorer.score("wild", 99) == 0.0


def test_unbuilt_index_scores_zero():
    assert TFIDFScorer(InvertedIndex()).score("fox", 1) == 0.0
    assert TFIDFScorer(None).score("fox", 1) == 0.0


def test_term_in_every_document_scores_zero():
    inverted_index = InvertedIndex()
    inverted_index.build([Document(id=1, content="fox runs"), Document(id=2, content="fox sits")])

    assert TFIDFScorer(inverted_index).score("fox", 1) == 0.0


def test_scores_do_not_depend_on_document_order(index, scorer):
    reversed_index = InvertedIndex()
    reversed_index.build(list(reversed(SAMPLE_DOCUMENTS)))
    reversed_scorer = TFIDFScorer(reversed_index)

    for term in index.terms():
        for doc in SAMPLE_DOCUMENTS:
            assert reversed_scorer.score(term, doc.id) == pytest.approx(scorer.score(term, doc.id))


def test_scorer_follows_rebuild(index, scorer):
    index.build([Document(id=1, content="wild fox"), Document(id=2, content="tame dog")])

    assert scorer.score("wild", 5) == 0.0
    assert scorer.score("wild", 1) == pytest.approx(0.5 * math.log(2))


def test_corpus_statistics(index):
    assert compute_corpus_size(index.index) == 5
    assert compute_document_length(index.index, 1) == 9
    assert compute_document_length(index.index, 4) == 4
    assert compute_document_length(index.index, 99) == 0


def test_formula_helpers():
    assert compute_tf(1, 4) == 0.25
    assert compute_tf(1, 0) == 0.0
    assert compute_idf(5, 5) == 0.0
    assert compute_idf(5, 0) == 0.0
    assert compute_idf(4, 1) == pytest.approx(math.log(4))

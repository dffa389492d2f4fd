"""
TF-IDF relevance scoring of a single term against a single document.
"""
import logging
import math
from typing import Dict, List

from ..build_inverted_index import InvertedIndex

logger = logging.getLogger(__name__)


def count_occurrences(doc_ids: List[int], doc_id: int) -> int:
    return doc_ids.count(doc_id)


def compute_document_length(index: Dict[str, List[int]], doc_id: int) -> int:
    """
    Count the postings attributed to a document across every term,
    i.e. the number of indexed tokens of the document.
    """
    return sum(count_occurrences(doc_ids, doc_id) for doc_ids in index.values())


def compute_corpus_size(index: Dict[str, List[int]]) -> int:
    """Number of distinct documents present anywhere in the index."""
    all_docs = set()
    for doc_ids in index.values():
        all_docs.update(doc_ids)
    return len(all_docs)


def compute_tf(term_count: int, document_length: int) -> float:
    """
    Compute term frequency.
    TF(t,d) = f(t,d) / |d|

    Args:
        term_count: Occurrences of the term in the document
        document_length: Number of indexed tokens of the document

    Returns:
        TF value, 0 for an empty document
    """
    if document_length == 0:
        return 0.0
    return term_count / document_length


def compute_idf(corpus_size: int, document_frequency: int) -> float:
    """
    Compute inverse document frequency.
    IDF(t) = ln(N / DF(t)), without smoothing

    Args:
        corpus_size: Number of documents in the index
        document_frequency: Number of documents containing the term

    Returns:
        IDF value, 0 when the term occurs in no document
    """
    if document_frequency == 0:
        return 0.0
    return math.log(corpus_size / document_frequency)


class TFIDFScorer:
    """
    Scores term relevance per document from the statistics of an inverted index.

    Corpus statistics are recomputed from the index on every call, so the scorer
    always reflects the latest build.
    """

    def __init__(self, inverted_index: InvertedIndex):
        self.inverted_index = inverted_index

    def score(self, term: str, doc_id: int) -> float:
        """
        Compute the TF-IDF score of a term in a document.

        Args:
            term: Query term (lower-cased, not stemmed)
            doc_id: Document identifier

        Returns:
            TF-IDF score, 0.0 whenever the term or the document is not found
        """
        index = self.inverted_index.index if self.inverted_index is not None else None
        if not index:
            return 0.0

        token = InvertedIndex.normalize_query(term)
        postings = index.get(token)
        if postings is None:
            return 0.0

        term_count = count_occurrences(postings, doc_id)
        if term_count == 0:
            return 0.0

        document_length = compute_document_length(index, doc_id)
        if document_length == 0:
            return 0.0

        tf = compute_tf(term_count, document_length)
        idf = compute_idf(compute_corpus_size(index), len(set(postings)))

        logger.debug("TF-IDF(%r, %r): tf=%.6f idf=%.6f", token, doc_id, tf, idf)
        return tf * idf

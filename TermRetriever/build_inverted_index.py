import logging
import time
from typing import Dict, Iterable, List

from TermRetriever.config import load_config
from TermRetriever.preprocessing.document import Document
from TermRetriever.preprocessing.preprocess import TermTokenizer

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Inverted index mapping each term to the IDs of the documents it occurs in.

    Posting lists hold one entry per occurrence, in document input order, so a
    document mentioning a term twice appears twice.
    """

    def __init__(self, config=None, tokenizer: TermTokenizer = None):
        """
        Initialize an empty index.

        Args:
            config: Configuration dictionary (loaded from config.json if not provided)
            tokenizer: Term tokenizer overriding the one described by the config
        """
        self.config = config or load_config()
        self.tokenizer = tokenizer or TermTokenizer.from_config(self.config)
        self.index: Dict[str, List[int]] = {}

    def tokenize(self, text: str) -> List[str]:
        return self.tokenizer.tokenize(text)

    def build(self, documents: Iterable[Document]) -> Dict[str, List[int]]:
        """
        Build the index from a collection of documents, replacing any previous state.

        Args:
            documents: Documents (or {"id", "content"} dicts) in indexing order

        Returns:
            The term -> document IDs mapping now held by the index
        """
        start_time = time.time()
        postings: Dict[str, List[int]] = {}
        document_count = 0

        for doc in documents:
            if isinstance(doc, dict):
                doc = Document.from_dict(doc)
            self._index_document(postings, doc)
            document_count += 1

        self.index = postings

        logger.info(
            "Indexed %d documents into %d terms (%d postings) in %.4f seconds",
            document_count, len(postings), sum(len(ids) for ids in postings.values()),
            time.time() - start_time
        )
        return self.index

    def _index_document(self, postings: Dict[str, List[int]], document: Document):
        for term in self.tokenize(document.content):
            postings.setdefault(term, []).append(document.id)

    @staticmethod
    def normalize_query(term: str) -> str:
        # Queries are only lower-cased, never stemmed
        return term.lower()

    def search(self, term: str) -> List[int]:
        """
        Look up the posting list of a term.

        Args:
            term: Query term; must match an indexed term after lower-casing

        Returns:
            Document IDs containing the term (one per occurrence), or an empty list
        """
        token = self.normalize_query(term)
        doc_ids = self.index.get(token)
        if doc_ids is None:
            logger.debug("Term %r not found in index", token)
            return []
        return doc_ids

    def terms(self) -> List[str]:
        return list(self.index.keys())

    def document_ids(self) -> List[int]:
        """Distinct document IDs present in the index, sorted."""
        all_docs = set()
        for doc_ids in self.index.values():
            all_docs.update(doc_ids)
        return sorted(all_docs)

    def sample(self, sample_size: int = 10) -> Dict[str, List[int]]:
        """Return the first terms of the index in alphabetical order."""
        return {term: self.index[term] for term in sorted(self.index)[:sample_size]}

    def is_empty(self) -> bool:
        return not self.index

    def __len__(self):
        return len(self.index)

    def __contains__(self, term):
        return self.normalize_query(term) in self.index

from .preprocessing.document import Document
from .preprocessing.preprocess import TermTokenizer
from .preprocessing.stemming import Stemmer, SnowballStemmer, IdentityStemmer
from .build_inverted_index import InvertedIndex
from .tfidf_search.tfidf_search import TFIDFScorer

__all__ = [
    "Document",
    "TermTokenizer",
    "Stemmer",
    "SnowballStemmer",
    "IdentityStemmer",
    "InvertedIndex",
    "TFIDFScorer",
]

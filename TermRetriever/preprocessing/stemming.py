"""
Stemmers reducing tokens to their root form.

Every stemmer fails soft: a token it cannot process is returned unchanged.
"""
import logging
from abc import ABC, abstractmethod

from nltk.stem.snowball import SnowballStemmer as _NltkSnowballStemmer

logger = logging.getLogger(__name__)


class Stemmer(ABC):
    def stem(self, token: str) -> str:
        """
        Stem a single token, falling back to the token itself on failure.

        Args:
            token: Lower-cased token

        Returns:
            Root form of the token
        """
        try:
            stemmed = self._stem(token)
        except Exception as e:
            logger.debug("Stemming failed for %r (%s), keeping raw token", token, e)
            return token
        return stemmed or token

    @abstractmethod
    def _stem(self, token: str) -> str:
        raise NotImplementedError()


class IdentityStemmer(Stemmer):
    """Stemmer that leaves every token untouched."""

    def _stem(self, token: str) -> str:
        return token


class SnowballStemmer(Stemmer):
    """Snowball (Porter2 for English) stemmer backed by nltk."""

    def __init__(self, language: str = "english"):
        if language not in _NltkSnowballStemmer.languages:
            raise ValueError(f"Unsupported stemming language: {language}")
        self.language = language
        # Stop words are stemmed like any other token
        self._stemmer = _NltkSnowballStemmer(language, ignore_stopwords=False)

    def _stem(self, token: str) -> str:
        return self._stemmer.stem(token)


def create_stemmer(config: dict = None) -> Stemmer:
    """
    Create a stemmer from the "stemming" configuration section.

    Args:
        config: Dictionary with "use" and "language" keys

    Returns:
        Stemmer instance
    """
    config = config or {}
    if not config.get("use", True):
        return IdentityStemmer()
    return SnowballStemmer(config.get("language", "english"))

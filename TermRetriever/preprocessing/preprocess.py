from abc import ABC, abstractmethod

from .tokenizer import Token, Tokenizer, PunctuationSplitTokenizer
from .stemming import Stemmer, create_stemmer


class TokenPreprocessor(ABC):
    @abstractmethod
    def preprocess(self, token: Token, document: str) -> Token:
        raise NotImplementedError()

    def preprocess_all(self, tokens: list[Token], document: str) -> list[Token]:
        return [self.preprocess(token, document) for token in tokens]


class StemPreprocessor(TokenPreprocessor):
    """Preprocessor replacing each token with its stem."""

    def __init__(self, stemmer: Stemmer):
        self.stemmer = stemmer

    def preprocess(self, token: Token, document: str) -> Token:
        token.processed_form = self.stemmer.stem(token.processed_form)
        return token


class PreprocessingPipeline:
    """Pipeline of token preprocessors."""

    def __init__(self, preprocessors, name="Default Pipeline"):
        """
        Initialize a preprocessing pipeline.

        Args:
            preprocessors: List of preprocessor objects
            name: Name of the pipeline
        """
        self.preprocessors = preprocessors
        self.name = name

    def preprocess(self, tokens: list[Token], document: str) -> list[Token]:
        for preprocessor in self.preprocessors:
            preprocessor.preprocess_all(tokens, document)

        return tokens


class TermTokenizer:
    """
    Turns raw text into index terms: tokenization followed by the
    preprocessing pipeline (stemming).
    """

    def __init__(self, tokenizer: Tokenizer = None, pipeline: PreprocessingPipeline = None):
        self.tokenizer = tokenizer or PunctuationSplitTokenizer()
        self.pipeline = pipeline or PreprocessingPipeline([], name="NoPreprocessing")

    @classmethod
    def from_config(cls, config: dict) -> 'TermTokenizer':
        """
        Create a term tokenizer from the "preprocessing" and "stemming"
        configuration sections.

        Args:
            config: Configuration dictionary

        Returns:
            TermTokenizer object
        """
        # Index terms are always lower-cased; the Snowball stemmer lower-cases as well
        preproc_config = config.get("preprocessing", {})
        tokenizer = PunctuationSplitTokenizer(
            ascii_word_chars=preproc_config.get("ascii_word_chars", True),
        )
        preprocessors = [StemPreprocessor(create_stemmer(config.get("stemming", {})))]
        return cls(tokenizer, PreprocessingPipeline(preprocessors, name="IndexingPipeline"))

    def tokenize(self, text: str) -> list[str]:
        """
        Tokenize text into terms.

        Args:
            text: Raw text

        Returns:
            Terms in text order, duplicates preserved
        """
        tokens = self.tokenizer.tokenize(text)
        self.pipeline.preprocess(tokens, text)
        return [token.processed_form for token in tokens]

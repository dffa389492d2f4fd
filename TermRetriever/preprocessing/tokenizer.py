"""
Tokenizers turning raw document text into Token objects.
"""
import re
from abc import ABC, abstractmethod


class Token:
    """A single token with its original and processed form."""

    __slots__ = ("raw_form", "processed_form", "position")

    def __init__(self, raw_form: str, position: int):
        self.raw_form = raw_form
        self.processed_form = raw_form
        self.position = position

    def __repr__(self):
        return f"Token({self.raw_form!r} -> {self.processed_form!r} @ {self.position})"


class Tokenizer(ABC):
    @abstractmethod
    def tokenize(self, text: str) -> list[Token]:
        raise NotImplementedError()


class PunctuationSplitTokenizer(Tokenizer):
    """
    Lower-cases the text, turns every character that is neither a word
    character nor whitespace into a space and splits on whitespace.

    Punctuation becomes a separator, so "fox.dog" yields two tokens.
    """

    PATTERN = r"[^\w\s]"

    def __init__(self, lowercase: bool = True, ascii_word_chars: bool = True):
        """
        Initialize the tokenizer.

        Args:
            lowercase: Lower-case the whole text before splitting
            ascii_word_chars: Restrict word characters to [a-zA-Z0-9_]; any
                other letter is treated as punctuation
        """
        self.lowercase = lowercase
        self.ascii_word_chars = ascii_word_chars
        flags = re.ASCII if ascii_word_chars else 0
        self._separator = re.compile(self.PATTERN, flags)

    def normalize(self, text: str) -> str:
        if self.lowercase:
            text = text.lower()
        return self._separator.sub(" ", text)

    def tokenize(self, text: str) -> list[Token]:
        if not text:
            return []
        return [Token(word, position) for position, word in enumerate(self.normalize(text).split())]

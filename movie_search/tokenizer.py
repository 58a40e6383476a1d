"""
Word normalization and noise-word filtering.

This module turns raw description tokens into the normalized words that are
stored in the hash index, and normalizes movie titles read from disk.
"""

import re
from typing import Iterable, Iterator, Optional, Set, Tuple

# Characters stripped from the end of a token before it is validated
TRAILING_PUNCTUATION = frozenset(".,?:;!")

_TITLE_STRIP = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


def strip_trailing_punctuation(token: str) -> str:
    """Remove the maximal run of trailing punctuation from a token."""
    end = len(token)
    while end > 0 and token[end - 1] in TRAILING_PUNCTUATION:
        end -= 1
    return token[:end]


def normalize_title(title: str) -> str:
    """
    Normalize a movie title read from a corpus file.

    The title is lowercased, every character that is neither alphanumeric nor
    whitespace is removed and runs of whitespace collapse to a single space.
    """
    title = _TITLE_STRIP.sub("", title.lower())
    return _WHITESPACE.sub(" ", title).strip()


class Tokenizer:
    """Normalizes description words and filters out noise words."""

    def __init__(self, noise_words: Optional[Iterable[str]] = None):
        """Initialize with an optional collection of noise words."""
        self.noise_words: Set[str] = {w.lower() for w in (noise_words or ())}

    def normalize_query_word(self, token: str) -> Optional[str]:
        """
        Normalize a token without consulting the noise-word set.

        Args:
            token: Raw token.

        Returns:
            The lowercased token without trailing punctuation, or None if it
            is empty, all punctuation, or contains non-alphanumeric characters.
        """
        word = strip_trailing_punctuation(token).lower()
        if not word or not word.isalnum():
            return None
        return word

    def normalize_word(self, token: str) -> Optional[str]:
        """
        Normalize a description token for insertion into the index.

        Args:
            token: Raw token.

        Returns:
            The normalized word, or None if the token is rejected.
        """
        word = self.normalize_query_word(token)
        if word is None or word in self.noise_words:
            return None
        return word

    def is_noise_word(self, word: str) -> bool:
        return word.lower() in self.noise_words

    def tokenize_description(self, words: Iterable[str]) -> Iterator[Tuple[int, str]]:
        """
        Yield (position, word) for every accepted description word.

        Positions are 1-based and count every token, including rejected ones,
        so they reflect where the word appears in the original description.
        """
        for position, token in enumerate(words, start=1):
            word = self.normalize_word(token)
            if word is not None:
                yield position, word

"""
Chained hash table mapping words to the movies they occur in.

This module holds the inverted index: every normalized description word maps
to the ordered list of (title, position) locations where it was seen. The
table grows by rehashing whenever its load factor exceeds the configured
threshold.
"""

import logging
import math
import re
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Iterable, Iterator, List, Optional

from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class IndexConfigurationError(ValueError):
    """Raised when the index is created with an unusable size or threshold."""


@dataclass(frozen=True)
class Location:
    """A single mention of a word: the movie title and the word position."""

    title: str
    position: int

    def __str__(self):
        return f"({self.title}, {self.position})"


@dataclass
class WordOccurrence:
    """A word together with every location it was inserted at."""

    word: str
    locations: List[Location] = field(default_factory=list)

    def add_occurrence(self, location: Location) -> None:
        self.locations.append(location)

    def positions_in(self, title: str) -> List[int]:
        """Return the ascending positions of this word within one movie."""
        return [loc.position for loc in self.locations if loc.title == title]

    def __len__(self):
        return len(self.locations)

    def __str__(self):
        return f"{self.word}: [" + ", ".join(str(loc) for loc in self.locations) + "]"


def _check_size(size) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise IndexConfigurationError(f"hash size must be a positive integer, got {size!r}")


def fnv1a_hash(text: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 encoding of text."""
    h = FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def hash_word(word: str, size: int) -> int:
    """
    Map a word to a bucket index for a table with `size` slots.

    The word is lowercased and stripped of non-alphanumeric characters
    before hashing, so the same word always lands in the same slot for a
    given table size.
    """
    key = _NON_ALNUM.sub("", word.lower())
    return abs(fnv1a_hash(key)) % size


class HashIndex:
    """
    Inverted index stored in a separately chained hash table.

    Each bucket is a chain of WordOccurrence nodes. New words are pushed to
    the front of their chain; a word appears at most once across all chains.
    """

    def __init__(self, size: int, threshold: float, noise_words: Optional[Iterable[str]] = None):
        """
        Initialize an empty table.

        Args:
            size: Initial number of buckets, must be a positive integer.
            threshold: Load factor above which the table is rehashed.
            noise_words: Words that are never inserted.

        Raises:
            IndexConfigurationError: If size is not a positive integer or
                threshold is not a positive finite number.
        """
        _check_size(size)
        if (isinstance(threshold, bool) or not isinstance(threshold, (int, float))
                or not math.isfinite(threshold) or threshold <= 0):
            raise IndexConfigurationError(f"load factor threshold must be a positive finite number, got {threshold!r}")

        self.size = size
        self.threshold = float(threshold)
        self.word_count = 0
        self.buckets: List[Deque[WordOccurrence]] = self._empty_buckets(size)
        self.tokenizer = Tokenizer(noise_words)
        self.titles: List[str] = []

    @classmethod
    def from_config(cls, config: Any, noise_words: Optional[Iterable[str]] = None) -> "HashIndex":
        """Build an index sized from config.HASH_SIZE and config.LOAD_FACTOR_THRESHOLD."""
        return cls(config.HASH_SIZE, config.LOAD_FACTOR_THRESHOLD, noise_words)

    @staticmethod
    def _empty_buckets(size: int) -> List[Deque[WordOccurrence]]:
        return [deque() for _ in range(size)]

    @property
    def noise_words(self):
        return self.tokenizer.noise_words

    @property
    def load_factor(self) -> float:
        return self.word_count / self.size

    def bucket_index(self, word: str) -> int:
        return hash_word(word, self.size)

    def find(self, word: str) -> Optional[WordOccurrence]:
        """
        Look up the occurrence node for a normalized word.

        Args:
            word: Normalized word; comparison is exact.

        Returns:
            The matching WordOccurrence, or None if the word was never inserted.
        """
        for node in self.buckets[self.bucket_index(word)]:
            if node.word == word:
                return node
        return None

    def insert(self, word: str, location: Location) -> None:
        """
        Record that `word` occurs at `location`.

        Existing words get the location appended; new words get a fresh node
        at the front of their bucket chain. The table is rehashed afterwards
        if the load factor exceeds the threshold.
        """
        node = self.find(word)
        if node is None:
            node = WordOccurrence(word)
            self.buckets[self.bucket_index(word)].appendleft(node)
            self.word_count += 1
        node.add_occurrence(location)

        if self.load_factor > self.threshold:
            new_size = self.size * 2
            while self.word_count / new_size > self.threshold:
                new_size *= 2
            self.rehash(new_size)

    def index_movie(self, title: str, words: Iterable[str]) -> int:
        """
        Insert every accepted description word of one movie.

        Args:
            title: Movie title, stored verbatim in each Location.
            words: Raw description tokens in order.

        Returns:
            Number of words inserted.
        """
        inserted = 0
        for position, word in self.tokenizer.tokenize_description(words):
            self.insert(word, Location(title, position))
            inserted += 1
        self.titles.append(title)
        return inserted

    def rehash(self, new_size: int) -> None:
        """
        Rebuild the table with `new_size` buckets.

        Every node is relocated to the bucket its word hashes to under the new
        size and appended to the end of that chain. The new bucket array
        replaces the old one only once it is complete.
        """
        _check_size(new_size)

        new_buckets = self._empty_buckets(new_size)
        for chain in self.buckets:
            for node in chain:
                new_buckets[hash_word(node.word, new_size)].append(node)

        logger.debug(
            "Rehashed %d words from %d to %d buckets", self.word_count, self.size, new_size
        )
        self.buckets, self.size = new_buckets, new_size

    def words(self) -> Iterator[WordOccurrence]:
        """Iterate over every stored WordOccurrence, bucket by bucket."""
        for chain in self.buckets:
            yield from chain

    def __len__(self):
        return self.word_count

    def __contains__(self, word):
        return self.find(word) is not None

    def dump(self) -> str:
        """Render the bucket array as one `[slot]->word->word` line per slot."""
        lines = []
        for i, chain in enumerate(self.buckets):
            lines.append(f"[{i}]->" + "->".join(str(node) for node in chain))
        return "\n".join(lines)

    def print_table(self) -> None:
        print(self.dump())

    def get_stats(self) -> Dict[str, Any]:
        """
        Collect statistics about the table.

        Returns:
            Dictionary with size, word count, total occurrences, load factor,
            longest chain, number of empty buckets and number of movies.
        """
        chain_lengths = [len(chain) for chain in self.buckets]
        return {
            "hash_size": self.size,
            "word_count": self.word_count,
            "total_occurrences": sum(len(node) for node in self.words()),
            "load_factor": self.load_factor,
            "longest_chain": max(chain_lengths),
            "empty_buckets": chain_lengths.count(0),
            "num_movies": len(self.titles),
        }

    def summarize_index(self) -> None:
        """Print a summary of the hash index."""
        stats = self.get_stats()

        print("\n=== Hash Index Summary ===")
        print(f"Movies indexed: {stats['num_movies']}")
        print(f"Distinct words: {stats['word_count']}")
        print(f"Total occurrences: {stats['total_occurrences']}")
        print(f"Buckets: {stats['hash_size']} ({stats['empty_buckets']} empty)")
        print(f"Load factor: {stats['load_factor']:.2f} (threshold {self.threshold:.2f})")
        print(f"Longest chain: {stats['longest_chain']}")

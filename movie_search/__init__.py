"""
Movie Proximity Search Engine

An in-memory inverted index over movie descriptions, stored in a chained hash
table, answering two-word proximity queries.

Main components:
- MovieSearchEngine: Main search engine class
- HashIndex: Chained hash table of word occurrences with rehashing
- Ranker: Two-word aggregation, minimum distance and top-K ranking
- Tokenizer: Word normalization and noise-word filtering
- AutoCorrect: Query word correction using Levenshtein distance
- Utils: Corpus file reading and result formatting
"""

from .search_engine import MovieSearchEngine
from .indexer import HashIndex, IndexConfigurationError, Location, WordOccurrence
from .ranker import MovieSearchResult, Ranker
from .tokenizer import Tokenizer
from .autocorrect import AutoCorrect
from .utils import CorpusReader, ResultFormatter

__version__ = "1.0.0"

__all__ = [
    "MovieSearchEngine",
    "HashIndex",
    "IndexConfigurationError",
    "Location",
    "WordOccurrence",
    "MovieSearchResult",
    "Ranker",
    "Tokenizer",
    "AutoCorrect",
    "CorpusReader",
    "ResultFormatter",
]

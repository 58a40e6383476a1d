"""
Main MovieSearchEngine class that orchestrates the search pipeline.

This module contains the MovieSearchEngine class that coordinates corpus
loading, hash indexing and two-word proximity queries.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .autocorrect import AutoCorrect
from .indexer import HashIndex
from .ranker import MovieSearchResult, Ranker
from .tokenizer import Tokenizer
from .utils import CorpusReader, ResultFormatter
import config

logger = logging.getLogger(__name__)


class Config:
    """Configuration object: module defaults overlaid with overrides."""

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        for key in dir(config):
            if key.isupper():
                setattr(self, key, getattr(config, key))
        for key, value in (overrides or {}).items():
            setattr(self, key, value)


class MovieSearchEngine:
    """
    Search engine answering "which movies mention both words closest together?"

    Loads the noise words and the movie corpus, builds the hash index, and
    ranks movies by the minimum distance between two query words.
    """

    def __init__(self, movies_file: Optional[str] = None, noise_words_file: Optional[str] = None,
                 config_dict: Optional[Dict] = None):
        """
        Initialize the MovieSearchEngine.

        Args:
            movies_file: Corpus file of `title| words;` records. If None, uses config default.
            noise_words_file: Noise-word file. If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = Config(config_dict)

        self.movies_file = Path(movies_file) if movies_file else Path(self.config.MOVIES_FILE)
        self.noise_words_file = Path(noise_words_file) if noise_words_file else Path(self.config.NOISE_WORDS_FILE)

        self.reader = CorpusReader(self.config)
        self.ranker = Ranker(self.config)
        self.auto_correct = AutoCorrect(self.config)
        self.result_formatter = ResultFormatter(self.config)

        self.index: Optional[HashIndex] = None
        self.query_tokenizer = Tokenizer()

        self._index_built = False

    def build_index(self, force_rebuild: bool = False) -> HashIndex:
        """
        Build the hash index from the corpus files.

        Steps:
        1. Read noise words
        2. Read movie records
        3. Insert each movie's description words
        4. Build the vocabulary used for auto-correction

        Args:
            force_rebuild: If True, rebuild the index even if already built.

        Returns:
            The populated HashIndex.
        """
        if self._index_built and not force_rebuild:
            logger.info("Index already built; use force_rebuild=True to rebuild")
            return self.index

        noise_words = self.reader.read_noise_words(self.noise_words_file)
        logger.info("Loaded %d noise words from %s", len(noise_words), self.noise_words_file)

        movies = self.reader.read_movies(self.movies_file)
        logger.info("Loaded %d movies from %s", len(movies), self.movies_file)

        self.index = self.index_movies(movies, noise_words)
        self._index_built = True

        if self.config.VERBOSE:
            print(f"Indexed {self.index.word_count} words from {len(self.index.titles)} movies")
        return self.index

    def index_movies(self, movies, noise_words=None) -> HashIndex:
        """
        Build a fresh index from (title, words) records.

        Records repeating an already indexed title are skipped.
        """
        index = HashIndex.from_config(self.config, noise_words)
        seen = set()
        for title, words in movies:
            if title in seen:
                logger.warning("Skipping duplicate movie title %r", title)
                continue
            seen.add(title)
            index.index_movie(title, words)

        self.index = index
        self._index_built = True
        if self.config.AUTO_CORRECT_ENABLED:
            self.auto_correct.build_vocab(index)
        return index

    def prepare_query(self, word_a: str, word_b: str) -> Optional[Tuple[str, str]]:
        """
        Normalize both query words and apply auto-correction.

        Returns:
            The two words to look up, or None if either normalizes to nothing.
        """
        words = [self.query_tokenizer.normalize_query_word(w) for w in (word_a, word_b)]
        if None in words:
            logger.warning("Query %r, %r contains a word that is not searchable", word_a, word_b)
            return None

        if self.config.AUTO_CORRECT_ENABLED:
            noise_words = self.index.noise_words
            unknown = [w for w in words if w not in self.index and w not in noise_words]
            if unknown:
                words, changes, oov_words = self.auto_correct.autocorrect_query_words(
                    words, noise_words=noise_words
                )
                if changes:
                    logger.info("Query corrections: %s", changes)
                if oov_words:
                    logger.info("No indexed word close to: %s", oov_words)
        return words[0], words[1]

    def search(self, word_a: str, word_b: str, top_k: Optional[int] = None) -> List[MovieSearchResult]:
        """
        Find the movies where both words appear closest together.

        Args:
            word_a: First query word.
            word_b: Second query word.
            top_k: Number of results to return. If None, uses config default.

        Returns:
            Ranked list of MovieSearchResult, ascending by distance.
        """
        if not self._index_built:
            raise RuntimeError("Index not built. Call build_index() first.")

        query = self.prepare_query(word_a, word_b)
        if query is None:
            return []
        return self.ranker.top_k(self.index, query[0], query[1], k=top_k)

    def interactive_search(self) -> None:
        """
        Start an interactive search session.

        Each line must hold two words. Type 'exit' or 'quit' to end the session.
        """
        if not self._index_built:
            print("Building index first...")
            self.build_index()

        print("\n=== Interactive Search ===")
        print("Enter two words per query. Type 'exit' or 'quit' to quit.")

        while True:
            try:
                line = input("Enter two words: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nExiting.")
                break

            if not line:
                continue
            if line.lower() in ("exit", "quit"):
                print("Goodbye!")
                break

            words = line.split()
            if len(words) != 2:
                print("Please enter exactly two words.")
                continue

            results = self.search(words[0], words[1])
            self.result_formatter.print_results_table(results, words[0], words[1])

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the built index.

        Returns:
            Dictionary containing various statistics.
        """
        if not self._index_built:
            return {"error": "Index not built"}

        stats = self.index.get_stats()
        stats["noise_words"] = len(self.index.noise_words)
        stats["threshold"] = self.index.threshold
        return stats

"""
Query word correction.

This module suggests indexed words for query words that are not in the index,
using Levenshtein distance and occurrence counts.
"""

from typing import Dict, List, Optional, Set, Tuple
from collections import Counter, defaultdict
from rapidfuzz.distance import Levenshtein

from .indexer import HashIndex


class AutoCorrect:
    """Handles query word correction against the indexed vocabulary."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.word_vocab: Set[str] = set()
        self.word_freq: Counter = Counter()
        self.by_len_index: Dict[int, List[str]] = {}

    def build_vocab(self, index: HashIndex) -> Tuple[Set[str], Counter]:
        """
        Collect the indexed words and how many times each occurs.

        Args:
            index: Populated hash index.

        Returns:
            Tuple of (word_vocab, word_freq).
        """
        freq = Counter({node.word: len(node) for node in index.words()})
        self.word_vocab = set(freq)
        self.word_freq = freq
        self.by_len_index = self.build_len_index(self.word_vocab)
        return self.word_vocab, self.word_freq

    def build_len_index(self, word_vocab: Set[str]) -> Dict[int, List[str]]:
        """Group vocabulary words by length for candidate lookup."""
        index = defaultdict(list)
        for w in sorted(word_vocab):
            index[len(w)].append(w)
        return dict(index)

    def _candidate_words(self, word: str, max_len_diff: int) -> List[str]:
        L = len(word)
        candidates = []
        for dL in range(-max_len_diff, max_len_diff + 1):
            bucket = self.by_len_index.get(L + dL)
            if bucket:
                candidates.extend(bucket)
        return candidates

    def suggest_correction(self, word: str, max_dist: int = None) -> Tuple[Optional[str], Optional[int]]:
        """
        Suggest the closest indexed word.

        Args:
            word: Word to correct.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (best_word, best_distance) or (None, None) if no word is
            close enough. Ties go to the word with more occurrences.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        best_word, best_dist, best_freq = None, None, -1
        for cand in self._candidate_words(word, max_dist):
            dist = Levenshtein.distance(word, cand, score_cutoff=max_dist)
            if dist <= max_dist:
                freq = self.word_freq.get(cand, 0)
                if (best_dist is None) or (dist < best_dist) or (dist == best_dist and freq > best_freq):
                    best_word, best_dist, best_freq = cand, dist, freq
                if best_dist == 0:
                    break

        return best_word, best_dist

    def autocorrect_query_words(self, words: List[str], max_dist: int = None,
                                noise_words: Optional[Set[str]] = None) -> Tuple[List[str], List[Tuple[str, str]], List[str]]:
        """
        Correct every query word that is not in the vocabulary.

        Noise words are passed through unchanged; they are never indexed.

        Returns:
            Tuple of (corrected_words, changes, oov_no_suggest).
        """
        corrected = []
        changes = []
        oov_no_suggest = []

        for w in words:
            if w in self.word_vocab or (noise_words and w in noise_words):
                corrected.append(w)
                continue

            suggestion, _ = self.suggest_correction(w, max_dist=max_dist)
            if suggestion is not None:
                corrected.append(suggestion)
                changes.append((w, suggestion))
            else:
                corrected.append(w)
                oov_no_suggest.append(w)

        return corrected, changes, oov_no_suggest

"""
Proximity ranking for two-word queries.

This module aggregates the occurrences of two query words per movie, computes
how close the two words appear in each description and keeps the closest
movies.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .indexer import HashIndex

NO_DISTANCE = -1


@dataclass
class MovieSearchResult:
    """Positions of both query words within a single movie description."""

    title: str
    positions_a: List[int] = field(default_factory=list)
    positions_b: List[int] = field(default_factory=list)
    min_distance: int = NO_DISTANCE

    def add_occurrence_a(self, position: int) -> None:
        self.positions_a.append(position)

    def add_occurrence_b(self, position: int) -> None:
        self.positions_b.append(position)

    @property
    def has_distance(self) -> bool:
        return self.min_distance != NO_DISTANCE


def distance_key(result: MovieSearchResult) -> int:
    """Ordering key for ranked results."""
    return result.min_distance


class Ranker:
    """Ranks movies by the minimum distance between two query words."""

    def __init__(self, config=None):
        """Initialize with configuration."""
        self.config = config

    def aggregate(self, index: HashIndex, word_a: str, word_b: str) -> Dict[str, MovieSearchResult]:
        """
        Group the occurrences of both words by movie title.

        Args:
            index: Populated hash index.
            word_a: First normalized query word.
            word_b: Second normalized query word.

        Returns:
            Mapping of title to MovieSearchResult, in first-seen order. A word
            that was never indexed contributes no positions.
        """
        results: Dict[str, MovieSearchResult] = {}

        occurrence = index.find(word_a)
        if occurrence is not None:
            for loc in occurrence.locations:
                result = results.setdefault(loc.title, MovieSearchResult(loc.title))
                result.add_occurrence_a(loc.position)

        occurrence = index.find(word_b)
        if occurrence is not None:
            for loc in occurrence.locations:
                result = results.setdefault(loc.title, MovieSearchResult(loc.title))
                result.add_occurrence_b(loc.position)

        return results

    @staticmethod
    def min_distance(positions_a: Sequence[int], positions_b: Sequence[int]) -> int:
        """
        Smallest absolute difference between an element of each sequence.

        Both sequences must be ascending. Walks them together, always
        advancing the pointer at the smaller value (B on ties).

        Returns:
            The minimum distance, or -1 if either sequence is empty.
        """
        if not positions_a or not positions_b:
            return NO_DISTANCE

        i = j = 0
        best = NO_DISTANCE
        while i < len(positions_a) and j < len(positions_b):
            a, b = positions_a[i], positions_b[j]
            distance = abs(a - b)
            if best == NO_DISTANCE or distance < best:
                best = distance
            if a < b:
                i += 1
            else:
                j += 1
        return best

    def calculate_min_distance(self, result: MovieSearchResult) -> int:
        """Compute and store the minimum distance for one movie."""
        result.min_distance = self.min_distance(result.positions_a, result.positions_b)
        return result.min_distance

    def top_k(self, index: HashIndex, word_a: str, word_b: str, k: Optional[int] = None) -> List[MovieSearchResult]:
        """
        Find the movies where the two words appear closest together.

        Args:
            index: Populated hash index.
            word_a: First normalized query word.
            word_b: Second normalized query word.
            k: Maximum number of results. If None, uses config default.

        Returns:
            At most k results in ascending distance order. Movies missing
            either word are left out; equal distances keep first-seen order.
        """
        if k is None:
            k = self.config.TOP_K_RESULTS if self.config is not None else 10
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        ranked: List[MovieSearchResult] = []
        for result in self.aggregate(index, word_a, word_b).values():
            if self.calculate_min_distance(result) == NO_DISTANCE:
                continue

            position = len(ranked)
            for i, other in enumerate(ranked):
                if distance_key(other) > distance_key(result):
                    position = i
                    break
            ranked.insert(position, result)
            del ranked[k:]

        return ranked

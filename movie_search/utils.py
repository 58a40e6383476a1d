"""
Corpus file reading and result formatting.

This module parses the movie description file and the noise-word list, and
renders ranked results on the console.
"""

from collections import namedtuple
from pathlib import Path
from typing import Iterable, Iterator, List, Set, Union

from .tokenizer import normalize_title

MovieRecord = namedtuple("MovieRecord", ["title", "words"])

TITLE_SEPARATOR = "|"
DESCRIPTION_END = ";"


class CorpusReader:
    """Reads movie records and noise words from text files."""

    def __init__(self, config=None):
        """Initialize with configuration."""
        self.config = config

    def read_noise_words(self, path: Union[str, Path]) -> Set[str]:
        """
        Read a whitespace-separated list of noise words.

        Args:
            path: Path to the noise-word file.

        Returns:
            Set of lowercased noise words.
        """
        with open(path, "r", encoding="utf-8") as f:
            return {w.lower() for w in f.read().split()}

    def parse_movies(self, tokens: Iterable[str]) -> Iterator[MovieRecord]:
        """
        Group a whitespace token stream into movie records.

        Title tokens run up to the token containing '|'; description tokens
        follow up to the first token containing ';'. Text after '|' in the
        separator token is the first description word.

        Raises:
            ValueError: If a record has no '|' separator.
        """
        it = iter(tokens)
        for token in it:
            title_parts = []
            while TITLE_SEPARATOR not in token:
                title_parts.append(token)
                token = next(it, None)
                if token is None:
                    raise ValueError(f"movie record without '{TITLE_SEPARATOR}': {' '.join(title_parts)!r}")
            head, _, rest = token.partition(TITLE_SEPARATOR)
            title_parts.append(head)

            words = []
            token = rest
            while True:
                if DESCRIPTION_END in token:
                    last = token[:token.index(DESCRIPTION_END)]
                    if last:
                        words.append(last)
                    break
                if token:
                    words.append(token)
                token = next(it, None)
                if token is None:
                    break

            yield MovieRecord(normalize_title(" ".join(title_parts)), words)

    def read_movies(self, path: Union[str, Path]) -> List[MovieRecord]:
        """
        Read every movie record from a corpus file.

        Args:
            path: Path to a file of `title| word1 word2 ...;` records.

        Returns:
            List of MovieRecord(title, words) in file order.
        """
        with open(path, "r", encoding="utf-8") as f:
            return list(self.parse_movies(f.read().split()))


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def _format_positions(self, positions: List[int], maxn: int = 8) -> str:
        """Return positions as a compact string; long lists are elided."""
        if len(positions) <= maxn:
            return "[" + ", ".join(map(str, positions)) + "]"
        head = ", ".join(map(str, positions[:maxn // 2]))
        tail = ", ".join(map(str, positions[-maxn // 2:]))
        return "[" + head + ", …, " + tail + "]"

    def format_results_table(self, results, word_a: str, word_b: str) -> str:
        """
        Render ranked results as an ASCII table.

        Args:
            results: Ranked MovieSearchResult list.
            word_a: First query word, used as a column header.
            word_b: Second query word, used as a column header.

        Returns:
            The table as a string.
        """
        rows = []
        for rank, result in enumerate(results, start=1):
            rows.append([
                str(rank),
                result.title,
                str(result.min_distance),
                self._format_positions(result.positions_a),
                self._format_positions(result.positions_b),
            ])

        headers = ["#", "Title", "Distance", word_a, word_b]
        max_widths = [3, self.config.TITLE_WIDTH, 8, 30, 30]
        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            col_widths.append(min(width, max_widths[j]))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        lines = [
            " | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers)),
            "-+-".join("-" * w for w in col_widths),
        ]
        for row in rows:
            lines.append(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))
        return "\n".join(lines)

    def print_results_table(self, results, word_a: str, word_b: str) -> None:
        """Print ranked results, or a notice when there are none."""
        if not results:
            print("No movies mention both words.")
            return

        print("\n=== Top Results ===")
        print(self.format_results_table(results, word_a, word_b))
        print()

#!/usr/bin/env python3
"""
Example usage of the Movie Proximity Search Engine.

This script demonstrates how to use the search engine programmatically.
"""

import sys
from pathlib import Path

# Add parent directory to path to import movie_search
sys.path.append(str(Path(__file__).parent.parent))

from movie_search import HashIndex, Location, MovieSearchEngine, Ranker


def basic_search_example():
    """Demonstrate basic search over the bundled sample corpus."""
    print("=== Basic Search Example ===")

    engine = MovieSearchEngine(config_dict={"VERBOSE": False})
    engine.build_index()

    queries = [
        ("lion", "father"),
        ("boy", "bear"),
        ("animals", "zoo"),
        ("human", "infant"),
    ]

    for word_a, word_b in queries:
        print(f"\nSearching for: '{word_a}' near '{word_b}'")
        results = engine.search(word_a, word_b, top_k=5)

        if results:
            for i, result in enumerate(results, 1):
                print(f"  {i}. {result.title} (distance {result.min_distance})")
        else:
            print("  No results found.")


def autocorrect_example():
    """Demonstrate correction of misspelled query words."""
    print("\n=== Auto-correction Example ===")

    engine = MovieSearchEngine(config_dict={"VERBOSE": False})
    engine.build_index()

    for word_a, word_b in [("lino", "fathr"), ("panda", "kungg")]:
        words, changes, oov = engine.auto_correct.autocorrect_query_words([word_a, word_b])
        print(f"\nOriginal query: '{word_a} {word_b}'")
        print(f"Corrections: {changes or 'none'}")
        if oov:
            print(f"No suggestions for: {oov}")
        for result in engine.search(word_a, word_b):
            print(f"  {result.title} (distance {result.min_distance})")


def hash_index_example():
    """Demonstrate the hash index directly, including a rehash."""
    print("\n=== Hash Index Example ===")

    index = HashIndex(size=2, threshold=1.0, noise_words={"the", "a"})
    index.index_movie("Movie A", ["the", "cat", "sat"])
    index.index_movie("Movie B", ["a", "cat", "ran", "fast"])
    index.insert("dog", Location("Movie B", 5))

    print(f"Buckets: {index.size}  Words: {index.word_count}  Load factor: {index.load_factor:.2f}")
    index.print_table()

    ranker = Ranker()
    for result in ranker.top_k(index, "cat", "sat"):
        print(f"{result.title}: cat={result.positions_a} sat={result.positions_b} distance={result.min_distance}")


def main():
    """Run all examples."""
    basic_search_example()
    autocorrect_example()
    hash_index_example()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Main entry point for the Movie Proximity Search Engine.

This script provides a command-line interface for the search engine.
"""

import argparse
import logging
import sys

from movie_search import MovieSearchEngine
import config


def main():
    """Main entry point for the search engine."""
    parser = argparse.ArgumentParser(
        description="Two-word proximity search over movie descriptions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Start interactive search
  python main.py --movies ./movies.txt             # Use a custom corpus file
  python main.py --query lion father               # Single query mode
  python main.py --stats --dump                    # Show statistics and the bucket array
        """
    )

    parser.add_argument(
        "--movies",
        type=str,
        default=None,
        help="Corpus file of 'title| words;' records (default: data/movies.txt)"
    )

    parser.add_argument(
        "--noise-words",
        type=str,
        default=None,
        help="Noise-word file (default: data/noisewords.txt)"
    )

    parser.add_argument(
        "--query",
        nargs=2,
        metavar=("WORD_A", "WORD_B"),
        default=None,
        help="Single two-word query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Number of results to return (default: 10)"
    )

    parser.add_argument(
        "--hash-size",
        type=int,
        default=None,
        help="Initial number of hash buckets"
    )

    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Load factor threshold that triggers a rehash"
    )

    parser.add_argument(
        "--no-autocorrect",
        action="store_true",
        help="Do not correct query words missing from the index"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the hash table buckets after building"
    )

    parser.add_argument(
        "--build-only",
        action="store_true",
        help="Only build the index, don't start interactive search"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        help="Logging level: DEBUG, INFO, WARNING, ERROR"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {}
    if args.hash_size is not None:
        overrides["HASH_SIZE"] = args.hash_size
    if args.threshold is not None:
        overrides["LOAD_FACTOR_THRESHOLD"] = args.threshold
    if args.no_autocorrect:
        overrides["AUTO_CORRECT_ENABLED"] = False

    engine = MovieSearchEngine(
        movies_file=args.movies,
        noise_words_file=args.noise_words,
        config_dict=overrides,
    )

    # Build index
    try:
        engine.build_index()
    except Exception as e:
        print(f"Error building index: {e}")
        sys.exit(1)

    if args.dump:
        engine.index.print_table()

    if args.stats:
        engine.index.summarize_index()

    if args.build_only:
        return

    if args.query:
        # Single query mode
        word_a, word_b = args.query
        try:
            results = engine.search(word_a, word_b, top_k=args.top_k)
        except Exception as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
        engine.result_formatter.print_results_table(results, word_a, word_b)
    else:
        # Interactive mode
        try:
            engine.interactive_search()
        except KeyboardInterrupt:
            print("\nExiting.")
        except Exception as e:
            print(f"Error in interactive mode: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()

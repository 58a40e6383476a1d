"""
Configuration settings for the Movie Proximity Search Engine.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
MOVIES_FILE = DATA_DIR / "movies.txt"  # title| word1 word2 ...; records
NOISE_WORDS_FILE = DATA_DIR / "noisewords.txt"  # Words never indexed

# Hash index settings
HASH_SIZE = 101  # Initial number of buckets
LOAD_FACTOR_THRESHOLD = 2.0  # Rehash when distinct words / buckets exceeds this

# Search settings
TOP_K_RESULTS = 10  # Number of results to return

# Auto-correction settings
AUTO_CORRECT_ENABLED = True  # Replace unknown query words with the closest indexed word
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for auto-correction

# Output settings
VERBOSE = True  # Print progress while building the index
TITLE_WIDTH = 40  # Maximum width of the title column in result tables

# Debug settings
LOG_LEVEL = "WARNING"  # Logging level: DEBUG, INFO, WARNING, ERROR

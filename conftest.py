import pytest

from movie_search import HashIndex


SAMPLE_NOISE_WORDS = {"the", "a"}

SAMPLE_MOVIES = [
    ("Movie A", ["the", "cat", "sat"]),
    ("Movie B", ["a", "cat", "ran", "fast"]),
]


@pytest.fixture
def noise_words():
    return set(SAMPLE_NOISE_WORDS)


@pytest.fixture
def sample_index(noise_words):
    index = HashIndex(size=4, threshold=2.0, noise_words=noise_words)
    for title, words in SAMPLE_MOVIES:
        index.index_movie(title, words)
    return index


@pytest.fixture
def corpus_files(tmp_path):
    movies = tmp_path / "movies.txt"
    movies.write_text("Movie A| the cat sat;\nMovie B| a cat\nran fast;\n", encoding="utf-8")
    noise = tmp_path / "noisewords.txt"
    noise.write_text("the\nA\n", encoding="utf-8")
    return movies, noise

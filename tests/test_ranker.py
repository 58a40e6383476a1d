from itertools import product

import pytest

from movie_search.indexer import HashIndex
from movie_search.ranker import MovieSearchResult, Ranker


@pytest.fixture
def ranker():
    return Ranker()


def brute_force_distance(positions_a, positions_b):
    if not positions_a or not positions_b:
        return -1
    return min(abs(a - b) for a, b in product(positions_a, positions_b))


@pytest.mark.parametrize("positions_a, positions_b, expected", [
    ([1, 3, 5, 11], [4, 10, 12], 1),
    ([], [1, 2], -1),
    ([1, 2], [], -1),
    ([], [], -1),
    ([5], [5], 0),
    ([10], [1, 2, 3], 7),
    ([1, 2, 3], [10], 7),
    ([2, 40, 90], [20, 60, 89], 1),
])
def test_min_distance(ranker, positions_a, positions_b, expected):
    assert ranker.min_distance(positions_a, positions_b) == expected


def test_min_distance_matches_brute_force(ranker):
    cases = [
        ([1, 7, 15, 30], [3, 16, 29]),
        ([4, 8], [1, 2, 3, 9, 20]),
        ([100], [1, 50, 99, 150]),
        ([1, 2, 3, 4, 5], [12, 13]),
    ]
    for positions_a, positions_b in cases:
        assert ranker.min_distance(positions_a, positions_b) == brute_force_distance(positions_a, positions_b)


def test_aggregate_groups_positions_by_title(ranker, sample_index):
    results = ranker.aggregate(sample_index, "cat", "sat")
    assert list(results) == ["Movie A", "Movie B"]
    assert results["Movie A"].positions_a == [2]
    assert results["Movie A"].positions_b == [3]
    assert results["Movie B"].positions_a == [2]
    assert results["Movie B"].positions_b == []
    assert all(r.min_distance == -1 for r in results.values())


def test_aggregate_with_unknown_words(ranker, sample_index):
    assert ranker.aggregate(sample_index, "dog", "bird") == {}
    results = ranker.aggregate(sample_index, "dog", "sat")
    assert list(results) == ["Movie A"]
    assert results["Movie A"].positions_a == []


def test_calculate_min_distance_updates_result(ranker):
    result = MovieSearchResult("Movie A", [1, 3, 5, 11], [4, 10, 12])
    assert not result.has_distance
    assert ranker.calculate_min_distance(result) == 1
    assert result.min_distance == 1
    assert result.has_distance


def test_top_k_end_to_end(ranker, sample_index):
    results = ranker.top_k(sample_index, "cat", "sat")
    assert [r.title for r in results] == ["Movie A"]
    assert results[0].min_distance == 1


def test_top_k_unknown_words_returns_empty(ranker, sample_index):
    assert ranker.top_k(sample_index, "cat", "dog") == []
    assert ranker.top_k(sample_index, "dog", "bird") == []


def test_top_k_bounds_and_order(ranker):
    index = HashIndex(8, 2.0)
    for i in reversed(range(15)):
        index.index_movie(f"Movie {i}", ["x"] + ["pad"] * i + ["y"])

    results = ranker.top_k(index, "x", "y", k=10)

    assert len(results) == 10
    assert [r.min_distance for r in results] == list(range(1, 11))
    assert [r.title for r in results] == [f"Movie {i}" for i in range(10)]
    assert all(r.min_distance != -1 for r in results)


def test_top_k_ties_keep_first_seen_order(ranker):
    index = HashIndex(8, 2.0)
    index.index_movie("Third", ["x", "z", "y"])
    index.index_movie("First", ["x", "y"])
    index.index_movie("Second", ["y", "x"])

    results = ranker.top_k(index, "x", "y")

    assert [r.title for r in results] == ["First", "Second", "Third"]
    assert [r.min_distance for r in results] == [1, 1, 2]


def test_top_k_respects_k(ranker, sample_index):
    assert ranker.top_k(sample_index, "cat", "sat", k=0) == []
    with pytest.raises(ValueError):
        ranker.top_k(sample_index, "cat", "sat", k=-1)


def test_top_k_uses_config_default():
    class Settings:
        TOP_K_RESULTS = 1

    index = HashIndex(8, 2.0)
    for i in range(3):
        index.index_movie(f"Movie {i}", ["x", "y"])
    assert len(Ranker(Settings).top_k(index, "x", "y")) == 1
    assert len(Ranker().top_k(index, "x", "y")) == 3


def test_same_word_twice(ranker, sample_index):
    results = ranker.top_k(sample_index, "cat", "cat")
    assert [r.title for r in results] == ["Movie A", "Movie B"]
    assert [r.min_distance for r in results] == [0, 0]

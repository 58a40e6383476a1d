import sys

import pytest

import main
from movie_search import IndexConfigurationError, MovieSearchEngine


@pytest.fixture
def engine(corpus_files):
    movies, noise = corpus_files
    engine = MovieSearchEngine(movies, noise, config_dict={"VERBOSE": False})
    engine.build_index()
    return engine


def test_config_overrides_defaults(corpus_files):
    movies, noise = corpus_files
    engine = MovieSearchEngine(movies, noise, config_dict={"HASH_SIZE": 7})
    assert engine.config.HASH_SIZE == 7
    assert engine.config.TOP_K_RESULTS == 10


def test_build_index(engine):
    assert engine.index.titles == ["movie a", "movie b"]
    assert engine.index.noise_words == {"the", "a"}
    assert engine.index.find("the") is None
    assert engine.index.find("cat").positions_in("movie b") == [2]


def test_build_index_twice_returns_same_index(engine):
    index = engine.index
    assert engine.build_index() is index
    assert engine.build_index(force_rebuild=True) is not index


def test_search(engine):
    results = engine.search("cat", "sat")
    assert [r.title for r in results] == ["movie a"]
    assert results[0].positions_a == [2]
    assert results[0].positions_b == [3]
    assert results[0].min_distance == 1


def test_search_normalizes_query_words(engine):
    results = engine.search("Cat!", "SAT.")
    assert [r.title for r in results] == ["movie a"]


def test_search_unsearchable_word(engine):
    assert engine.search("cat", "!!!") == []
    assert engine.search("cat", "it's") == []


def test_search_autocorrects_unknown_words(engine):
    results = engine.search("cat", "sxt")
    assert [r.title for r in results] == ["movie a"]


def test_search_without_autocorrect(corpus_files):
    movies, noise = corpus_files
    engine = MovieSearchEngine(movies, noise, config_dict={"VERBOSE": False, "AUTO_CORRECT_ENABLED": False})
    engine.build_index()
    assert engine.search("cat", "sxt") == []
    assert [r.title for r in engine.search("cat", "ran")] == ["movie b"]


def test_search_before_build(corpus_files):
    movies, noise = corpus_files
    engine = MovieSearchEngine(movies, noise)
    with pytest.raises(RuntimeError):
        engine.search("cat", "sat")


def test_duplicate_titles_are_skipped(tmp_path, corpus_files):
    _, noise = corpus_files
    movies = tmp_path / "dupes.txt"
    movies.write_text("Movie A| cat sat;\nMovie A| dog ran;\n", encoding="utf-8")
    engine = MovieSearchEngine(movies, noise, config_dict={"VERBOSE": False})
    engine.build_index()
    assert engine.index.titles == ["movie a"]
    assert engine.index.find("dog") is None


def test_index_movies_from_records(corpus_files):
    movies, noise = corpus_files
    engine = MovieSearchEngine(movies, noise, config_dict={"VERBOSE": False})
    engine.index_movies([("Movie A", ["the", "cat", "sat"])], {"the"})
    assert [r.title for r in engine.search("cat", "sat")] == ["Movie A"]


def test_invalid_configuration(corpus_files):
    movies, noise = corpus_files
    engine = MovieSearchEngine(movies, noise, config_dict={"HASH_SIZE": 0})
    with pytest.raises(IndexConfigurationError):
        engine.build_index()


def test_missing_corpus_file(tmp_path, corpus_files):
    _, noise = corpus_files
    engine = MovieSearchEngine(tmp_path / "missing.txt", noise)
    with pytest.raises(FileNotFoundError):
        engine.build_index()


def test_get_stats(corpus_files):
    movies, noise = corpus_files
    engine = MovieSearchEngine(movies, noise, config_dict={"VERBOSE": False})
    assert "error" in engine.get_stats()
    engine.build_index()
    stats = engine.get_stats()
    assert stats["word_count"] == 4
    assert stats["num_movies"] == 2
    assert stats["noise_words"] == 2


def test_interactive_search(engine, monkeypatch, capsys):
    answers = iter(["", "cat", "cat sat", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    engine.interactive_search()
    out = capsys.readouterr().out
    assert "exactly two words" in out
    assert "movie a" in out
    assert "Goodbye!" in out


def test_main_single_query(corpus_files, monkeypatch, capsys):
    movies, noise = corpus_files
    monkeypatch.setattr(sys, "argv", [
        "movie-search", "--movies", str(movies), "--noise-words", str(noise),
        "--query", "cat", "sat", "--stats",
    ])
    main.main()
    out = capsys.readouterr().out
    assert "Hash Index Summary" in out
    assert "movie a" in out


def test_main_invalid_hash_size(corpus_files, monkeypatch, capsys):
    movies, noise = corpus_files
    monkeypatch.setattr(sys, "argv", [
        "movie-search", "--movies", str(movies), "--noise-words", str(noise),
        "--hash-size", "0", "--build-only",
    ])
    with pytest.raises(SystemExit) as excinfo:
        main.main()
    assert excinfo.value.code == 1
    assert "Error building index" in capsys.readouterr().out


def test_search_never_corrects_noise_words(tmp_path):
    movies = tmp_path / "movies.txt"
    movies.write_text("Movie A| she saw the cat;\nMovie B| a cat ran;\n", encoding="utf-8")
    noise = tmp_path / "noisewords.txt"
    noise.write_text("the a\n", encoding="utf-8")
    engine = MovieSearchEngine(movies, noise, config_dict={"VERBOSE": False})
    engine.build_index()

    assert engine.prepare_query("the", "cat") == ("the", "cat")
    assert engine.search("the", "cat") == []
    assert engine.search("a", "cat") == []
    assert [r.title for r in engine.search("she", "cat")] == ["movie a"]

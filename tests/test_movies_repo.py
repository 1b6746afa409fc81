import json
from pathlib import Path

import pytest

from watchlist.exceptions import PersistenceError
from watchlist.models.movie import Movie
from watchlist.repos.movies import MoviesRepo


def test_load_missing_file(tmp_path: Path, error_logs: list[str]):
    assert MoviesRepo(tmp_path / "nope.json").load() == []
    assert error_logs == []


def test_load_preserves_order(movies_file: Path):
    movies = MoviesRepo(movies_file).load()
    assert [m.title for m in movies] == ["A", "B", "C"]


@pytest.mark.parametrize("n", [0, 1, 5])
def test_round_trip(tmp_path: Path, n: int):
    repo = MoviesRepo(tmp_path / "movies.json")
    movies = [
        Movie(year=1990 + i, watched=i % 2 == 0, title=f"Movie {i}") for i in range(n)
    ]
    repo.save(movies)
    assert repo.load() == movies


def test_save_writes_pretty_json(tmp_path: Path):
    path = tmp_path / "movies.json"
    MoviesRepo(path).save([Movie(year=1994, watched=True, title="Amélie")])
    text = path.read_text(encoding="utf-8")
    assert "\n  " in text
    assert "Amélie" in text
    assert json.loads(text) == [{"year": 1994, "watched": True, "movie": "Amélie"}]


def test_save_overwrites_whole_file(movies_file: Path):
    repo = MoviesRepo(movies_file)
    repo.save([Movie(year=2000, watched=False, title="Only")])
    assert json.loads(movies_file.read_text()) == [
        {"year": 2000, "watched": False, "movie": "Only"}
    ]


def test_load_malformed_file(tmp_path: Path, error_logs: list[str]):
    path = tmp_path / "movies.json"
    path.write_text("[{broken", encoding="utf-8")
    assert MoviesRepo(path).load() == []
    assert len(error_logs) == 1
    assert error_logs[0].startswith("Error parsing JSON")


def test_load_unreadable_file(tmp_path: Path, error_logs: list[str]):
    path = tmp_path / "movies.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert MoviesRepo(path).load() == []
    assert error_logs[0].startswith("Error reading file")


def test_load_directory(tmp_path: Path, error_logs: list[str]):
    assert MoviesRepo(tmp_path).load() == []
    assert error_logs[0].startswith("Error reading file")


def test_save_failure_raises(tmp_path: Path):
    repo = MoviesRepo(tmp_path / "missing-dir" / "movies.json")
    with pytest.raises(PersistenceError) as exc_info:
        repo.save([Movie(year=2000, watched=False, title="X")])
    assert isinstance(exc_info.value.__cause__, OSError)

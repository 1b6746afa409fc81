import json
from pathlib import Path

import pytest
from loguru import logger

from watchlist.models.movie import Movie
from watchlist.repos.movies import MoviesRepo
from watchlist.services.watchlist_service import WatchlistService

SAMPLE = [
    {"year": 2010, "watched": False, "movie": "A"},
    {"year": 1999, "watched": True, "movie": "B"},
    {"year": 2020, "watched": True, "movie": "C"},
]


@pytest.fixture
def movies_file(tmp_path: Path) -> Path:
    """A watchlist file holding three movies, two of them watched."""
    path = tmp_path / "movies.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    return path


@pytest.fixture
def movies() -> list[Movie]:
    return [Movie.model_validate(d) for d in SAMPLE]


@pytest.fixture
def service(movies_file: Path) -> WatchlistService:
    return WatchlistService(MoviesRepo(movies_file))


@pytest.fixture
def error_logs():
    """Collect messages logged at ERROR and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="ERROR")
    yield messages
    logger.remove(handler_id)

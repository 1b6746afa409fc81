import json
from pathlib import Path

from loguru import logger

from watchlist.exceptions import MalformedWatchlistException, PersistenceError
from watchlist.models.movie import Movie, parse_movies


class MoviesRepo:
    """Reads and overwrites the JSON file backing the watchlist."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Movie]:
        """Return the stored movies, or an empty list if there are none.

        Never raises: a missing file is an empty watchlist, and an unreadable
        or malformed one is logged and treated the same way so that startup
        is never blocked.
        """
        if not self._path.exists():
            logger.debug(f"no watchlist file at {self._path}")
            return []
        try:
            contents = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file {self._path}: {e}")
            return []
        try:
            movies = parse_movies(contents)
        except MalformedWatchlistException as e:
            logger.error(f"Error parsing JSON in {self._path}: {e}")
            return []
        logger.info(f"loaded {len(movies)} movies from {self._path}")
        return movies

    def save(self, movies: list[Movie]) -> None:
        """Overwrite the file with the full list.

        Raises PersistenceError if the file cannot be written.
        """
        payload = json.dumps(
            [movie.to_json_dict() for movie in movies],
            indent=2,
            ensure_ascii=False,
        )
        try:
            self._path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Could not write {self._path}: {e}") from e
        logger.debug(f"saved {len(movies)} movies to {self._path}")

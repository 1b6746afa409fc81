from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from watchlist.exceptions import PersistenceError
from watchlist.models.movie import Movie
from watchlist.obj.watch_list import WatchList
from watchlist.repos.movies import MoviesRepo


@dataclass
class ToggleResult:
    """Outcome of a toggle: the record that changed and whether it was saved."""

    movie: Movie | None = None
    error: PersistenceError | None = None

    @property
    def changed(self) -> bool:
        return self.movie is not None

    @property
    def saved(self) -> bool:
        return self.changed and self.error is None


class WatchlistService:
    """Business logic for the watchlist: navigation, toggling and saving."""

    def __init__(self, movies_repo: MoviesRepo) -> None:
        self._movies_repo = movies_repo
        self.watch_list = WatchList(self._movies_repo.load())

    @property
    def movies(self) -> list[Movie]:
        return self.watch_list.items()

    @property
    def selected(self) -> int:
        return self.watch_list.selected

    @property
    def path(self) -> Path:
        return self._movies_repo.path

    def stats(self) -> tuple[int, int]:
        return self.watch_list.stats()

    def next(self) -> None:
        self.watch_list.next()

    def previous(self) -> None:
        self.watch_list.previous()

    def toggle_current(self) -> ToggleResult:
        """Flip the highlighted movie and write the whole list back.

        A failed write does not undo the toggle; the error is returned so the
        caller can tell the user that memory and disk now differ.
        """
        movie = self.watch_list.toggle_current()
        if movie is None:
            return ToggleResult()
        logger.info(f"toggled {movie!r}")
        try:
            self._movies_repo.save(self.movies)
        except PersistenceError as e:
            logger.warning(f"toggle not saved: {e}")
            return ToggleResult(movie=movie, error=e)
        return ToggleResult(movie=movie)

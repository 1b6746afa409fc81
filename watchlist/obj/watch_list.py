from collections.abc import Iterator

from watchlist.models.movie import Movie


class WatchList:
    """Ordered movies plus the index of the highlighted one.

    The list is never resized after construction. When it is empty there is
    no selection and every cursor or toggle operation does nothing.
    """

    def __init__(self, movies: list[Movie]):
        self._movies = movies
        self._selected = 0

    @property
    def selected(self) -> int:
        return self._selected

    @property
    def current(self) -> Movie | None:
        if not self._movies:
            return None
        return self._movies[self._selected]

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(self._movies)

    def __getitem__(self, idx: int) -> Movie:
        return self._movies[idx]

    def items(self) -> list[Movie]:
        return self._movies

    def toggle_current(self) -> Movie | None:
        movie = self.current
        if movie is not None:
            movie.toggle()
        return movie

    def next(self) -> None:
        if self._movies:
            self._selected = (self._selected + 1) % len(self._movies)

    def previous(self) -> None:
        if self._movies:
            self._selected = (self._selected - 1) % len(self._movies)

    def stats(self) -> tuple[int, int]:
        """(watched, total)"""
        return sum(movie.watched for movie in self._movies), len(self._movies)

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from watchlist.exceptions import MalformedWatchlistException


class Movie(BaseModel):
    """A single watchlist record. Stored on disk with the title under "movie"."""

    model_config = ConfigDict(populate_by_name=True, strict=True)

    year: int = Field(ge=0, le=2**32 - 1)
    watched: bool
    title: str = Field(alias="movie")

    def __repr__(self) -> str:
        mark = "x" if self.watched else " "
        return f"[{mark}] {self.title} ({self.year})"

    def toggle(self) -> bool:
        self.watched = not self.watched
        return self.watched

    def to_json_dict(self) -> dict:
        """Serialize with the on-disk field names, in the on-disk order."""
        return self.model_dump(by_alias=True)


_MOVIE_LIST = TypeAdapter(list[Movie])


def parse_movies(text: str) -> list[Movie]:
    try:
        return _MOVIE_LIST.validate_json(text)
    except ValidationError as e:
        raise MalformedWatchlistException(str(e)) from e

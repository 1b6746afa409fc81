from typing import cast

from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import Configuration, Singleton

from watchlist.repos.movies import MoviesRepo
from watchlist.services.watchlist_service import WatchlistService
from watchlist.settings import Settings


class Container(DeclarativeContainer):
    config = Configuration()
    config.from_pydantic(Settings())  # type: ignore
    config = cast(Settings, config)  # type: ignore[assignment]

    movies_repo = Singleton(
        MoviesRepo,
        path=config.movies_file,
    )

    # Services
    watchlist_service = Singleton(
        WatchlistService,
        movies_repo=movies_repo,
    )

from typing import TYPE_CHECKING

from watchlist.dependencies import Container

# this is to avoid importing textual when only the cli help is needed
if TYPE_CHECKING:
    from watchlist.applications.tui.tui_app import WatchlistApp


def create_app(container: Container) -> "WatchlistApp":
    from rich.console import Console

    cns = Console(stderr=True)
    with cns.status("Loading watchlist..."):
        from watchlist.applications.tui.tui_app import WatchlistApp

        watchlist_service = container.watchlist_service()

    return WatchlistApp(
        watchlist_service=watchlist_service,
        poll_interval=container.config.poll_interval(),
    )

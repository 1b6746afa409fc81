from loguru import logger
from rich.markup import escape
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from watchlist.applications.tui.controls import (
    Action,
    LoopState,
    action_for_key,
    next_state,
)
from watchlist.services.watchlist_service import WatchlistService
from watchlist.utils.rich_utils import (
    get_help_panel,
    get_movies_panel,
    get_stats_panel,
)

DEFAULT_POLL_INTERVAL = 0.1


class WatchlistApp(App):
    """Full-screen watchlist: stats bar, scrolling movie list and key help.

    Textual owns the terminal for the lifetime of `run()` and restores it on
    every exit path, including unhandled exceptions.
    """

    CSS_PATH = "watchlist.tcss"

    def __init__(
        self,
        watchlist_service: WatchlistService,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self._watchlist_svc = watchlist_service
        self.poll_interval = poll_interval
        self.loop_state = LoopState.RUNNING
        super().__init__()

    def compose(self) -> ComposeResult:
        yield Static(id="stats")
        yield Static(id="movies")
        yield Static(id="help")

    def on_mount(self) -> None:
        logger.info(f"init WatchlistApp; {len(self._watchlist_svc.movies)} movies")
        self.call_after_refresh(self.redraw)
        self.set_interval(self.poll_interval, self.redraw)

    def on_key(self, event: events.Key) -> None:
        action = action_for_key(event.key)
        self.loop_state = next_state(self.loop_state, action)
        if self.loop_state is LoopState.QUITTING:
            logger.info("stopping WatchlistApp")
            self.exit()
            return
        self.apply(action)
        self.redraw()

    def apply(self, action: Action) -> None:
        match action:
            case Action.TOGGLE:
                result = self._watchlist_svc.toggle_current()
                if result.error is not None:
                    self.notify(
                        escape(f"Not saved to {self._watchlist_svc.path}: {result.error}"),
                        title="Save failed",
                        severity="error",
                    )
            case Action.NEXT:
                self._watchlist_svc.next()
            case Action.PREVIOUS:
                self._watchlist_svc.previous()

    def redraw(self) -> None:
        watch_list = self._watchlist_svc.watch_list
        movies = self.query_one("#movies", Static)
        # two lines go to the panel border
        rows = max(0, movies.size.height - 2)
        self.query_one("#stats", Static).update(get_stats_panel(watch_list))
        movies.update(get_movies_panel(watch_list, rows))
        self.query_one("#help", Static).update(get_help_panel())

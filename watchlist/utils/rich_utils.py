from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from watchlist.models.movie import Movie
from watchlist.obj.watch_list import WatchList

HELP_TEXT = "↑/↓ j/k: Navigate | Space: Toggle Watched | q: Quit"
HIGHLIGHT_SYMBOL = "► "


def format_checkbox(watched: bool) -> str:
    return "[✓]" if watched else "[ ]"


def format_movie_row(movie: Movie, selected: bool = False) -> Text:
    content = f"{format_checkbox(movie.watched)} {movie.year} - {movie.title}"
    if selected:
        return Text(HIGHLIGHT_SYMBOL + content, style="bold yellow")
    style = "dim green" if movie.watched else "white"
    return Text(" " * len(HIGHLIGHT_SYMBOL) + content, style=style)


def visible_window(selected: int, total: int, height: int) -> tuple[int, int]:
    """Slice [start, stop) of rows that fits in `height` lines and shows `selected`.

    Rows start at the top until the selection moves past the bottom edge, after
    which the selection stays on the last visible line. No offset is kept
    between frames, so moving up from the bottom scrolls the whole window
    rather than moving the cursor inside it.
    """
    if height <= 0 or total <= 0:
        return 0, 0
    start = max(0, selected - height + 1)
    return start, min(total, start + height)


def get_stats_panel(watch_list: WatchList) -> Panel:
    watched, total = watch_list.stats()
    return Panel(
        Text(f"Movie Watchlist ({watched}/{total} watched)", style="bold cyan"),
        box=box.SQUARE,
    )


def get_movies_panel(watch_list: WatchList, height: int) -> Panel:
    """List region; `height` is the number of rows that fit inside the border."""
    start, stop = visible_window(watch_list.selected, len(watch_list), height)
    rows = [
        format_movie_row(watch_list[idx], selected=idx == watch_list.selected)
        for idx in range(start, stop)
    ]
    return Panel(
        Group(*rows),
        title="Movies",
        title_align="left",
        box=box.SQUARE,
        height=max(0, height) + 2,
    )


def get_help_panel() -> Panel:
    return Panel(Text(HELP_TEXT, style="grey50"), box=box.SQUARE)

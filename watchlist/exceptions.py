class MalformedWatchlistException(Exception):
    """Raised when the watchlist file does not hold a valid list of movies."""


class PersistenceError(Exception):
    """Raised when the watchlist cannot be written to disk."""

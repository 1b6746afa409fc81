from watchlist.repos.movies import MoviesRepo

__all__ = ["MoviesRepo"]

"""CLI entry point for the TUI application."""

from pathlib import Path

import click


@click.command()
@click.option(
    "--file",
    "movies_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Watchlist JSON file (default: movies.json).",
)
@click.version_option(package_name="moviewatch")
def main(movies_file: Path | None) -> None:
    """Movie watchlist in the terminal."""
    from watchlist.applications.tui.app import create_app
    from watchlist.dependencies import Container
    from watchlist.setup_logging import setup_logging

    container = Container()
    if movies_file is not None:
        container.config.movies_file.from_value(movies_file)
    setup_logging(container.config.logs_dir())

    app = create_app(container)
    app.run()
    if app.return_code:
        raise click.exceptions.Exit(app.return_code)

"""Configure loguru logging for the application."""

import sys
from pathlib import Path

from loguru import logger


def setup_logging(logs_dir: Path) -> None:
    logs_dir.mkdir(parents=True, exist_ok=True)
    logger.remove()
    logger.add(sys.stderr, level="ERROR")
    logger.add(
        logs_dir / "app.log",
        rotation="1 MB",
        retention=3,
        encoding="utf-8",
        level="DEBUG",
    )

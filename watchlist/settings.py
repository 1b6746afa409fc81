from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path.home() / ".config" / "moviewatch"
CONFIG_ENV = CONFIG_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MOVIEWATCH_",
        env_file=(CONFIG_ENV, ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    movies_file: Path = Path("movies.json")
    poll_interval: float = Field(default=0.1, gt=0)
    logs_dir: Path = CONFIG_DIR / "logs"

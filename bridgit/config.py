"""
Bridgit settings.

Read from the environment, seeded from a ``.env`` file next to this module.
Existing environment variables win over the file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=Path(__file__).with_name(".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8002
    reload: bool = True
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = "info"

    # Alternative reference data file; the bundled catalog.json otherwise
    bridgit_catalog: Path | None = None

    @property
    def catalog_path(self) -> Path:
        return self.bridgit_catalog or Path(__file__).with_name("catalog.json")


@lru_cache
def get_settings() -> Settings:
    return Settings()

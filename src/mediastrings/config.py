"""mediastrings configuration via pydantic-settings (.env + env vars)."""

import sys
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

BOOL_FLAGS = ("leading_zero", "convert_backslash")


class ConfigStore(Protocol):
    """Read-only view of the user settings the string functions consult."""

    def get_bool(self, key: str) -> bool: ...

    def home_directory_utf8(self) -> str: ...


class MediaStringsConfig(BaseSettings):
    """All configuration with layered resolution:
    .env file < environment variables < constructor kwargs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -- Formatting --
    leading_zero: bool = False

    # -- Playlist paths --
    convert_backslash: bool = False
    home_dir: str = Field(default_factory=lambda: str(Path.home()))

    # -- Locale --
    charset: str = ""  # empty = system locale

    # -- Logging --
    log_level: str = "INFO"
    log_file: Path | None = None

    def get_bool(self, key: str) -> bool:
        if key not in BOOL_FLAGS:
            raise ConfigError(f"Unknown boolean setting: {key}")
        return bool(getattr(self, key))

    def home_directory_utf8(self) -> str:
        return self.home_dir

    def setup_logging(self) -> None:
        """Configure loguru for mediastrings."""
        logger.remove()  # Remove default stderr handler

        log_format = (
            "{time:YYYY-MM-DDTHH:mm:ssZ} | {level:<8} | "
            "{extra[stage]:<8} | {message}"
        )

        def _default_extra(record):
            record["extra"].setdefault("stage", "")
            return True

        logger.add(
            sys.stderr,
            format=log_format,
            level=self.log_level.upper(),
            filter=_default_extra,
        )

        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(self.log_file),
                format=log_format,
                level="DEBUG",
                rotation="10 MB",
                retention="30 days",
                filter=_default_extra,
            )


@lru_cache(maxsize=1)
def get_config() -> MediaStringsConfig:
    """Process-wide default configuration, read once."""
    return MediaStringsConfig()

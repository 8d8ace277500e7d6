import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILE_ENV = "ASTROHUB_CONFIG_FILE"
LOG_FILE_ENV = "ASTROHUB_LOG_FILE"


class ApiConfig(BaseModel):
    """Where the backend lives. Override with ASTROHUB_API__BASE_URL / ASTROHUB_API__TIMEOUT."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:4000"
    timeout: float | None = 30.0  # Seconds; None waits indefinitely

    @field_validator("base_url")
    @classmethod
    def _http_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> Path | None:
        """Log file named by ASTROHUB_LOG_FILE; stderr when unset."""
        path = os.environ.get(LOG_FILE_ENV)
        return Path(path).expanduser() if path else None


class Config(BaseSettings):
    """Process configuration, built once at startup.

    Sources, highest priority first: constructor arguments, ASTROHUB_*
    environment variables, ``.env``, the YAML file named by
    ASTROHUB_CONFIG_FILE, secret files.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASTROHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    api: ApiConfig = ApiConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = [init_settings, env_settings, dotenv_settings]
        config_file = os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            # A missing file contributes nothing
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=Path(config_file).expanduser()))
        sources.append(file_secret_settings)
        return tuple(sources)


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler (stderr, or the ASTROHUB_LOG_FILE file).

    Safe to call more than once; earlier handlers are replaced.
    """
    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(config.file)
    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=config.level,
        format=config.format,
        datefmt=config.date_format,
        handlers=[handler],
        force=True,
    )
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured: level=%s, file=%s", config.level, config.file)

"""Configuration management for telnetecho.

Server constants (listen port, welcome banner, prompt, TCP options) are
fixed and live in a frozen ``ServerConfig`` constructed once at startup.
Only the logging section is loadable, from a YAML configuration file
with environment variable overrides.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/telnetecho.yaml")

# Port 23 needs privileges to bind; 2323 does not.
LISTEN_PORT = 2323

WELCOME_MESSAGE = (
    "Welcome! This is an \x1b[32mecho server\x1b[0m.\r\n"
    "Anything you write will be printed right back at you.\r\n"
)

LINE_PREFIX = "> "


class TcpOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodelay: bool = Field(default=True, description="Disable Nagle's algorithm")
    reuse_address: bool = Field(default=True, description="Set SO_REUSEADDR on the listener")
    read_size: int = Field(default=4096, gt=0, description="Maximum bytes per read")


class ServerConfig(BaseModel):
    """Static server constants.

    Built once at startup from the module defaults. Tests construct their
    own (e.g. ``listen_port=0``) and inject it into the listener.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="0.0.0.0")
    listen_port: int = Field(default=LISTEN_PORT, ge=0, le=65535)
    welcome_message: str = Field(default=WELCOME_MESSAGE)
    line_prefix: str = Field(default=LINE_PREFIX)
    tcp_options: TcpOptions = Field(default_factory=TcpOptions)

    @property
    def welcome_bytes(self) -> bytes:
        return self.welcome_message.encode("utf-8")

    @property
    def prompt_bytes(self) -> bytes:
        return self.line_prefix.encode("utf-8")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for telnetecho.

    Loads from a YAML file and supports environment variable overrides,
    e.g. ``TELNETECHO_LOGGING__LEVEL=DEBUG``. Reads .env files
    automatically.
    """

    model_config = {
        "env_prefix": "TELNETECHO_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Init values carry the YAML file, which env vars override.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)

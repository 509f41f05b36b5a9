"""Configuration management for telnetecho.

Holds the fixed server constants and the YAML/env-loadable logging
settings, both as Pydantic models.
"""

from telnetecho.config.settings import (
    LoggingConfig,
    ServerConfig,
    Settings,
    TcpOptions,
    load_settings,
)

__all__ = ["LoggingConfig", "ServerConfig", "Settings", "TcpOptions", "load_settings"]

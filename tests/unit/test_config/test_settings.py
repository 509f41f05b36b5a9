"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from telnetecho.config.settings import (
    LINE_PREFIX,
    LISTEN_PORT,
    LoggingConfig,
    ServerConfig,
    Settings,
    TcpOptions,
    load_settings,
)


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig()
        assert config.listen_port == LISTEN_PORT == 2323
        assert config.host == "0.0.0.0"
        assert config.line_prefix == LINE_PREFIX == "> "
        assert "\x1b[32mecho server\x1b[0m" in config.welcome_message
        assert config.welcome_message.endswith("\r\n")

    def test_tcp_option_defaults(self) -> None:
        opts = TcpOptions()
        assert opts.nodelay is True
        assert opts.reuse_address is True
        assert opts.read_size == 4096

    def test_frozen(self) -> None:
        config = ServerConfig()
        with pytest.raises(ValidationError):
            config.listen_port = 23  # type: ignore[misc]

    def test_invalid_port_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(listen_port=70000)

    def test_invalid_read_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TcpOptions(read_size=0)

    def test_byte_views(self) -> None:
        config = ServerConfig()
        assert config.prompt_bytes == b"> "
        assert config.welcome_bytes == config.welcome_message.encode("utf-8")


class TestSettings:
    def test_default_settings(self) -> None:
        settings = Settings()
        assert settings.logging.level == "INFO"
        assert settings.logging.file is None

    def test_logging_config_defaults(self) -> None:
        config = LoggingConfig()
        assert "%(asctime)s" in config.format

    def test_load_settings_missing_file(self, tmp_path) -> None:
        """load_settings with missing file should return defaults."""
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.logging.level == "INFO"

    def test_load_settings_from_yaml(self, tmp_path) -> None:
        path = tmp_path / "telnetecho.yaml"
        path.write_text("logging:\n  level: DEBUG\n  file: server.log\n")
        settings = load_settings(path)
        assert settings.logging.level == "DEBUG"
        assert settings.logging.file == "server.log"

    def test_empty_yaml_uses_defaults(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        settings = load_settings(path)
        assert settings.logging.level == "INFO"

    def test_server_section_ignored(self, tmp_path) -> None:
        path = tmp_path / "telnetecho.yaml"
        path.write_text("server:\n  listen_port: 23\n")
        settings = load_settings(path)
        assert not hasattr(settings, "server")

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("TELNETECHO_LOGGING__LEVEL", "WARNING")
        settings = Settings()
        assert settings.logging.level == "WARNING"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "telnetecho.yaml"
        path.write_text("logging:\n  level: INFO\n  file: server.log\n")
        monkeypatch.setenv("TELNETECHO_LOGGING__LEVEL", "DEBUG")
        settings = load_settings(path)
        assert settings.logging.level == "DEBUG"
        # Keys the env does not set still come from the YAML file
        assert settings.logging.file == "server.log"

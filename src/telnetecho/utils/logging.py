"""Logging setup utilities for telnetecho.

Configures logging for the entire application based on the logging
configuration settings. Every session writes its negotiation, echo and
disconnect lines through loggers under the ``telnetecho`` hierarchy.
"""

from __future__ import annotations

import logging
import sys

from telnetecho.config.settings import LoggingConfig

_HANDLER_MARKER = "_telnetecho_handler"


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the telnetecho application.

    Sets up the 'telnetecho' logger with the specified level, format, and
    optional file handler. Handlers installed by a previous call are
    replaced, so calling this twice does not duplicate output.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("telnetecho")
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)

    root_logger.info("Logging initialized at %s level", config.level)

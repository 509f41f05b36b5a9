"""Command-line interface for the telnetecho server.

Running ``telnetecho`` with no arguments starts the echo server on the
fixed port. The options only affect logging.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="telnetecho",
        description="Telnet echo server",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML logging configuration (default: config/telnetecho.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the telnetecho CLI."""
    args = parse_args(argv)

    from telnetecho.config.settings import load_settings
    from telnetecho.server.listener import start
    from telnetecho.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    try:
        started = asyncio.run(start())
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down")
        return

    if not started:
        sys.exit(1)


if __name__ == "__main__":
    main()

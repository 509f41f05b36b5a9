"""Shared test fixtures for the telnetecho test suite.

Provides server configs bound to an ephemeral loopback port and mock
stream pairs for driving a Session without a real socket.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from telnetecho.config.settings import ServerConfig


PEER = ("127.0.0.1", 50000)


# ---------------------------------------------------------------------------
# Config Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def server_config() -> ServerConfig:
    """Default constants, but on an ephemeral loopback port."""
    return ServerConfig(host="127.0.0.1", listen_port=0)


# ---------------------------------------------------------------------------
# Stream Fixtures
# ---------------------------------------------------------------------------


def make_reader(*chunks: bytes) -> AsyncMock:
    """A mock StreamReader whose read() yields ``chunks`` then EOF."""
    reader = AsyncMock(spec=asyncio.StreamReader)
    reader.read.side_effect = [*chunks, b""]
    return reader


@pytest.fixture
def mock_writer() -> MagicMock:
    """A mock StreamWriter that records every write in order.

    ``writer.written`` is the list of byte strings passed to write().
    """
    writer = MagicMock(spec=asyncio.StreamWriter)
    writer.written = []
    writer.write.side_effect = writer.written.append
    writer.drain = AsyncMock()
    writer.wait_closed = AsyncMock()
    writer.is_closing.return_value = False
    writer.get_extra_info.side_effect = lambda name, default=None: (
        PEER if name == "peername" else default
    )
    return writer


@pytest.fixture
def reader_factory():
    """Build a mock StreamReader from a sequence of inbound chunks."""
    return make_reader

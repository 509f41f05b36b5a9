"""TCP listener that spawns one Session per accepted connection.

asyncio's server runs the accept loop and gives each connection its own
task, so the listener never waits on a session before accepting the next
client. Sessions share no state with each other or with the listener.
"""

from __future__ import annotations

import asyncio
import logging
import socket

from telnetecho.config.settings import ServerConfig
from telnetecho.server.session import Session

logger = logging.getLogger(__name__)


class TelnetEchoError(Exception):
    """Base class for telnetecho errors."""


class BindError(TelnetEchoError):
    """Raised when the listening socket cannot be bound."""


class Listener:
    """Accepts telnet clients on the configured port.

    Usage::

        listener = Listener()
        await listener.start()
        await listener.serve_forever()
    """

    def __init__(self, config: ServerConfig | None = None) -> None:
        self._config = config or ServerConfig()
        self._server: asyncio.Server | None = None

    @property
    def is_serving(self) -> bool:
        return self._server is not None and self._server.is_serving()

    @property
    def port(self) -> int | None:
        """The bound port (useful when configured with port 0)."""
        if self._server is None or not self._server.sockets:
            return None
        return self._server.sockets[0].getsockname()[1]

    async def start(self) -> None:
        """Bind the listening socket and begin accepting connections."""
        opts = self._config.tcp_options
        try:
            self._server = await asyncio.start_server(
                self._handle_connection,
                host=self._config.host,
                port=self._config.listen_port,
                reuse_address=opts.reuse_address,
            )
        except OSError as e:
            raise BindError(
                f"Cannot listen on {self._config.host}:{self._config.listen_port}: {e}"
            ) from e
        logger.info("Server Started on %s:%d", self._config.host, self.port)

    async def serve_forever(self) -> None:
        """Accept connections until cancelled."""
        if self._server is None:
            await self.start()
        server = self._server
        if server is None:
            return
        await server.serve_forever()

    async def close(self) -> None:
        """Stop accepting new connections. Running sessions are left alone."""
        if self._server is not None:
            # Not awaiting wait_closed(): it blocks until every live session ends.
            self._server.close()
            self._server = None
            logger.info("Server stopped")

    async def _handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        self._configure_socket(writer)
        session = Session(reader, writer, config=self._config)
        logger.info("%s Client Connected.", session.peer)
        try:
            await session.run()
        except Exception:
            # Contained to this connection; the listener keeps accepting.
            logger.exception("%s Session failed", session.peer)

    def _configure_socket(self, writer: asyncio.StreamWriter) -> None:
        sock = writer.get_extra_info("socket")
        if sock is None:
            return
        nodelay = 1 if self._config.tcp_options.nodelay else 0
        try:
            sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, nodelay)
        except OSError as e:
            logger.debug("Could not set TCP_NODELAY: %s", e)


async def start(config: ServerConfig | None = None) -> bool:
    """Start the echo server and serve until cancelled.

    If the port cannot be bound, the error is logged and False is returned
    without accepting any connection.
    """
    listener = Listener(config)
    try:
        await listener.start()
    except BindError as e:
        logger.error("Error: %s", e)
        return False
    try:
        await listener.serve_forever()
    finally:
        await listener.close()
    return True

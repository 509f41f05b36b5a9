"""Per-connection session: greeting, receive loop, and chunk handling.

A session owns one client connection for its entire life::

    GREETING -> RECEIVING -> (TERMINATED | CLOSED)

TERMINATED is reached when the client sends the exit command; CLOSED
when the peer disconnects first or the transport fails.
"""

from __future__ import annotations

import asyncio
import logging

from telnetecho.config.settings import ServerConfig
from telnetecho.domain.models import (
    ChunkAction,
    EchoAction,
    NegotiateAction,
    SessionState,
    TelnetCommand,
    TerminateAction,
)
from telnetecho.protocol.telnet import (
    ECHO,
    SUPPRESS_GO_AHEAD,
    classify_chunk,
    encode_negotiation,
    option_name,
)

logger = logging.getLogger(__name__)

# Transport failures on read or write end the session like a peer close.
_TRANSPORT_ERRORS = (ConnectionError, OSError, asyncio.IncompleteReadError)


class Session:
    """Runs the telnet echo protocol over one accepted connection.

    Args:
        reader: Stream the client's bytes arrive on.
        writer: Stream back to the client. Owned by this session and
                closed when it ends.
        config: Server constants (banner, prompt, read size).
        log: Logger that receives the session's operator-facing lines.
             Defaults to this module's logger.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        config: ServerConfig | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._config = config or ServerConfig()
        self._log = log or logger
        self._state = SessionState.GREETING
        self._peer = _format_peer(writer.get_extra_info("peername"))

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def peer(self) -> str:
        return self._peer

    async def run(self) -> SessionState:
        """Greet the client and serve it until it exits or goes away."""
        try:
            await self._greet()
            self._state = SessionState.RECEIVING
            await self._receive_loop()
        except _TRANSPORT_ERRORS as e:
            self._log.debug("%s transport error: %s", self._peer, e)
            self._disconnected()
        finally:
            await self._release()
        return self._state

    async def _greet(self) -> None:
        # Four separate writes, in this order, before any client data.
        await self._send(encode_negotiation(TelnetCommand.WONT, SUPPRESS_GO_AHEAD))
        await self._send(encode_negotiation(TelnetCommand.WONT, ECHO))
        await self._send(self._config.welcome_bytes)
        await self._send(self._config.prompt_bytes)

    async def _receive_loop(self) -> None:
        read_size = self._config.tcp_options.read_size
        while self._state is SessionState.RECEIVING:
            data = await self._reader.read(read_size)
            if not data:
                self._disconnected()
                return
            self._log.debug("%s received %r", self._peer, data)
            await self.handle_chunk(data)

    async def handle_chunk(self, data: bytes) -> ChunkAction:
        """Classify one inbound chunk and carry out the resulting action."""
        action = classify_chunk(data)
        if isinstance(action, TerminateAction):
            self._log.info("%s Closed.", self._peer)
            self._state = SessionState.TERMINATED
        elif isinstance(action, NegotiateAction):
            for negotiation in action.negotiations:
                self._log.info(
                    "%s %s %d (%s)",
                    self._peer,
                    negotiation.command.label,
                    negotiation.option,
                    option_name(negotiation.option),
                )
            if action.discarded:
                self._log.debug(
                    "%s discarded %d trailing bytes: %r",
                    self._peer, len(action.discarded), action.discarded,
                )
        elif isinstance(action, EchoAction):
            self._log.info("%s %r", self._peer, action.payload)
            await self._send(action.payload + self._config.prompt_bytes)
        return action

    async def _send(self, data: bytes) -> None:
        self._writer.write(data)
        await self._writer.drain()

    def _disconnected(self) -> None:
        self._state = SessionState.CLOSED
        self._log.info("%s Client Disconnected.", self._peer)

    async def _release(self) -> None:
        if not self._writer.is_closing():
            self._writer.close()
        try:
            await self._writer.wait_closed()
        except _TRANSPORT_ERRORS:
            pass


def _format_peer(peername: object) -> str:
    """Render a socket peername tuple as ``host:port``."""
    if isinstance(peername, tuple) and len(peername) >= 2:
        return f"{peername[0]}:{peername[1]}"
    return str(peername)

"""Telnet option negotiation framing and per-chunk classification.

Negotiation units on the wire are three bytes::

    [IAC=255, command, option]

where command is one of WILL (251), WONT (252), DO (253), DONT (254).
The server only logs these; it never changes option state in response.

Classification is chunk-scoped: each read is classified on its own and
nothing is carried over to the next read, so a line or unit split across
two reads is misclassified.
"""

from __future__ import annotations

from telnetecho.domain.models import (
    ChunkAction,
    EchoAction,
    Negotiation,
    NegotiateAction,
    TelnetCommand,
    TerminateAction,
)

# Telnet protocol constants
IAC = 255  # Interpret As Command
DONT = TelnetCommand.DONT
DO = TelnetCommand.DO
WONT = TelnetCommand.WONT
WILL = TelnetCommand.WILL
SB = 250  # Subnegotiation Begin
GA = 249  # Go Ahead
SE = 240  # Subnegotiation End

# Option codes
ECHO = 1
SUPPRESS_GO_AHEAD = 3

OPTION_NAMES: dict[int, str] = {
    0: "BINARY",
    1: "ECHO",
    2: "RECONNECTION",
    3: "SUPPRESS-GO-AHEAD",
    5: "STATUS",
    6: "TIMING-MARK",
    24: "TERMINAL-TYPE",
    25: "END-OF-RECORD",
    31: "NAWS",
    32: "TERMINAL-SPEED",
    33: "REMOTE-FLOW-CONTROL",
    34: "LINEMODE",
    35: "X-DISPLAY-LOCATION",
    36: "ENVIRON",
    39: "NEW-ENVIRON",
    42: "CHARSET",
}

EXIT_COMMAND = b"exit\r\n"

_UNIT_LENGTH = 3
_NEGOTIATION_COMMANDS = frozenset(int(c) for c in TelnetCommand)


def option_name(code: int) -> str:
    """Human-readable name for a telnet option code."""
    return OPTION_NAMES.get(code, f"UNKNOWN-{code}")


def encode_negotiation(command: TelnetCommand, option: int) -> bytes:
    """Build the 3-byte IAC <command> <option> unit."""
    if not 0 <= option <= 255:
        raise ValueError(f"Telnet option must be 0-255, got {option}")
    return bytes([IAC, int(command), option])


def parse_negotiations(data: bytes) -> tuple[list[Negotiation], bytes]:
    """Consume consecutive negotiation units from the start of ``data``.

    Parsing stops at the first position that is not a complete
    IAC WILL/WONT/DO/DONT unit.

    Returns:
        The recognised units in wire order, and the unconsumed remainder.
    """
    negotiations: list[Negotiation] = []
    pos = 0
    while (
        len(data) - pos >= _UNIT_LENGTH
        and data[pos] == IAC
        and data[pos + 1] in _NEGOTIATION_COMMANDS
    ):
        negotiations.append(
            Negotiation(command=TelnetCommand(data[pos + 1]), option=data[pos + 2])
        )
        pos += _UNIT_LENGTH
    return negotiations, data[pos:]


def classify_chunk(data: bytes) -> ChunkAction:
    """Decide what a session should do with one inbound chunk.

    Checked in priority order: the exact exit command, then a chunk
    starting with IAC, then plain data to echo.
    """
    if data == EXIT_COMMAND:
        return TerminateAction()
    if data[:1] == bytes([IAC]):
        negotiations, rest = parse_negotiations(data)
        return NegotiateAction(negotiations=negotiations, discarded=rest)
    return EchoAction(payload=data)

"""Telnet wire framing for telnetecho.

Pure helpers with no I/O: negotiation constants, unit encoding and
parsing, and the per-chunk classifier used by each session.
"""

from telnetecho.protocol.telnet import (
    EXIT_COMMAND,
    IAC,
    classify_chunk,
    encode_negotiation,
    option_name,
    parse_negotiations,
)

__all__ = [
    "EXIT_COMMAND",
    "IAC",
    "classify_chunk",
    "encode_negotiation",
    "option_name",
    "parse_negotiations",
]

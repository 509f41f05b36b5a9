"""Domain models for telnetecho.

This package contains the core data structures and enumerations used
throughout the system. All models use Pydantic v2 for validation.
"""

from telnetecho.domain.models import (
    ChunkAction,
    EchoAction,
    Negotiation,
    NegotiateAction,
    SessionState,
    TelnetCommand,
    TerminateAction,
)

__all__ = [
    "ChunkAction",
    "EchoAction",
    "Negotiation",
    "NegotiateAction",
    "SessionState",
    "TelnetCommand",
    "TerminateAction",
]

"""Core domain models for the telnetecho system.

These models represent the data flowing through a session: telnet
negotiation requests parsed out of an inbound chunk, and the action the
classifier decides on for that chunk.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class TelnetCommand(enum.IntEnum):
    """Option negotiation verbs that follow an IAC byte."""

    WILL = 251
    WONT = 252
    DO = 253
    DONT = 254

    @property
    def label(self) -> str:
        return _COMMAND_LABELS[self]


_COMMAND_LABELS = {
    TelnetCommand.WILL: "WILL",
    TelnetCommand.WONT: "WON'T",
    TelnetCommand.DO: "DO",
    TelnetCommand.DONT: "DON'T",
}


class SessionState(str, enum.Enum):
    """Lifecycle state of a single client session."""

    GREETING = "greeting"
    RECEIVING = "receiving"
    TERMINATED = "terminated"  # Client sent the exit command
    CLOSED = "closed"  # Peer went away first


# ---------------------------------------------------------------------------
# Negotiation
# ---------------------------------------------------------------------------


class Negotiation(BaseModel):
    """One 3-byte IAC <command> <option> unit."""

    model_config = ConfigDict(frozen=True)

    command: TelnetCommand
    option: int = Field(ge=0, le=255, description="Telnet option code")


# ---------------------------------------------------------------------------
# Chunk actions
# ---------------------------------------------------------------------------


class TerminateAction(BaseModel):
    """The chunk was the exit command; the session must close."""

    model_config = ConfigDict(frozen=True)

    action_type: Literal["terminate"] = "terminate"


class NegotiateAction(BaseModel):
    """The chunk started with IAC and was consumed as negotiation units.

    ``discarded`` holds whatever trailed the last recognised unit. It is
    never echoed.
    """

    model_config = ConfigDict(frozen=True)

    action_type: Literal["negotiate"] = "negotiate"
    negotiations: list[Negotiation] = Field(default_factory=list)
    discarded: bytes = Field(default=b"")


class EchoAction(BaseModel):
    """Plain data to be sent back to the client verbatim."""

    model_config = ConfigDict(frozen=True)

    action_type: Literal["echo"] = "echo"
    payload: bytes


ChunkAction = Annotated[
    Union[TerminateAction, NegotiateAction, EchoAction],
    Field(discriminator="action_type"),
]

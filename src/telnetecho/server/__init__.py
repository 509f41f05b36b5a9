"""Telnet echo server: the listener and the per-connection session."""

from telnetecho.server.listener import BindError, Listener, TelnetEchoError, start
from telnetecho.server.session import Session

__all__ = ["BindError", "Listener", "Session", "TelnetEchoError", "start"]

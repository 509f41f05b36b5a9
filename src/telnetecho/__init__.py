"""telnetecho -- A small telnet echo server.

Greets each client, echoes back whatever it sends followed by a prompt,
logs (but never acts on) telnet option negotiation requests, and closes
the session when the client types ``exit``.
"""

__version__ = "0.1.0"

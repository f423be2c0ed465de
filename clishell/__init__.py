"""Building blocks for interactive command shells: splitting, parsing, history, scheduling, state machines, colours, telnet and base64."""

__version__ = "0.1.0"
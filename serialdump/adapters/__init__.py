"""serialdump/adapters/__init__.py

Adapters that connect the serialdump application layer to the outside
world (serial port, console, readiness wait).

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from .console import ConsoleInput  # noqa: F401
from .serial_backend import SerialBackend  # noqa: F401
from .waiter import SelectorWaiter  # noqa: F401

__all__ = [
    "ConsoleInput",
    "SelectorWaiter",
    "SerialBackend",
]

"""serialdump/domain/__init__.py

Domain models and entities for the serial terminal.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from .errors import ConfigurationError, FatalIOError, SerialdumpError
from .models import (
    DisplayMode,
    EscapeState,
    FrameFlag,
    ReceptionBuffer,
    TerminalConfig,
)

__all__ = [
    "ConfigurationError",
    "DisplayMode",
    "EscapeState",
    "FatalIOError",
    "FrameFlag",
    "ReceptionBuffer",
    "SerialdumpError",
    "TerminalConfig",
]

"""serialdump/domain/errors.py

Exception hierarchy shared by the application and adapter layers.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""


class SerialdumpError(Exception):
    """Base class for all serialdump errors."""


class ConfigurationError(SerialdumpError):
    """Invalid option, device path or line speed; raised before the loop starts."""


class FatalIOError(SerialdumpError):
    """Unrecoverable failure on the serial device, the console or the wait call."""

"""serialdump/domain/models.py

Domain models for the serial terminal: display modes, SLIP decoder
states, the bounded reception buffer and the runtime configuration.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_BAUDRATE,
    DEFAULT_DELAY_US,
    DEFAULT_DEVICE,
    SUPPORTED_BAUDRATES,
)


class DisplayMode(str, Enum):
    """Rendering mode for the inbound serial stream.

    ``START_TEXT``/``TEXT`` behave identically. ``START_DATE``/``DATE``
    are the two sub-states of timestamped text: ``START_DATE`` prints
    the prefix for a new line and then hands over to ``DATE``.
    """

    START_TEXT = "start_text"
    TEXT = "text"
    START_DATE = "start_date"
    DATE = "date"
    INT = "int"
    HEX = "hex"
    SLIP_AUTO = "slip_auto"
    SLIP = "slip"
    SLIP_HIDE = "slip_hide"

    @property
    def is_slip(self) -> bool:
        return self in (DisplayMode.SLIP_AUTO, DisplayMode.SLIP, DisplayMode.SLIP_HIDE)


class EscapeState(Enum):
    NONE = 0
    PENDING_ESCAPE = 1


class FrameFlag(Enum):
    """Frame boundary tracking for the SLIP decoder."""

    CLOSED = 0
    OPEN = 1
    OVERFLOWED = 2


class ReceptionBuffer:
    """Bounded ordered byte sequence.

    :meth:`append` never truncates silently: callers check
    :attr:`is_full` first and handle the overflow themselves. Appending
    to a full buffer raises :class:`OverflowError`.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    @property
    def is_full(self) -> bool:
        return len(self._data) >= self.capacity

    def append(self, value: int) -> None:
        if self.is_full:
            raise OverflowError(f"reception buffer full ({self.capacity} bytes)")
        self._data.append(value)

    def clear(self) -> None:
        self._data.clear()


class TerminalConfig(BaseModel):
    """Runtime configuration for one terminal session.

    Attributes
    ----------
    device:
        Serial device path.
    baudrate:
        Line speed, one of :data:`serialdump.constants.SUPPORTED_BAUDRATES`.
    mode:
        Initial :class:`DisplayMode`.
    delay_us:
        Minimum delay between two outbound bytes, in microseconds.
    timeformat:
        ``strftime`` format for line prefixes. When ``None`` the prefix is
        numeric (epoch or elapsed seconds, see ``starttime``).
    starttime:
        Use elapsed time since start instead of wall-clock seconds.
    """

    device: str = DEFAULT_DEVICE
    baudrate: int = DEFAULT_BAUDRATE
    mode: DisplayMode = DisplayMode.START_TEXT
    delay_us: int = Field(default=DEFAULT_DELAY_US, ge=0)
    timeformat: Optional[str] = None
    starttime: bool = False
    logdir: str = ""
    debug: bool = False

    @field_validator("baudrate")
    @classmethod
    def _check_baudrate(cls, value: int) -> int:
        if value not in SUPPORTED_BAUDRATES:
            raise ValueError(f"unknown baudrate {value}")
        return value


__all__ = [
    "DisplayMode",
    "EscapeState",
    "FrameFlag",
    "ReceptionBuffer",
    "TerminalConfig",
]

"""serialdump/application/slip.py

SLIP frame decoder used by the SLIP display modes.

The decoder is a one-byte lookback machine (``EscapeState``) layered
under a start/stop toggle (``FrameFlag``):

* ``ESC`` arms the escape state and is not buffered.
* ``END`` on a non-empty buffer completes the frame. The payload is
  handed back unless the frame overflowed; buffer, escape state and
  flag are reset.
* ``END`` on an empty buffer toggles the flag. An overflowed flag is
  cleared.
* Any other byte is unescaped if needed (unknown escape codes pass
  through unchanged) and buffered. A byte arriving on a full buffer
  reports an overflow, discards the buffered data and marks the frame
  as overflowed so its completion is not rendered.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from typing import Callable, Optional

from ..constants import SLIP_BUFFER_SIZE, SLIP_END, SLIP_ESC, SLIP_ESC_END, SLIP_ESC_ESC
from ..domain import EscapeState, FrameFlag, ReceptionBuffer
from ..logging_utils import logprintf

_UNESCAPE: dict[int, int] = {
    SLIP_ESC_END: SLIP_END,
    SLIP_ESC_ESC: SLIP_ESC,
}


class SlipFrameDecoder:
    """Byte-at-a-time SLIP unstuffing and frame delimiting."""

    def __init__(
        self,
        capacity: int = SLIP_BUFFER_SIZE,
        logger: Callable[..., None] = logprintf,
    ) -> None:
        self.buffer = ReceptionBuffer(capacity)
        self.escape = EscapeState.NONE
        self.flag = FrameFlag.CLOSED
        self._logger = logger

    @property
    def frame_open(self) -> bool:
        return self.flag is not FrameFlag.CLOSED

    def feed(self, value: int) -> Optional[bytes]:
        """Process one byte; return the payload when a frame completes."""

        if value == SLIP_ESC:
            self.escape = EscapeState.PENDING_ESCAPE
            return None

        if value == SLIP_END:
            return self._on_end()

        if self.escape is EscapeState.PENDING_ESCAPE:
            self.escape = EscapeState.NONE
            value = _UNESCAPE.get(value, value)

        if self.buffer.is_full:
            self._logger(1, "**** slip overflow")
            self.buffer.clear()
            self.flag = FrameFlag.OVERFLOWED
            return None

        self.buffer.append(value)
        return None

    def _on_end(self) -> Optional[bytes]:
        if len(self.buffer) == 0:
            self.flag = FrameFlag.OPEN if self.flag is FrameFlag.CLOSED else FrameFlag.CLOSED
            return None

        payload = bytes(self.buffer) if self.flag is not FrameFlag.OVERFLOWED else None
        self.escape = EscapeState.NONE
        self.buffer.clear()
        self.flag = FrameFlag.CLOSED
        return payload


__all__ = ["SlipFrameDecoder"]

"""serialdump/application/decoder.py

Inbound decoder: renders bytes read from the serial device according to
the active :class:`~serialdump.domain.DisplayMode`.

The decoder owns every piece of per-connection state (mode, hex row
buffer, SLIP frame decoder, decimal column counter) so the event loop
only has to hand it each batch read from the device.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

import time
from typing import BinaryIO, Callable, Optional

from ..constants import HCOLS, ICOLS, SLIP_END, SLIP_PREFIX
from ..domain import DisplayMode, ReceptionBuffer
from ..logging_utils import logprintf
from ..time_utils import elapsed_prefix, epoch_prefix, strftime_prefix
from .render import hex_dump, hex_row, int_column
from .slip import SlipFrameDecoder


class InboundDecoder:
    """Per-byte display-mode state machine.

    Parameters
    ----------
    mode:
        Initial display mode.
    out:
        Binary sink receiving the rendered output (``sys.stdout.buffer``
        in production).
    timeformat:
        ``strftime`` format for line prefixes in the timestamped modes.
    starttime:
        Prefix lines with the elapsed time since the decoder was created
        instead of wall-clock seconds. Ignored when ``timeformat`` is set.
    clock:
        Time source returning seconds since the epoch.
    """

    def __init__(
        self,
        mode: DisplayMode,
        out: BinaryIO,
        *,
        timeformat: Optional[str] = None,
        starttime: bool = False,
        clock: Callable[[], float] = time.time,
        logger: Callable[..., None] = logprintf,
    ) -> None:
        self.mode = mode
        self._out = out
        self._timeformat = timeformat
        self._starttime = starttime
        self._clock = clock
        self._start = clock()
        self.column = 0

        self.hex_buffer: ReceptionBuffer | None = None
        self.slip: SlipFrameDecoder | None = None
        if mode is DisplayMode.HEX:
            self.hex_buffer = ReceptionBuffer(HCOLS)
        elif mode.is_slip:
            self.slip = SlipFrameDecoder(logger=logger)

        self._handlers: dict[DisplayMode, Callable[[int], None]] = {
            DisplayMode.START_TEXT: self._on_text,
            DisplayMode.TEXT: self._on_text,
            DisplayMode.START_DATE: self._on_start_date,
            DisplayMode.DATE: self._on_date,
            DisplayMode.INT: self._on_int,
            DisplayMode.HEX: self._on_hex,
            DisplayMode.SLIP_AUTO: self._on_slip_auto,
            DisplayMode.SLIP_HIDE: self._on_slip_auto,
            DisplayMode.SLIP: self._on_slip,
        }

    # --- public API -------------------------------------------------------

    def feed(self, data: bytes) -> None:
        """Render one batch of serial bytes in arrival order."""

        for value in data:
            self._handlers[self.mode](value)

        # idle stream: show the partial hex row, a full row overwrites it
        if self.hex_buffer is not None and len(self.hex_buffer) > 0:
            self._emit_text("\r" + hex_row("", bytes(self.hex_buffer)))

    # --- output helpers ---------------------------------------------------

    def _emit(self, data: bytes) -> None:
        self._out.write(data)

    def _emit_text(self, text: str) -> None:
        self._out.write(text.encode("latin-1"))

    def _emit_prefix(self, text: str) -> None:
        # strftime output may carry any character of the user format
        self._out.write(text.encode("utf-8", errors="replace"))

    def _line_prefix(self) -> str:
        now = self._clock()
        if self._timeformat is not None:
            return strftime_prefix(now, self._timeformat)
        if self._starttime:
            return elapsed_prefix(now, self._start)
        return epoch_prefix(now)

    # --- mode handlers ----------------------------------------------------

    def _on_text(self, value: int) -> None:
        self._emit(bytes((value,)))

    def _on_start_date(self, value: int) -> None:
        self._emit_prefix(self._line_prefix())
        self.mode = DisplayMode.DATE
        self._on_date(value)

    def _on_date(self, value: int) -> None:
        self._emit(bytes((value,)))
        if value == ord("\n"):
            self.mode = DisplayMode.START_DATE

    def _on_int(self, value: int) -> None:
        self._emit_text(int_column(value))
        self.column += 1
        if self.column >= ICOLS:
            self.column = 0
            self._emit_text("\n")

    def _on_hex(self, value: int) -> None:
        assert self.hex_buffer is not None
        self.hex_buffer.append(value)
        if self.hex_buffer.is_full:
            self._emit_text("\r" + hex_row("", bytes(self.hex_buffer)) + "\n")
            self.hex_buffer.clear()

    def _on_slip_auto(self, value: int) -> None:
        assert self.slip is not None
        # plain text between frames
        if not self.slip.frame_open and value != SLIP_END:
            self._on_text(value)
            return
        self._on_slip(value)

    def _on_slip(self, value: int) -> None:
        assert self.slip is not None
        payload = self.slip.feed(value)
        if payload is None or self.mode is DisplayMode.SLIP_HIDE:
            return
        for row in hex_dump(SLIP_PREFIX, payload):
            self._emit_text("\r" + row + "\n")


__all__ = ["InboundDecoder"]

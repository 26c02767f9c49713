"""serialdump/application/relay.py

Outbound relay: forwards console bytes to the serial device one byte at
a time. The fixed inter-byte delay is the only flow control; in SLIP
only mode each chunk is wrapped between two ``END`` bytes.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

import time
from typing import Callable

from ..constants import DEFAULT_DELAY_US, SLIP_END
from ..domain import DisplayMode, FatalIOError
from ..logging_utils import logprintf
from ..ports import SerialDevicePort

_END_BYTE = bytes((SLIP_END,))


class OutboundRelay:
    def __init__(
        self,
        device: SerialDevicePort,
        mode: DisplayMode,
        delay_us: int = DEFAULT_DELAY_US,
        *,
        sleep: Callable[[float], None] = time.sleep,
        logger: Callable[..., None] = logprintf,
    ) -> None:
        if delay_us < 0:
            raise ValueError("Delay must not be negative")
        self._device = device
        self._framed = mode is DisplayMode.SLIP
        self._delay_s = delay_us / 1_000_000
        self._sleep = sleep
        self._logger = logger

    def forward(self, data: bytes) -> None:
        """Write ``data`` slowly; any failed write is fatal."""

        self._logger(3, "SEND %d bytes", len(data))
        if self._framed:
            self._write(_END_BYTE)

        for value in data:
            self._write(bytes((value,)))
            self._device.flush()
            if self._delay_s > 0:
                self._sleep(self._delay_s)

        if self._framed:
            self._write(_END_BYTE)
            self._device.flush()

    def _write(self, payload: bytes) -> None:
        written = self._device.write(payload)
        if written is None or written <= 0:
            raise FatalIOError("write: serial device accepted no data")


__all__ = ["OutboundRelay"]

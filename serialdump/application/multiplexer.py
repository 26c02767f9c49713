"""serialdump/application/multiplexer.py

Single-threaded event loop joining the console, the serial device and
the display.

Each iteration blocks in the wait primitive, then services the console
(outbound) before the serial device (inbound). Interrupted waits are
retried; every other failure surfaces as :class:`FatalIOError`.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from typing import BinaryIO, Callable

from ..constants import BUFSIZE
from ..domain import FatalIOError
from ..logging_utils import logprintf
from ..ports import KeyboardPort, SerialDevicePort, WaiterPort
from .decoder import InboundDecoder
from .relay import OutboundRelay

KEYBOARD = "keyboard"
SERIAL = "serial"


class StreamMultiplexer:
    def __init__(
        self,
        waiter: WaiterPort,
        keyboard: KeyboardPort,
        device: SerialDevicePort,
        relay: OutboundRelay,
        decoder: InboundDecoder,
        out: BinaryIO,
        logger: Callable[..., None] = logprintf,
    ) -> None:
        self._waiter = waiter
        self._keyboard = keyboard
        self._device = device
        self._relay = relay
        self._decoder = decoder
        self._out = out
        self._logger = logger
        self.keyboard_open = True

        waiter.register(keyboard, KEYBOARD)
        waiter.register(device, SERIAL)

    def run_forever(self) -> None:
        """Loop until a fatal error (or a signal) ends the process."""

        while True:
            self.poll_once()

    def poll_once(self) -> None:
        try:
            ready = self._waiter.wait()
        except InterruptedError:
            self._logger(3, "interrupted system call")
            return
        except OSError as exc:
            raise FatalIOError(f"select: {exc}") from exc

        if KEYBOARD in ready:
            self._service_keyboard()
        if SERIAL in ready:
            self._service_serial()

    def _service_keyboard(self) -> None:
        data = self._keyboard.read(BUFSIZE)
        if not data:
            # stdin at EOF stays readable forever; stop watching it
            self._waiter.unregister(self._keyboard)
            self.keyboard_open = False
            self._logger(2, "console input closed, relaying serial output only")
            return
        self._relay.forward(data)

    def _service_serial(self) -> None:
        data = self._device.read(BUFSIZE)
        try:
            self._decoder.feed(data)
            self._out.flush()
        except OSError as exc:
            raise FatalIOError(f"could not write output: {exc}") from exc


__all__ = ["KEYBOARD", "SERIAL", "StreamMultiplexer"]

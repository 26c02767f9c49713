"""Backend serial para o terminal serialdump.

Este módulo encapsula a porta pyserial e converte falhas de I/O em
:class:`~serialdump.domain.FatalIOError`.
"""

from __future__ import annotations

from typing import Callable

import serial

from ..domain import FatalIOError


class SerialBackend:
    """Raw 8N1 serial port opened without flow control.

    pyserial puts the line in raw mode on POSIX (no canonical input, no
    echo, no signal characters, no output post-processing). ``timeout=0``
    makes :meth:`read` return whatever is buffered once the wait
    primitive reports the port readable.
    """

    def __init__(self, logger: Callable[[int, str, object], None]):
        self._logger = logger
        self._serial: serial.Serial | None = None
        self.port: str | None = None

    @property
    def is_open(self) -> bool:
        return bool(self._serial and self._serial.is_open)

    def open(self, port: str, baudrate: int) -> None:
        if self.is_open:
            return
        try:
            self._serial = serial.Serial(
                port=port,
                baudrate=baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=0,
                xonxoff=False,
                rtscts=False,
            )
        except (OSError, ValueError, serial.SerialException) as exc:
            raise FatalIOError(f"{port}: {exc}") from exc
        self.port = port

    def _require_open(self) -> serial.Serial:
        if self._serial is None:
            raise FatalIOError("serial port is not open")
        return self._serial

    def fileno(self) -> int:
        return self._require_open().fileno()

    def read(self, max_len: int) -> bytes:
        port = self._require_open()
        try:
            return bytes(port.read(max_len))
        except (OSError, serial.SerialException) as exc:
            raise FatalIOError(f"could not read: {exc}") from exc

    def write(self, payload: bytes) -> int:
        port = self._require_open()
        try:
            return int(port.write(payload) or 0)
        except (OSError, serial.SerialException) as exc:
            raise FatalIOError(f"write: {exc}") from exc

    def flush(self) -> None:
        port = self._require_open()
        try:
            port.flush()
        except (OSError, serial.SerialException) as exc:
            raise FatalIOError(f"flush: {exc}") from exc

    def close(self) -> None:
        if self._serial is None:
            return
        try:
            self._serial.close()
        except (OSError, serial.SerialException) as exc:
            self._logger(1, "Closing %s failed: %s", self.port, exc)
        finally:
            self._serial = None

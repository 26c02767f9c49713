"""serialdump/ports/__init__.py

Hexagonal architecture ports (abstract interfaces).

This module defines the contracts used by the application layer to talk
to the serial device, the keyboard console and the blocking "wait until
readable" primitive. Adapters in :mod:`serialdump.adapters` provide the
concrete implementations; tests drive the application layer with fakes.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from typing import Hashable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class SerialDevicePort(Protocol):
    """Duplex raw byte stream to the serial device.

    Concrete implementation: :class:`serialdump.adapters.serial_backend.SerialBackend`.
    """

    def fileno(self) -> int:  # pragma: no cover - structural
        """Return the OS handle used by the wait primitive."""

    def read(self, max_len: int) -> bytes:  # pragma: no cover - structural
        """Return up to ``max_len`` bytes that are already available."""

    def write(self, payload: bytes) -> int:  # pragma: no cover - structural
        """Write ``payload`` and return the number of bytes accepted."""

    def flush(self) -> None:  # pragma: no cover - structural
        """Block until written bytes have left the output buffer."""

    def close(self) -> None:  # pragma: no cover - structural
        """Release the device."""


@runtime_checkable
class KeyboardPort(Protocol):
    """Console input stream.

    Concrete implementation: :class:`serialdump.adapters.console.ConsoleInput`.
    """

    def fileno(self) -> int:  # pragma: no cover - structural
        """Return the OS handle used by the wait primitive."""

    def read(self, max_len: int) -> bytes:  # pragma: no cover - structural
        """Return up to ``max_len`` bytes, ``b""`` at end of file."""


@runtime_checkable
class WaiterPort(Protocol):
    """Blocking readiness wait over a set of handles.

    Concrete implementation: :class:`serialdump.adapters.waiter.SelectorWaiter`.
    """

    def register(self, handle, key: Hashable) -> None:  # pragma: no cover - structural
        """Watch ``handle`` for readability, reporting it as ``key``."""

    def unregister(self, handle) -> None:  # pragma: no cover - structural
        """Stop watching ``handle``."""

    def wait(self) -> Sequence[Hashable]:  # pragma: no cover - structural
        """Block until at least one handle is readable and return their keys.

        May raise :class:`InterruptedError`; callers simply retry.
        """


__all__ = [
    "KeyboardPort",
    "SerialDevicePort",
    "WaiterPort",
]

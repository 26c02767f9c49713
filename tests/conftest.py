"""Shared pytest fixtures for the serialdump test suite.

Copyright BINGO Collaboration
Last Modified: 2026-10-19
"""

from __future__ import annotations

import io

import pytest

from serialdump.constants import SLIP_END, SLIP_ESC, SLIP_ESC_END, SLIP_ESC_ESC


class FakeDevice:
    """In-memory serial device: scripted reads, recorded writes."""

    def __init__(self, reads=None, write_result=None):
        self.reads = list(reads or [])
        self.writes: list[bytes] = []
        self.flushes = 0
        self.closed = False
        self.write_result = write_result

    def fileno(self) -> int:
        return 99

    def read(self, max_len: int) -> bytes:
        if not self.reads:
            return b""
        chunk = self.reads.pop(0)
        assert len(chunk) <= max_len
        return chunk

    def write(self, payload: bytes) -> int:
        self.writes.append(bytes(payload))
        if self.write_result is not None:
            return self.write_result
        return len(payload)

    def flush(self) -> None:
        self.flushes += 1

    def close(self) -> None:
        self.closed = True


class FakeKeyboard:
    def __init__(self, reads=None):
        self.reads = list(reads or [])

    def fileno(self) -> int:
        return 0

    def read(self, max_len: int) -> bytes:
        if not self.reads:
            return b""
        return self.reads.pop(0)[:max_len]


class FakeWaiter:
    """Replays a script of ready-key lists; exception entries are raised."""

    def __init__(self, script=None):
        self.script = list(script or [])
        self.registered: dict[object, object] = {}
        self.closed = False

    def register(self, handle, key) -> None:
        self.registered[key] = handle

    def unregister(self, handle) -> None:
        for key, value in list(self.registered.items()):
            if value is handle:
                del self.registered[key]

    def wait(self):
        if not self.script:
            raise OSError("script exhausted")
        step = self.script.pop(0)
        if isinstance(step, BaseException):
            raise step
        return step

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_device():
    return FakeDevice


@pytest.fixture
def make_keyboard():
    return FakeKeyboard


@pytest.fixture
def make_waiter():
    return FakeWaiter


@pytest.fixture
def sink() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def log_calls():
    """Logger stand-in recording ``(level, message)`` tuples."""

    calls: list[tuple[int, str]] = []

    def logger(level, fmt, *args):
        calls.append((level, fmt % args if args else fmt))

    logger.calls = calls  # type: ignore[attr-defined]
    return logger


@pytest.fixture
def slip_stuff():
    """Return a function framing a payload the way a SLIP sender does."""

    def stuff(payload: bytes) -> bytes:
        out = bytearray([SLIP_END])
        for value in payload:
            if value == SLIP_END:
                out += bytes([SLIP_ESC, SLIP_ESC_END])
            elif value == SLIP_ESC:
                out += bytes([SLIP_ESC, SLIP_ESC_ESC])
            else:
                out.append(value)
        out.append(SLIP_END)
        return bytes(out)

    return stuff


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "SERIALDUMP_DEVICE",
        "SERIALDUMP_BAUDRATE",
        "SERIALDUMP_DELAY_US",
        "SERIALDUMP_LOGDIR",
        "SERIALDUMP_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)

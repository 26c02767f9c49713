from __future__ import annotations

import pytest
import serial

from serialdump.adapters import serial_backend
from serialdump.adapters.serial_backend import SerialBackend
from serialdump.domain import FatalIOError


class _FakeSerial:
    instances: list["_FakeSerial"] = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.is_open = True
        self.pending = b"abc"
        self.written = b""
        self.fail_read = False
        self.fail_close = False
        _FakeSerial.instances.append(self)

    def fileno(self):
        return 7

    def read(self, size):
        if self.fail_read:
            raise serial.SerialException("device disconnected")
        data, self.pending = self.pending[:size], self.pending[size:]
        return data

    def write(self, data):
        self.written += data
        return len(data)

    def flush(self):
        pass

    def close(self):
        self.is_open = False
        if self.fail_close:
            raise OSError("busy")


@pytest.fixture
def fake_serial(monkeypatch):
    _FakeSerial.instances = []
    monkeypatch.setattr(serial_backend.serial, "Serial", _FakeSerial)
    return _FakeSerial


def test_open_uses_raw_8n1_settings(fake_serial, log_calls) -> None:
    backend = SerialBackend(log_calls)
    backend.open("/dev/ttyUSB0", 115200)

    kwargs = fake_serial.instances[0].kwargs
    assert kwargs["port"] == "/dev/ttyUSB0"
    assert kwargs["baudrate"] == 115200
    assert kwargs["bytesize"] == serial.EIGHTBITS
    assert kwargs["parity"] == serial.PARITY_NONE
    assert kwargs["timeout"] == 0
    assert kwargs["rtscts"] is False
    assert backend.is_open
    assert backend.fileno() == 7


def test_open_failure_is_fatal(monkeypatch, log_calls) -> None:
    def boom(**_kwargs):
        raise serial.SerialException("could not open port /dev/ttyFAKE")

    monkeypatch.setattr(serial_backend.serial, "Serial", boom)
    backend = SerialBackend(log_calls)
    with pytest.raises(FatalIOError, match="/dev/ttyFAKE"):
        backend.open("/dev/ttyFAKE", 57600)
    assert not backend.is_open


def test_read_and_write(fake_serial, log_calls) -> None:
    backend = SerialBackend(log_calls)
    backend.open("/dev/ttyUSB0", 57600)
    assert backend.read(2) == b"ab"
    assert backend.write(b"xy") == 2
    assert fake_serial.instances[0].written == b"xy"


def test_read_failure_is_fatal(fake_serial, log_calls) -> None:
    backend = SerialBackend(log_calls)
    backend.open("/dev/ttyUSB0", 57600)
    fake_serial.instances[0].fail_read = True
    with pytest.raises(FatalIOError, match="could not read"):
        backend.read(40)


def test_use_before_open_is_fatal(log_calls) -> None:
    backend = SerialBackend(log_calls)
    with pytest.raises(FatalIOError):
        backend.read(1)


def test_close_failure_is_logged(fake_serial, log_calls) -> None:
    backend = SerialBackend(log_calls)
    backend.open("/dev/ttyUSB0", 57600)
    fake_serial.instances[0].fail_close = True
    backend.close()
    assert not backend.is_open
    assert log_calls.calls and log_calls.calls[0][0] == 1
    backend.close()

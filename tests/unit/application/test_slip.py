from __future__ import annotations

import pytest

from serialdump.application.slip import SlipFrameDecoder
from serialdump.constants import SLIP_BUFFER_SIZE, SLIP_END, SLIP_ESC, SLIP_ESC_END, SLIP_ESC_ESC
from serialdump.domain import EscapeState, FrameFlag


def _frames(decoder: SlipFrameDecoder, data: bytes) -> list[bytes]:
    frames = []
    for value in data:
        payload = decoder.feed(value)
        if payload is not None:
            frames.append(payload)
    return frames


@pytest.mark.parametrize(
    "payload",
    [
        b"\x01",
        b"hello",
        bytes([SLIP_END]),
        bytes([SLIP_ESC]),
        bytes([SLIP_ESC, SLIP_END, SLIP_ESC_END, SLIP_ESC_ESC]),
        bytes(range(256)),
    ],
)
def test_stuffed_payload_decodes_back(payload: bytes, slip_stuff) -> None:
    decoder = SlipFrameDecoder()
    assert _frames(decoder, slip_stuff(payload)) == [payload]
    assert decoder.flag is FrameFlag.CLOSED
    assert len(decoder.buffer) == 0


def test_escape_byte_is_not_buffered() -> None:
    decoder = SlipFrameDecoder()
    decoder.feed(SLIP_END)
    decoder.feed(SLIP_ESC)
    assert decoder.escape is EscapeState.PENDING_ESCAPE
    assert len(decoder.buffer) == 0


def test_unknown_escape_code_passes_through() -> None:
    decoder = SlipFrameDecoder()
    data = bytes([SLIP_END, SLIP_ESC, 0x41, 0x42, SLIP_END])
    assert _frames(decoder, data) == [b"AB"]
    assert decoder.escape is EscapeState.NONE


def test_empty_frame_toggles_flag_back_to_closed() -> None:
    decoder = SlipFrameDecoder()
    decoder.feed(SLIP_END)
    assert decoder.flag is FrameFlag.OPEN
    assert decoder.feed(SLIP_END) is None
    assert decoder.flag is FrameFlag.CLOSED


def test_isolated_end_opens_frame() -> None:
    decoder = SlipFrameDecoder()
    decoder.feed(SLIP_END)
    assert decoder.frame_open


def test_frame_of_capacity_does_not_overflow(log_calls) -> None:
    decoder = SlipFrameDecoder(logger=log_calls)
    payload = bytes([0x01]) * SLIP_BUFFER_SIZE
    assert _frames(decoder, bytes([SLIP_END]) + payload + bytes([SLIP_END])) == [payload]
    assert log_calls.calls == []


def test_overflow_reports_and_suppresses_frame(log_calls) -> None:
    decoder = SlipFrameDecoder(logger=log_calls)
    data = bytes([SLIP_END]) + bytes([0x01]) * (SLIP_BUFFER_SIZE + 1)
    assert _frames(decoder, data) == []
    assert decoder.flag is FrameFlag.OVERFLOWED
    assert len(decoder.buffer) == 0
    assert log_calls.calls == [(1, "**** slip overflow")]

    assert decoder.feed(SLIP_END) is None
    assert decoder.flag is FrameFlag.CLOSED

    # the following frame renders again
    assert _frames(decoder, bytes([SLIP_END, 0x02, SLIP_END])) == [b"\x02"]


def test_overflow_tail_bytes_are_dropped_at_end(log_calls) -> None:
    decoder = SlipFrameDecoder(logger=log_calls)
    data = bytes([SLIP_END]) + bytes([0x01]) * (SLIP_BUFFER_SIZE + 12) + bytes([SLIP_END])
    assert _frames(decoder, data) == []
    assert decoder.flag is FrameFlag.CLOSED
    assert len(decoder.buffer) == 0


def test_end_clears_pending_escape() -> None:
    decoder = SlipFrameDecoder()
    assert _frames(decoder, bytes([SLIP_END, 0x01, SLIP_ESC, SLIP_END])) == [b"\x01"]
    assert decoder.escape is EscapeState.NONE


def test_escape_survives_empty_end_toggle() -> None:
    decoder = SlipFrameDecoder()
    data = bytes([SLIP_END, SLIP_ESC, SLIP_END])
    assert _frames(decoder, data) == []
    assert decoder.flag is FrameFlag.CLOSED
    assert decoder.escape is EscapeState.PENDING_ESCAPE

    assert _frames(decoder, bytes([SLIP_ESC_END, SLIP_END])) == [bytes([SLIP_END])]
    assert decoder.escape is EscapeState.NONE
    assert decoder.flag is FrameFlag.CLOSED

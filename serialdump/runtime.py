"""Runtime wiring for the serialdump terminal.

Opens the serial device, assembles decoder, relay and multiplexer
around the process' standard streams and runs the event loop until a
fatal error or an interrupt ends it.
"""

from __future__ import annotations

import sys
import time
from typing import BinaryIO, Callable, Optional

from .adapters import ConsoleInput, SelectorWaiter, SerialBackend
from .application import InboundDecoder, OutboundRelay, StreamMultiplexer
from .domain import FatalIOError, TerminalConfig
from .logging_utils import logprintf
from .ports import KeyboardPort


def build_multiplexer(
    cfg: TerminalConfig,
    device,
    *,
    keyboard: KeyboardPort,
    waiter,
    out: BinaryIO,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.time,
) -> StreamMultiplexer:
    decoder = InboundDecoder(
        cfg.mode,
        out,
        timeformat=cfg.timeformat,
        starttime=cfg.starttime,
        clock=clock,
        logger=logprintf,
    )
    relay = OutboundRelay(device, cfg.mode, cfg.delay_us, sleep=sleep, logger=logprintf)
    return StreamMultiplexer(waiter, keyboard, device, relay, decoder, out, logger=logprintf)


def run(
    cfg: TerminalConfig,
    *,
    backend: Optional[SerialBackend] = None,
    keyboard: Optional[KeyboardPort] = None,
    waiter: Optional[SelectorWaiter] = None,
    out: Optional[BinaryIO] = None,
) -> int:
    """Execute the terminal and return a POSIX exit code."""

    backend = backend or SerialBackend(logprintf)
    try:
        backend.open(cfg.device, cfg.baudrate)
    except FatalIOError as exc:
        logprintf(0, "%s", exc)
        return 1
    logprintf(2, "connecting to %s (%d) [OK]", cfg.device, cfg.baudrate)

    waiter = waiter or SelectorWaiter()
    try:
        mux = build_multiplexer(
            cfg,
            backend,
            keyboard=keyboard or ConsoleInput(),
            waiter=waiter,
            out=out or sys.stdout.buffer,
        )
        mux.run_forever()
    except FatalIOError as exc:
        logprintf(0, "%s", exc)
        return 1
    except KeyboardInterrupt:
        logprintf(2, "Interrupted, closing %s", cfg.device)
        return 0
    finally:
        waiter.close()
        backend.close()
    return 0

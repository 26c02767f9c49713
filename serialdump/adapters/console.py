"""Console (keyboard) input adapter."""

from __future__ import annotations

import os
import sys
from typing import IO

from ..domain import FatalIOError


class ConsoleInput:
    """Unbuffered reads from the standard input file descriptor."""

    def __init__(self, stream: IO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def fileno(self) -> int:
        return self._stream.fileno()

    def read(self, max_len: int) -> bytes:
        try:
            return os.read(self.fileno(), max_len)
        except OSError as exc:
            raise FatalIOError(f"could not read: {exc}") from exc

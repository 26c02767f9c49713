"""Readiness wait primitive built on :mod:`selectors`.

Built on ``select()``: stdin may be ``/dev/null`` or a regular file
(nohup, redirected input), which epoll refuses to register.
"""

from __future__ import annotations

import selectors
from typing import Hashable

from ..domain import FatalIOError


class SelectorWaiter:
    def __init__(self, selector: selectors.BaseSelector | None = None) -> None:
        self._selector = selector or selectors.SelectSelector()

    def register(self, handle, key: Hashable) -> None:
        try:
            self._selector.register(handle, selectors.EVENT_READ, data=key)
        except (OSError, ValueError) as exc:
            raise FatalIOError(f"cannot watch {key}: {exc}") from exc

    def unregister(self, handle) -> None:
        self._selector.unregister(handle)

    def wait(self) -> list[Hashable]:
        """Block without timeout; returns the keys of readable handles."""
        return [key.data for key, _events in self._selector.select()]

    def close(self) -> None:
        self._selector.close()

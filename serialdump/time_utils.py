"""Utilitários de tempo para os prefixos das linhas de texto."""

import time


def split_ms(ts: float) -> tuple[int, int]:
    """Split a float timestamp into whole seconds and milliseconds."""
    ms_total = int(ts * 1000)
    return ms_total // 1000, ms_total % 1000


def elapsed_prefix(now: float, start: float) -> str:
    secs, ms = split_ms(max(now - start, 0.0))
    return "%4d.%03d: " % (secs, ms)


def epoch_prefix(now: float) -> str:
    secs, ms = split_ms(now)
    return "%8d.%03d: " % (secs, ms)


def strftime_prefix(now: float, timeformat: str) -> str:
    return time.strftime(timeformat, time.localtime(now)) + "|"

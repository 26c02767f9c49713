"""serialdump/application/render.py

Stateless formatting helpers for the display modes: hex-dump rows,
multi-row SLIP frame dumps and decimal columns.

Row layout (``HCOLS`` = 20 bytes per row)::

    SLIP: 4142                                          AB
    <pfx><sp><4 bytes hex>...<2 sp><padding><gutter>

The gutter shows each byte as a character when its value lies in
``PRINTABLE_MIN..PRINTABLE_MAX`` (30..126 decimal) and as ``.``
otherwise. The range is kept exactly as the legacy tool prints it so
captured sessions stay comparable.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from ..constants import HCOLS, PRINTABLE_MAX, PRINTABLE_MIN


def printable_char(value: int) -> str:
    if value < PRINTABLE_MIN or value > PRINTABLE_MAX:
        return "."
    return chr(value)


def hex_row(prefix: str, chunk: bytes) -> str:
    """Format one row of at most ``HCOLS`` bytes."""

    if len(chunk) > HCOLS:
        raise ValueError(f"a hex row holds at most {HCOLS} bytes, got {len(chunk)}")

    parts: list[str] = [prefix]
    for i, value in enumerate(chunk):
        if i % 4 == 0:
            parts.append(" ")
        parts.append("%02X" % value)
    parts.append("  ")
    # keep the gutter aligned on short rows
    for i in range(len(chunk), HCOLS):
        if i % 4 == 0:
            parts.append(" ")
        parts.append("  ")
    parts.extend(printable_char(value) for value in chunk)
    return "".join(parts)


def hex_dump(prefix: str, payload: bytes) -> list[str]:
    """Split ``payload`` into rows; continuation rows get a blank prefix."""

    rows: list[str] = []
    blank = " " * len(prefix)
    for offset in range(0, len(payload), HCOLS):
        rows.append(hex_row(prefix if offset == 0 else blank, payload[offset : offset + HCOLS]))
    return rows


def int_column(value: int) -> str:
    return "%03d " % value


__all__ = ["hex_dump", "hex_row", "int_column", "printable_char"]

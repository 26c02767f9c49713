"""serialdump: serial line terminal with text, timestamp, decimal, hex and SLIP views.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from .application import InboundDecoder, OutboundRelay, SlipFrameDecoder, StreamMultiplexer
from .domain import DisplayMode, TerminalConfig

__version__ = "0.1.0"

__all__ = [
    "DisplayMode",
    "InboundDecoder",
    "OutboundRelay",
    "SlipFrameDecoder",
    "StreamMultiplexer",
    "TerminalConfig",
]

"""serialdump/application/__init__.py

Application services for the serial terminal: inbound decoding, SLIP
framing, outbound relay and the stream multiplexer.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from .decoder import InboundDecoder
from .multiplexer import StreamMultiplexer
from .relay import OutboundRelay
from .slip import SlipFrameDecoder

__all__ = [
    "InboundDecoder",
    "OutboundRelay",
    "SlipFrameDecoder",
    "StreamMultiplexer",
]

"""Protocol constants and display limits.

The values mirror the legacy ``serialdump`` C tool so that the Python
terminal renders byte-for-byte identical output.
"""

# SLIP special characters (RFC 1055)
SLIP_END: int = 0xC0
SLIP_ESC: int = 0xDB
SLIP_ESC_END: int = 0xDC
SLIP_ESC_ESC: int = 0xDD

DEFAULT_BAUDRATE: int = 57600
DEFAULT_DEVICE: str = "/dev/ttyS0"
DEFAULT_DELAY_US: int = 6000
DEFAULT_TIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"

SUPPORTED_BAUDRATES: tuple[int, ...] = (
    9600,
    19200,
    38400,
    57600,
    115200,
    230400,
    460800,
    921600,
)

# Read chunk size for both streams
BUFSIZE: int = 40
# Bytes per hex-dump row
HCOLS: int = 20
# Bytes per decimal row
ICOLS: int = 18
# Capacity of the SLIP reception buffer
SLIP_BUFFER_SIZE: int = 2048

# Printable range used by the hex dump gutter (decimal, inclusive)
PRINTABLE_MIN: int = 30
PRINTABLE_MAX: int = 126

SLIP_PREFIX: str = "SLIP:"

"""Infra de logging compartilhada do terminal.

Diagnostics (connection status, SLIP overflow notices, fatal errors) go
to stderr so they never mix with the rendered serial stream on stdout.
Components receive :func:`logprintf` by injection; its numeric levels
follow the legacy daemon convention (0=error, 1=warning, 2=info,
3=debug).
"""

import logging
import os
import sys

_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}

logger = logging.getLogger("serialdump")
logger.setLevel(logging.INFO)
if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def logprintf(level: int, fmt: str, *args: object) -> None:
    logger.log(_LEVELS.get(level, logging.INFO), fmt % args if args else fmt)


def setup_file_logging(logdir: str, log_filename: str = "serialdump.log") -> str:
    """Mirror diagnostics into ``logdir/log_filename``; returns the file path."""
    os.makedirs(logdir, exist_ok=True)
    if not os.access(logdir, os.W_OK):
        raise PermissionError(f"Cannot write to log directory: {logdir}")

    logfile = os.path.abspath(os.path.join(logdir, log_filename))
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == logfile:
            return logfile

    fh = logging.FileHandler(logfile, encoding="utf-8")
    fh.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(fh)
    return logfile


def configure_logging(debug: bool = False, logdir: str = "") -> None:
    set_debug(debug)
    if logdir:
        setup_file_logging(logdir)

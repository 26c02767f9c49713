"""Command-line interface for the serialdump terminal.

This thin wrapper parses the legacy ``serialdump`` options, merges them
with the optional ``serialdump.cfg`` file and ``SERIALDUMP_*``
environment overrides, and then delegates to :mod:`serialdump.runtime`.

Display mode options (``-x``, ``-i``, ``-s``, ``-so``, ``-sn``, ``-t``,
``-t0``, ``-T[FORMAT]``) override each other; the last one given wins.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from . import runtime
from .application.config_loader import build_config, load_config
from .constants import DEFAULT_BAUDRATE, DEFAULT_TIME_FORMAT
from .domain import ConfigurationError, DisplayMode
from .logging_utils import configure_logging, logprintf


class _ModeAction(argparse.Action):
    """Record display-mode related overrides in ``namespace.mode_overrides``."""

    def __init__(self, option_strings, dest, updates=None, nargs=0, **kwargs):
        self._updates = dict(updates or {})
        super().__init__(option_strings, dest, nargs=nargs, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        overrides = dict(getattr(namespace, "mode_overrides", None) or {})
        overrides.update(self._updates)
        if values:
            overrides["timeformat"] = values[0] if isinstance(values, list) else values
        setattr(namespace, "mode_overrides", overrides)


def _expand_time_format(argv: Sequence[str]) -> list[str]:
    """``-T`` without an attached format means the default format.

    The format is only ever taken from the same token (``-T%H:%M``) so a
    following device argument is never swallowed.
    """

    return [f"-T{DEFAULT_TIME_FORMAT}" if arg == "-T" else arg for arg in argv]


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serialdump",
        description="Serial line terminal with text, timestamp, decimal, hex and SLIP views",
    )
    parser.set_defaults(mode_overrides=None)
    parser.add_argument(
        "-b",
        "-B",
        dest="baudrate",
        type=int,
        metavar="BAUDRATE",
        default=None,
        help=f"line speed (default {DEFAULT_BAUDRATE})",
    )
    parser.add_argument(
        "-x", dest="mode_overrides", action=_ModeAction,
        updates={"mode": DisplayMode.HEX}, help="hexadecimal output",
    )
    parser.add_argument(
        "-i", dest="mode_overrides", action=_ModeAction,
        updates={"mode": DisplayMode.INT}, help="decimal output",
    )
    parser.add_argument(
        "-s", dest="mode_overrides", action=_ModeAction,
        updates={"mode": DisplayMode.SLIP_AUTO}, help="automatic SLIP mode",
    )
    parser.add_argument(
        "-so", dest="mode_overrides", action=_ModeAction,
        updates={"mode": DisplayMode.SLIP},
        help="SLIP only mode (all data is SLIP packets)",
    )
    parser.add_argument(
        "-sn", dest="mode_overrides", action=_ModeAction,
        updates={"mode": DisplayMode.SLIP_HIDE}, help="hide SLIP packets",
    )
    parser.add_argument(
        "-t", dest="mode_overrides", action=_ModeAction,
        updates={"mode": DisplayMode.START_DATE, "timeformat": None, "starttime": False},
        help="add time as sec.msec for each text line",
    )
    parser.add_argument(
        "-t0", dest="mode_overrides", action=_ModeAction,
        updates={"mode": DisplayMode.START_DATE, "timeformat": None, "starttime": True},
        help="add time since start (sec.msec) for each text line",
    )
    parser.add_argument(
        "-T", dest="mode_overrides", action=_ModeAction, nargs=1,
        updates={"mode": DisplayMode.START_DATE}, metavar="FORMAT",
        help="add strftime() formatted time for each text line "
        "(-T alone uses '%s')" % DEFAULT_TIME_FORMAT.replace("%", "%%"),
    )
    parser.add_argument(
        "-d",
        dest="delay",
        type=int,
        metavar="DELAY",
        default=None,
        help="delay in usec between 2 consecutive writes",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        default="serialdump.cfg",
        help="Path to serialdump.cfg configuration file (default: ./serialdump.cfg)",
    )
    parser.add_argument("--logdir", metavar="DIR", default=None, help="also log to DIR/serialdump.log")
    parser.add_argument("--debug", action="store_true", default=None, help="debug logging")
    parser.add_argument("device", nargs="*", metavar="SERIALDEVICE", help="serial device")
    return parser


def resolve_config(args: argparse.Namespace):
    """Merge defaults, config file, environment and command-line options."""

    if len(args.device) > 1:
        raise ConfigurationError("Too many arguments")
    if args.delay is not None and args.delay < 0:
        raise ConfigurationError("Delay must not be negative")

    cfg = load_config(args.config)

    updates: dict[str, Any] = {}
    if args.device:
        updates["device"] = args.device[0]
    if args.baudrate is not None:
        updates["baudrate"] = args.baudrate
    if args.delay is not None:
        updates["delay_us"] = args.delay
    if args.logdir is not None:
        updates["logdir"] = args.logdir
    if args.debug is not None:
        updates["debug"] = args.debug
    updates.update(args.mode_overrides or {})

    return build_config(updates, base=cfg)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point used by the ``serialdump`` script."""

    parser = _build_arg_parser()
    raw = list(argv) if argv is not None else sys.argv[1:]
    args = parser.parse_args(_expand_time_format(raw))

    try:
        cfg = resolve_config(args)
    except ConfigurationError as exc:
        logprintf(0, "%s", exc)
        parser.print_usage(sys.stderr)
        return 1

    try:
        configure_logging(debug=cfg.debug, logdir=cfg.logdir)
    except OSError as exc:
        logprintf(0, "Cannot log to %s: %s", cfg.logdir, exc)
        return 1

    return runtime.run(cfg)

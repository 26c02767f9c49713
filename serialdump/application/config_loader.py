"""serialdump/application/config_loader.py

Configuration loader for serialdump.

Reads legacy ``[key]=value`` configuration files into the
:class:`serialdump.domain.TerminalConfig` Pydantic model and applies
``SERIALDUMP_*`` environment overrides on top.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

import os
import re
from typing import Any, Iterable

from pydantic import ValidationError

from ..domain import ConfigurationError, TerminalConfig
from ..logging_utils import logprintf
from ..settings import Settings

_KEY_VALUE_RE = re.compile(r"^\[(?P<key>[^\]]+)\]\s*=\s*(?P<value>.*)$")

_ALIAS_MAP: dict[str, str] = {
    "device": "device",
    "serialport": "device",
    "baudrate": "baudrate",
    "mode": "mode",
    "delay": "delay_us",
    "timeformat": "timeformat",
    "starttime": "starttime",
    "logpath": "logdir",
    "debug": "debug",
}


def _strip_inline_comment(value: str) -> str:
    for sep in ("//", "#"):
        if sep in value:
            value = value.split(sep, 1)[0]
    return value.strip()


def _coerce_value(field: str, text: str) -> object:
    """Try to coerce ``text`` into the type of ``TerminalConfig.field``.

    Falls back to the raw string; Pydantic reports anything invalid.
    """

    text = text.strip()
    field_info = TerminalConfig.model_fields.get(field)
    if field_info is None or field_info.annotation is None:
        return text

    target = field_info.annotation

    # bools as 0/1 or true/false
    if target is bool:
        lowered = text.lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
        return bool(text)

    if target is int:
        try:
            return int(float(text))
        except ValueError:
            return text

    if field == "timeformat" and text == "":
        return None

    return text


def parse_config_lines(lines: Iterable[str]) -> dict[str, Any]:
    """Parse ``[key]=value`` lines into a dict of ``TerminalConfig`` fields."""

    values: dict[str, Any] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or line.startswith("//"):
            continue
        m = _KEY_VALUE_RE.match(line)
        if not m:
            continue
        field = _ALIAS_MAP.get(m.group("key").strip().lower())
        if field is None:
            continue
        raw_value = m.group("value")
        # strftime formats may legitimately contain '#'
        value = raw_value.strip() if field == "timeformat" else _strip_inline_comment(raw_value)
        values[field] = _coerce_value(field, value)
    return values


def build_config(values: dict[str, Any], base: TerminalConfig | None = None) -> TerminalConfig:
    """Validate ``values`` on top of ``base`` (defaults when omitted)."""

    current = (base or TerminalConfig()).model_dump()
    current.update(values)
    try:
        return TerminalConfig(**current)
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc


def load_config(path: str | None = None, *, base_dir: str | None = None) -> TerminalConfig:
    """Load a :class:`TerminalConfig` from a ``serialdump.cfg``-style file.

    Parameters
    ----------
    path:
        Path to the configuration file. When ``None`` or missing, defaults
        are used and only environment overrides are applied.
    base_dir:
        Base directory used to resolve a relative ``logpath``, defaults
        to the directory of ``path``.
    """

    values: dict[str, Any] = {}
    if path is not None and os.path.isfile(path):
        with open(path, "r", encoding="utf-8") as f:
            values = parse_config_lines(f)
        logprintf(3, "Loaded configuration from %s", path)

        if base_dir is None:
            base_dir = os.path.dirname(os.path.abspath(path)) or os.getcwd()
        logdir = values.get("logdir")
        if logdir and not os.path.isabs(logdir):
            values["logdir"] = os.path.join(base_dir, logdir)

    cfg = build_config(values)

    try:
        overrides = Settings().overrides()
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc
    if overrides:
        cfg = build_config(overrides, base=cfg)

    return cfg


def _describe(exc: ValidationError) -> str:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(messages) or str(exc)

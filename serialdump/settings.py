"""
Environment settings for serialdump.
Path: serialdump/settings.py
Copyright BINGO Collaboration
Last Modified: 2026-10-19
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """``SERIALDUMP_*`` environment overrides; unset values stay ``None``."""

    device: Optional[str] = Field(default=None, description="Serial device path")
    baudrate: Optional[int] = Field(default=None, description="Line speed")
    delay_us: Optional[int] = Field(
        default=None, ge=0, description="Outbound inter-byte delay (usec)"
    )
    logdir: Optional[str] = Field(default=None, description="Log file directory")
    debug: Optional[bool] = Field(default=None)

    model_config = {
        "env_prefix": "SERIALDUMP_",
        "case_sensitive": False,
    }

    def overrides(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

"""Configuration for timestamp formatting.

Controls how ``utc_timestamp`` renders ISO 8601 values.
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Optional

from ..base import BaseDomainConfig


class TimeConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "time"

    @cached_property
    def iso8601(self) -> Dict[str, Any]:
        value = self.section.get("iso8601") or {}
        return dict(value) if isinstance(value, dict) else {}

    @cached_property
    def timespec(self) -> Optional[str]:
        """``datetime.isoformat`` timespec, or None for the default rendering."""
        value = self.iso8601.get("timespec", "seconds")
        return str(value) if value else None

    @cached_property
    def use_z_suffix(self) -> bool:
        return bool(self.iso8601.get("use_z_suffix", True))

    @cached_property
    def strip_microseconds(self) -> bool:
        return bool(self.iso8601.get("strip_microseconds", True))


__all__ = ["TimeConfig"]

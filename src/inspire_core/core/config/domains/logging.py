"""Configuration for stdlib logging handlers.

This config controls:
- The root level for Inspire loggers
- The record format (``%(category)s`` is always available)
- An optional log file
"""
from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path
from typing import Optional

from ..base import BaseDomainConfig

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(category)s]: %(message)s"


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def level_name(self) -> str:
        return str(self.section.get("level") or "INFO").upper()

    @cached_property
    def level(self) -> int:
        value = logging.getLevelName(self.level_name)
        return value if isinstance(value, int) else logging.INFO

    @cached_property
    def format(self) -> str:
        return str(self.section.get("format") or DEFAULT_FORMAT)

    @cached_property
    def file(self) -> Optional[Path]:
        """Log file path, resolved against the project root when relative."""
        raw = self.section.get("file")
        if not raw:
            return None
        path = Path(str(raw)).expanduser()
        return path if path.is_absolute() else self.repo_root / path


__all__ = ["LoggingConfig", "DEFAULT_FORMAT"]

"""Section accessors over the merged Inspire configuration.

Usage:
    from inspire_core.core.config.domains import CommandLineConfig

    cfg = CommandLineConfig()
    cfg.operator_prefixes  # "-/"
"""
from __future__ import annotations

from .commandline import CommandLineConfig
from .time import TimeConfig
from .locale import LocaleConfig
from .logging import LoggingConfig

__all__: list[str] = [
    "CommandLineConfig",
    "TimeConfig",
    "LocaleConfig",
    "LoggingConfig",
]

"""Layered YAML configuration for Inspire.

Bundled defaults, then ``<root>/.inspire/config``, then ``INSPIRE_*``
environment overrides.
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .manager import ConfigManager, resolve_project_root

__all__ = [
    "BaseDomainConfig",
    "ConfigManager",
    "clear_all_caches",
    "get_cached_config",
    "resolve_project_root",
]

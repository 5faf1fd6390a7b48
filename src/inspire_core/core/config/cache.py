"""Centralized configuration caching.

A single source of truth for loaded configuration. Domain configs read
through here instead of keeping their own copies.
"""
from __future__ import annotations

import hashlib
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from .manager import ENV_PREFIX, ConfigManager, resolve_project_root

_config_cache: Dict[str, Dict[str, Any]] = {}
_cache_lock = threading.Lock()


def _fingerprint_dir(directory: Path) -> list[tuple[str, int, int]]:
    from inspire_core.core.utils.io import iter_yaml_files

    files: list[tuple[str, int, int]] = []
    for p in iter_yaml_files(directory):
        st = p.stat()
        files.append((p.name, int(st.st_mtime_ns), int(st.st_size)))
    return files


def _cache_key(repo_root: Path) -> str:
    """Cache key covering the root, INSPIRE_* env vars and project YAML mtimes."""
    env_items = sorted(
        (k, os.environ.get(k, "")) for k in os.environ.keys() if k.startswith(ENV_PREFIX)
    )
    project_dir = ConfigManager(repo_root).project_config_dir
    fingerprint = repr((env_items, _fingerprint_dir(project_dir)))
    digest = hashlib.sha256(fingerprint.encode("utf-8")).hexdigest()[:12]
    return f"{repo_root}:{digest}"


def get_cached_config(repo_root: Optional[Path] = None, *, validate: bool = True) -> Dict[str, Any]:
    """Return merged configuration for ``repo_root``, loading it at most once
    per root and environment fingerprint.
    """
    root = resolve_project_root(repo_root)
    key = _cache_key(root)
    with _cache_lock:
        cached = _config_cache.get(key)
        if cached is None:
            cached = ConfigManager(root).load_config_uncached(validate=validate)
            _config_cache[key] = cached
    return cached


def clear_all_caches() -> None:
    """Drop every cached configuration (tests, config reloads)."""
    with _cache_lock:
        _config_cache.clear()


__all__ = ["get_cached_config", "clear_all_caches"]

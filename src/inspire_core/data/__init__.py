"""
Inspire bundled data helpers.

Access to bundled configuration, schemas and embedded resources through
importlib.resources.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

DATA_PACKAGE = "inspire_core.data"


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Args:
        subpackage: Name of the data subpackage (e.g., "config", "schemas")
        filename: Optional filename within the subpackage

    Example:
        >>> get_data_path("config", "defaults.yaml")
        PosixPath('/path/to/inspire_core/data/config/defaults.yaml')
    """
    pkg = resources.files(DATA_PACKAGE)
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=64)
def read_yaml(subpackage: str, filename: str) -> Any:
    """Read and parse a bundled YAML file (cached)."""
    path = get_data_path(subpackage, filename)
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def read_text(subpackage: str, filename: str) -> str:
    """Read a bundled text file."""
    return get_data_path(subpackage, filename).read_text(encoding="utf-8")


def list_files(subpackage: str, pattern: str = "*") -> list[Path]:
    """List bundled files matching ``pattern`` in a data subpackage."""
    return sorted(get_data_path(subpackage).glob(pattern))


def file_exists(subpackage: str, filename: str) -> bool:
    """Check if a bundled data file exists."""
    return get_data_path(subpackage, filename).is_file()


def clear_caches() -> None:
    """Clear all read caches."""
    read_yaml.cache_clear()


__all__ = [
    "DATA_PACKAGE",
    "get_data_path",
    "read_yaml",
    "read_text",
    "list_files",
    "file_exists",
    "clear_caches",
]

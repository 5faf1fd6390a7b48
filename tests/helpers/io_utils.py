"""I/O utilities for writing test files.

All functions create parent directories automatically if they don't exist.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def write_yaml(
    path: Path,
    data: Any,
    *,
    sort_keys: bool = True,
    default_flow_style: bool = False,
) -> None:
    """Write data to YAML file, creating parent directories if needed.

    Examples:
        >>> write_yaml(Path(".inspire/config/locale.yaml"), {"locale": {"default": "de-DE"}})
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = yaml.safe_dump(
        data,
        default_flow_style=default_flow_style,
        sort_keys=sort_keys,
        allow_unicode=True,
    )
    path.write_text(content, encoding="utf-8")


def write_project_config(repo_root: Path, name: str, data: Any) -> Path:
    """Write ``<repo_root>/.inspire/config/<name>.yaml`` and return its path."""
    path = Path(repo_root) / ".inspire" / "config" / f"{name}.yaml"
    write_yaml(path, data)
    return path

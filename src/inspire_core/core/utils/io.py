"""File I/O helpers for Inspire.

Single source of truth for safe file access:
- Atomic writes (temp file + fsync + rename)
- Text read/write
- YAML read/write with deterministic output
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional, TextIO, Union

import yaml

PathLike = Union[str, Path]


def _str_representer(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    """Represent multiline strings with literal block style."""
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


yaml.add_representer(str, _str_representer, Dumper=yaml.SafeDumper)


def ensure_parent_dir(path: PathLike) -> None:
    """Ensure the parent directory for ``path`` exists."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def atomic_write(
    path: PathLike,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write to ``path`` atomically using a temp file + fsync + rename.

    - Parent directory is created if missing
    - Data is written to a temporary file in the same directory
    - File is fsync'd then atomically replaced
    - Any leftover temp file is cleaned up on failure

    Args:
        path: Target file path
        write_fn: Callable that writes content to the file object
        encoding: Text encoding (default: utf-8)
    """
    path = Path(path)
    ensure_parent_dir(path)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(path.parent),
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(str(tmp_path), str(path))
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    return path.read_text(encoding="utf-8")


def write_text(path: PathLike, content: str) -> None:
    """Atomically write UTF-8 text to ``path``."""

    def _writer(f: TextIO) -> None:
        f.write(content)

    atomic_write(path, _writer)


def read_yaml(path: PathLike, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing or invalid (default: None)
        raise_on_error: If True, propagate exceptions instead of returning default.

    Examples:
        >>> config = read_yaml(Path("config.yaml"), default={})
        >>> assert isinstance(config, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def dump_yaml_string(data: Any) -> str:
    """Serialize ``data`` to a YAML string with sorted keys."""
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )


def parse_yaml_string(content: str, default: Any = None) -> Any:
    """Parse YAML from string, returning ``default`` on empty or invalid input."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError:
        return default
    return data if data is not None else default


def write_yaml(path: PathLike, data: Any) -> None:
    """Atomically write YAML data to ``path``. Keys are sorted."""

    def _writer(f: TextIO) -> None:
        f.write(dump_yaml_string(data))

    atomic_write(path, _writer)


def iter_yaml_files(dir_path: PathLike) -> list[Path]:
    """Return YAML files in ``dir_path`` in deterministic order.

    When both ``<name>.yaml`` and ``<name>.yml`` exist, only the ``.yaml``
    path is returned.
    """
    d = Path(dir_path)
    if not d.exists():
        return []
    yml_files = {p.stem: p for p in d.glob("*.yml")}
    yaml_files = {p.stem: p for p in d.glob("*.yaml")}

    out: list[Path] = []
    for stem in sorted(set(yml_files.keys()) | set(yaml_files.keys())):
        preferred = yaml_files.get(stem) or yml_files.get(stem)
        if preferred is not None:
            out.append(preferred)
    return out


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
    "read_yaml",
    "write_yaml",
    "dump_yaml_string",
    "parse_yaml_string",
    "iter_yaml_files",
]

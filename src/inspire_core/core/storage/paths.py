"""Directory path helpers.

Windows (``\\``) and POSIX (``/``) paths are both handled, whatever the
host OS; the separator is inferred from the path unless given.
"""
from __future__ import annotations

import logging
import ntpath
import posixpath
import shutil
from pathlib import Path
from typing import Iterable, Optional, Union
from urllib.parse import unquote, urlsplit

logger = logging.getLogger(__name__)

INVALID_PATH_CHARS = frozenset('"<>|\0' + "".join(chr(i) for i in range(1, 32)))
URI_SCHEMES = frozenset({"http", "https", "file", "ftp"})


def _separator(path: str, separator: Optional[str]) -> str:
    if separator:
        return separator
    return "\\" if "\\" in path else "/"


def _path_module(separator: str):
    return ntpath if separator == "\\" else posixpath


def clean_path(folder_path: Optional[str], invalid_characters: Optional[Iterable[str]] = None) -> str:
    """Drop characters that are not allowed in a path."""
    invalid = frozenset(invalid_characters) if invalid_characters is not None else INVALID_PATH_CHARS
    return "".join(ch for ch in (folder_path or "") if ch not in invalid)


def get_file_name(file_path_uri: Optional[str]) -> str:
    """File name from a URI (``http``, ``https``, ``file``, ``ftp``) or a path."""
    text = file_path_uri or ""
    parts = urlsplit(text)
    if parts.scheme.lower() in URI_SCHEMES:
        text = unquote(parts.path)
    for sep in "/\\":
        text = text.rsplit(sep, 1)[-1]
    return text


def add_path_separator(full_directory_path: Optional[str], separator: Optional[str] = None) -> Optional[str]:
    if not full_directory_path or not full_directory_path.strip():
        return full_directory_path
    sep = _separator(full_directory_path, separator)
    if full_directory_path.endswith(sep):
        return full_directory_path
    return full_directory_path + sep


def remove_path_separator(full_directory_path: Optional[str], separator: Optional[str] = None) -> Optional[str]:
    """Trim trailing separators and spaces.

    Root paths such as ``C:\\`` or ``/`` are returned unchanged.
    """
    text = full_directory_path or ""
    sep = _separator(text, separator)
    trimmed = text.rstrip(" " + sep)
    return trimmed if sep in trimmed else full_directory_path


def parent_directory(full_directory_path: Optional[str], separator: Optional[str] = None) -> Optional[str]:
    """Parent of a directory path; roots are their own parent."""
    text = full_directory_path or ""
    sep = _separator(text, separator)
    trimmed = remove_path_separator(text, sep) or ""
    result = _path_module(sep).dirname(trimmed)
    return result or full_directory_path


def overwrite_move_directory(source_path: Union[str, Path], target_path: Union[str, Path]) -> None:
    """Move a directory, replacing ``target_path`` if it exists."""
    target = Path(target_path)
    if target.is_dir():
        logger.debug("Removing existing directory %s", target)
        shutil.rmtree(target)
    shutil.move(str(source_path), str(target))


def validate_path(directory_path: Optional[str]) -> bool:
    """Whether ``directory_path`` is rooted and free of invalid characters."""
    if not directory_path or not directory_path.strip():
        return False
    if any(ch in INVALID_PATH_CHARS for ch in directory_path):
        return False
    return ntpath.isabs(directory_path) or posixpath.isabs(directory_path)


__all__ = [
    "INVALID_PATH_CHARS",
    "add_path_separator",
    "clean_path",
    "get_file_name",
    "overwrite_move_directory",
    "parent_directory",
    "remove_path_separator",
    "validate_path",
]

"""File-level helpers: MIME lookup, name cleaning and safe moves."""
from __future__ import annotations

import logging
import re
import shutil
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from inspire_core import data
from inspire_core.core.utils.filenames import DEFAULT_EXTENSION, GuidLike, add_guid

from .paths import INVALID_PATH_CHARS

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"
MIME_TABLE_FILE = "mime_types.yaml"

XML_EXTENSIONS = (".xml", ".dita", ".ditamap", ".ditaval")
BROWSER_IMAGE_EXTENSIONS = frozenset({"apng", "bmp", "gif", "ico", "jfif", "jpeg", "jpe", "jpg", "png", "svg"})
THUMBNAIL_EXTENSIONS = frozenset({"apng", "bmp", "gif", "ico", "jfif", "jpeg", "jpe", "jpg", "png", "tif", "tiff"})

INVALID_FILE_NAME_CHARS = INVALID_PATH_CHARS | frozenset(':*?\\/')
# Also stripped from file names.
UNSAFE_FILE_NAME_CHARS = frozenset("'#&;%!\":@{}$")

_FORMAT_REPLACED = '<>:"/\\|?*'
_WHITESPACE_RUN = re.compile(r"\s+")


@lru_cache(maxsize=1)
def _mime_tables() -> tuple[Dict[str, str], Dict[str, str]]:
    table = data.read_yaml("resources", MIME_TABLE_FILE) or {}
    images = dict(table.get("image") or {})
    lookup = {**images, **(table.get("general") or {})}
    return images, lookup


def image_mime_types() -> Dict[str, str]:
    return dict(_mime_tables()[0])


def mime_types() -> Dict[str, str]:
    """Extension (without dot) to MIME content type."""
    return dict(_mime_tables()[1])


def _extension(file_name: Optional[str]) -> str:
    name = (file_name or "").replace("\\", "/").rsplit("/", 1)[-1]
    idx = name.rfind(".")
    return name[idx:] if idx >= 0 else ""


def find_mime_content_type_by_extension(file_name: Optional[str], default_mime_type: str = DEFAULT_MIME_TYPE) -> str:
    key = _extension(file_name).lstrip(".").lower()
    if not key:
        return default_mime_type
    return _mime_tables()[1].get(key, default_mime_type)


def is_xml_content(content_type: Optional[str]) -> bool:
    """Whether ``content_type`` is XML, HTML or a DITA map.

    Raises:
        ValueError: If ``content_type`` is blank
    """
    if not content_type:
        raise ValueError("content_type must not be empty")
    lookup = _mime_tables()[1]
    return content_type.lower() in {lookup["xml"], lookup["html"], lookup["ditamap"]}


def file_is_xml(file_name: Optional[str]) -> bool:
    return _extension(file_name).lower() in XML_EXTENSIONS


def is_image_content(content_type: Optional[str]) -> bool:
    """Raises:
        ValueError: If ``content_type`` is blank
    """
    if not content_type:
        raise ValueError("content_type must not be empty")
    return content_type.lower() in set(_mime_tables()[0].values())


def is_image_file(file_name: Optional[str]) -> bool:
    return is_image_content(find_mime_content_type_by_extension(file_name))


def is_browser_image(file_name: Optional[str]) -> bool:
    """Whether browsers render this image type inline."""
    return _extension(file_name).lstrip(".").lower() in BROWSER_IMAGE_EXTENSIONS


def can_create_thumbnail(file_name: Optional[str]) -> bool:
    return _extension(file_name).lstrip(".").lower() in THUMBNAIL_EXTENSIONS


def clean_file_name(
    file_name: Optional[str],
    convert_space_characters: bool = True,
    convert_space_to: str = "_",
    invalid_characters: Optional[Iterable[str]] = None,
) -> str:
    """Strip characters that are unsafe in file names.

    Whitespace runs become ``convert_space_to`` unless disabled.
    """
    if not file_name:
        return ""
    invalid = set(invalid_characters) if invalid_characters is not None else set(UNSAFE_FILE_NAME_CHARS)
    invalid |= INVALID_FILE_NAME_CHARS
    if convert_space_characters:
        file_name = _WHITESPACE_RUN.sub(convert_space_to, file_name)
    return "".join(ch for ch in file_name if ch not in invalid)


def format_file_name(file_name: str) -> str:
    """Replace reserved characters with ``-``."""
    return "".join("-" if ch in _FORMAT_REPLACED else ch for ch in file_name)


def file_add_guid(
    path: Optional[Union[str, Path]],
    guid: GuidLike,
    *,
    default_extension: str = DEFAULT_EXTENSION,
) -> str:
    """File name of ``path`` with ``guid`` embedded."""
    if path is None:
        raise ValueError("path must not be None")
    return add_guid(Path(path).name, guid, default_extension=default_extension)


def find_file_error_lines(file_path: Union[str, Path], prefix: str = "Error: ") -> List[str]:
    """Messages from lines starting with ``prefix`` (case-insensitive).

    Missing or unreadable files yield an empty list.
    """
    path = Path(file_path)
    if not path.is_file():
        return []
    lowered = prefix.lower()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [
                line.rstrip("\r\n")[len(prefix):]
                for line in f
                if line.lower().startswith(lowered)
            ]
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read error lines from %s: %s", path, exc)
        return []


def overwrite_move(source_path: Union[str, Path], target_path: Union[str, Path]) -> None:
    """Move a file, replacing ``target_path`` if it exists."""
    target = Path(target_path)
    if target.exists():
        target.unlink()
    shutil.move(str(source_path), str(target))


def safe_move(source_path: Union[str, Path], target_path: Union[str, Path]) -> bool:
    """Copy then delete the source; True when the target exists afterwards."""
    target = Path(target_path)
    try:
        shutil.copyfile(source_path, target)
        if target.exists():
            Path(source_path).unlink()
    except OSError as exc:
        logger.warning("Move from %s to %s failed: %s", source_path, target, exc)
    return target.exists()


__all__ = [
    "DEFAULT_MIME_TYPE",
    "can_create_thumbnail",
    "clean_file_name",
    "file_add_guid",
    "file_is_xml",
    "find_file_error_lines",
    "find_mime_content_type_by_extension",
    "format_file_name",
    "image_mime_types",
    "is_browser_image",
    "is_image_content",
    "is_image_file",
    "is_xml_content",
    "mime_types",
    "overwrite_move",
    "safe_move",
]

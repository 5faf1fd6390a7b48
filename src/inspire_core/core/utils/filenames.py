"""Embedding identity GUIDs in content file names.

Names follow ``{dir/}{basename}_{GUID}{.ext}[#fragment]``. Both ``/`` and
``\\`` separate directories; the directory prefix and the ``#fragment``
are carried through every operation verbatim.

Example:
    >>> remove_guid("filename_{44935658-48B8-4F73-BC4C-8971570EE160}.xml#_abcd/1234")
    'filename.xml#_abcd/1234'
"""
from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import Optional, Union

GUID_LENGTH = 36
DEFAULT_EXTENSION = ".xml"
EMPTY_GUID = uuid.UUID(int=0)

_SEPARATORS = "/\\"
_GUID_PATTERN = re.compile(
    r"^(\{)?[0-9a-fA-F]{8}-(?:[0-9a-fA-F]{4}-){3}[0-9a-fA-F]{12}(?(1)\})\Z"
)

GuidLike = Union[uuid.UUID, str]


@dataclass(frozen=True)
class _NameParts:
    head: str
    stem: str
    extension: str
    fragment: str

    @property
    def file_name(self) -> str:
        return f"{self.stem}{self.extension}"

    def join(self, stem: str) -> str:
        return f"{self.head}{stem}{self.extension}{self.fragment}"


def _split(name: str) -> _NameParts:
    hash_idx = name.rfind("#")
    if hash_idx >= 0:
        path, fragment = name[:hash_idx], name[hash_idx:]
    else:
        path, fragment = name, ""

    sep_idx = max(path.rfind(sep) for sep in _SEPARATORS)
    head, file_name = path[: sep_idx + 1], path[sep_idx + 1:]

    dot_idx = file_name.rfind(".")
    if dot_idx >= 0:
        stem, extension = file_name[:dot_idx], file_name[dot_idx:]
    else:
        stem, extension = file_name, ""
    return _NameParts(head=head, stem=stem, extension=extension, fragment=fragment)


def _guid_tail(stem: str) -> str:
    idx = stem.rfind("_")
    # a leading "_" belongs to the name
    return stem[idx + 1:] if idx > 0 else stem


def is_guid(text: Optional[str]) -> bool:
    """True for ``8-4-4-4-12`` hex, optionally wrapped in one ``{}`` pair."""
    return bool(text) and _GUID_PATTERN.match(text) is not None


def contains_guid(name: Optional[str]) -> bool:
    """Whether the file name of ``name`` ends with an embedded GUID."""
    if not name or not name.strip() or len(name) < GUID_LENGTH:
        return False
    stem = _split(name).stem
    if len(stem) < GUID_LENGTH:
        return False
    return is_guid(_guid_tail(stem))


def _render(guid: GuidLike) -> str:
    if isinstance(guid, uuid.UUID):
        return str(guid)
    try:
        return str(uuid.UUID(str(guid).strip()))
    except ValueError as exc:
        raise ValueError(f"Not a GUID: {guid!r}") from exc


def add_guid(name: Optional[str], guid: GuidLike, *, default_extension: str = DEFAULT_EXTENSION) -> str:
    """Append ``_{guid}`` to the basename of ``name``.

    Names that already carry a GUID are returned unchanged. A name with no
    file component becomes ``{dir/}{guid}{default_extension}``.
    """
    if name is None:
        raise ValueError("name must not be None")
    if guid is None:
        raise ValueError("guid must not be None")
    rendered = _render(guid)
    if contains_guid(name):
        return name

    parts = _split(name)
    if not parts.file_name:
        return f"{parts.head}{rendered}{default_extension}{parts.fragment}"
    return parts.join(f"{parts.stem}_{rendered}")


def remove_guid(name: Optional[str]) -> Optional[str]:
    """Drop the ``_{GUID}`` segment, keeping directory, extension and fragment."""
    if not contains_guid(name):
        return name
    parts = _split(name)
    idx = parts.stem.rfind("_")
    if idx <= 0:
        return name
    return parts.join(parts.stem[:idx])


def parse_guid(name: Optional[str]) -> uuid.UUID:
    """Return the GUID embedded in ``name``, or :data:`EMPTY_GUID`."""
    if not contains_guid(name):
        return EMPTY_GUID
    return uuid.UUID(_guid_tail(_split(name).stem))


def strip_guid(name: Optional[str]) -> Optional[str]:
    """File-name component of :func:`remove_guid`, without the directory."""
    removed = remove_guid(name)
    if not removed:
        return removed
    parts = _split(removed)
    return f"{parts.file_name}{parts.fragment}"


def append_file_name_suffix(path: Optional[str], suffix: str) -> Optional[str]:
    """Insert ``_{suffix}`` before the last ``_`` segment of the file name.

    Without an ``_`` the file name is prefixed with ``{suffix}_``. Paths of
    at most 36 characters (ignoring the fragment) are returned unchanged.
    """
    if not path:
        return path
    parts = _split(path)
    if len(path) - len(parts.fragment) <= GUID_LENGTH:
        return path
    file_name = parts.file_name
    idx = file_name.rfind("_")
    if idx >= 0:
        file_name = f"{file_name[:idx]}_{suffix}{file_name[idx:]}"
    else:
        file_name = f"{suffix}_{file_name}"
    return f"{parts.head}{file_name}{parts.fragment}"


def append_suffix(text: Optional[str], suffix: str) -> Optional[str]:
    """Insert ``_{suffix}`` before the last ``_`` segment, or append it."""
    if not text or not text.strip():
        return text
    idx = text.rfind("_")
    if idx >= 0:
        return f"{text[:idx]}_{suffix}{text[idx:]}"
    return f"{text}_{suffix}"


__all__ = [
    "DEFAULT_EXTENSION",
    "EMPTY_GUID",
    "GUID_LENGTH",
    "add_guid",
    "append_file_name_suffix",
    "append_suffix",
    "contains_guid",
    "is_guid",
    "parse_guid",
    "remove_guid",
    "strip_guid",
]

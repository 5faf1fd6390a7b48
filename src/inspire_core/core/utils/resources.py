"""Embedded resources and localized strings.

Resources ship inside the ``inspire_core.data`` package and are read with
``importlib.resources``. Localized strings live in
``data/resources/strings[.<locale>].yaml``.
"""
from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from typing import BinaryIO, Dict, List, Optional

from inspire_core import data
from inspire_core.core.exceptions import ResourceNotFoundError

from .locale import default_locale_info, parse_locale_code

logger = logging.getLogger(__name__)

RESOURCE_FOLDER = "resources"
STRINGS_STEM = "strings"


def build_resource_path(
    key: str,
    folder: str = RESOURCE_FOLDER,
    package: str = data.DATA_PACKAGE,
) -> Traversable:
    """Location of resource ``key`` under ``package``/``folder``."""
    root = resources.files(package)
    return root.joinpath(folder, key) if folder else root.joinpath(key)


def get_embedded_resource_stream(
    key: str,
    folder: str = RESOURCE_FOLDER,
    package: str = data.DATA_PACKAGE,
) -> Optional[BinaryIO]:
    """Open resource ``key`` for binary reading; None when it does not exist."""
    path = build_resource_path(key, folder, package)
    if not path.is_file():
        return None
    return path.open("rb")


def get_embedded_resource_bytes(
    key: str,
    folder: str = RESOURCE_FOLDER,
    package: str = data.DATA_PACKAGE,
) -> bytes:
    """Raises:
        ResourceNotFoundError: If the resource does not exist
    """
    stream = get_embedded_resource_stream(key, folder, package)
    if stream is None:
        raise ResourceNotFoundError(
            f"Embedded resource not found: {package}/{folder}/{key}",
            context={"key": key, "folder": folder, "package": package},
        )
    with stream:
        return stream.read()


def get_embedded_resource_string(
    key: str,
    folder: str = RESOURCE_FOLDER,
    package: str = data.DATA_PACKAGE,
    encoding: str = "utf-8",
) -> str:
    return get_embedded_resource_bytes(key, folder, package).decode(encoding)


def _strings_table(suffix: str) -> Dict[str, str]:
    filename = f"{STRINGS_STEM}.{suffix}.yaml" if suffix else f"{STRINGS_STEM}.yaml"
    if not data.file_exists(RESOURCE_FOLDER, filename):
        return {}
    table = data.read_yaml(RESOURCE_FOLDER, filename) or {}
    return table if isinstance(table, dict) else {}


def _lookup_chain(locale: Optional[str]) -> List[str]:
    chain: List[str] = []
    requested = parse_locale_code(locale) if locale else None
    for info in (requested, default_locale_info()):
        if info is None:
            continue
        for suffix in (info.name, info.language):
            if suffix not in chain:
                chain.append(suffix)
    chain.append("")
    return chain


def get_resource_string(key: str, locale: Optional[str] = None) -> str:
    """Localized string for ``key``.

    Looks in the exact locale, then its language, then the default locale,
    then the invariant table. Unknown keys resolve to ``key`` itself.
    """
    for suffix in _lookup_chain(locale):
        value = _strings_table(suffix).get(key)
        if value is not None:
            return str(value)
    logger.debug("No resource string for %r (locale=%r)", key, locale)
    return key


__all__ = [
    "build_resource_path",
    "get_embedded_resource_bytes",
    "get_embedded_resource_stream",
    "get_embedded_resource_string",
    "get_resource_string",
]

"""Utility helpers for Inspire core.

Modules:
- filenames: GUID embed/detect/extract/strip for content file names
- text: string, base64 and token helpers
- time: ISO 8601, business days and editor dates
- hashing: SHA-2 digests
- images: fixed-size PNG thumbnails
- uri: API/UI URL building
- types: lenient conversions and enum descriptions
- locale: locale code normalization
- resources: embedded resources and localized strings
- serialize: dataclass <-> YAML
- io, merge: file I/O and config merging
"""
from __future__ import annotations

from .filenames import (
    EMPTY_GUID,
    add_guid,
    append_file_name_suffix,
    append_suffix,
    contains_guid,
    parse_guid,
    remove_guid,
    strip_guid,
)

__all__ = [
    "EMPTY_GUID",
    "add_guid",
    "append_file_name_suffix",
    "append_suffix",
    "contains_guid",
    "parse_guid",
    "remove_guid",
    "strip_guid",
]

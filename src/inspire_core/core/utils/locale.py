"""Locale code normalization.

Accepted codes are ``ll``, ``ll-``, ``ll-RR`` and ``ll_RR``. A bare
language picks its usual region from :data:`locale.locale_alias`; anything
unrecognized falls back to the configured default (``locale.default``).
"""
from __future__ import annotations

import locale as _stdlib_locale
import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_LANGUAGE_CODE = "en-US"

_CODE_PATTERN = re.compile(r"^([A-Za-z]{2})(?:[-_]([A-Za-z]{2})?)?$")


@dataclass(frozen=True)
class LocaleInfo:
    language: str
    region: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.language}-{self.region}" if self.region else self.language

    @property
    def posix_name(self) -> str:
        return f"{self.language}_{self.region}" if self.region else self.language

    def __str__(self) -> str:
        return self.name


def _default_region(language: str) -> Optional[str]:
    alias = _stdlib_locale.locale_alias.get(language)
    if not alias:
        return None
    base = alias.split(".", 1)[0]
    if "_" not in base:
        return None
    return base.split("_", 1)[1].upper() or None


def parse_locale_code(code: Optional[str]) -> Optional[LocaleInfo]:
    """Parse ``code`` strictly; None when it is not a known language."""
    if not code:
        return None
    match = _CODE_PATTERN.match(code.strip())
    if match is None:
        return None
    language = match.group(1).lower()
    if language not in _stdlib_locale.locale_alias:
        return None
    region = match.group(2).upper() if match.group(2) else _default_region(language)
    return LocaleInfo(language=language, region=region)


def default_locale_code() -> str:
    """Configured fallback locale code."""
    from ..config.domains import LocaleConfig

    return LocaleConfig().default


def default_locale_info() -> LocaleInfo:
    info = parse_locale_code(default_locale_code())
    if info is None:
        info = parse_locale_code(DEFAULT_LANGUAGE_CODE)
    assert info is not None
    return info


def to_neutral_culture_code(code: Optional[str]) -> str:
    """Two-letter language of ``code``, or of the default locale."""
    return (parse_locale_code(code) or default_locale_info()).language


def to_local_culture_code(code: Optional[str]) -> str:
    """``ll-RR`` form of ``code``, or of the default locale."""
    return (parse_locale_code(code) or default_locale_info()).name


def to_locale_info(code: Optional[str]) -> Optional[LocaleInfo]:
    """LocaleInfo for ``code``; the default for blank input, None when unknown."""
    if not code or not code.strip():
        return default_locale_info()
    return parse_locale_code(code)


__all__ = [
    "DEFAULT_LANGUAGE_CODE",
    "LocaleInfo",
    "default_locale_code",
    "default_locale_info",
    "parse_locale_code",
    "to_local_culture_code",
    "to_locale_info",
    "to_neutral_culture_code",
]

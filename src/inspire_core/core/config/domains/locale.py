"""Configuration for the fallback locale."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig

DEFAULT_LOCALE = "en-US"


class LocaleConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "locale"

    @cached_property
    def default(self) -> str:
        return str(self.section.get("default") or DEFAULT_LOCALE)


__all__ = ["LocaleConfig", "DEFAULT_LOCALE"]

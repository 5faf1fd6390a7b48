"""Configuration for command-line parameter mapping."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig

DEFAULT_OPERATOR_PREFIXES = "-/"
DEFAULT_BARE_VALUE_KEY = "parameter"


class CommandLineConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "commandline"

    @cached_property
    def operator_prefixes(self) -> str:
        """Characters that mark a token as a named parameter."""
        return str(self.section.get("operator_prefixes") or DEFAULT_OPERATOR_PREFIXES)

    @cached_property
    def bare_value_key(self) -> str:
        return str(self.section.get("bare_value_key") or DEFAULT_BARE_VALUE_KEY)


__all__ = ["CommandLineConfig", "DEFAULT_OPERATOR_PREFIXES", "DEFAULT_BARE_VALUE_KEY"]

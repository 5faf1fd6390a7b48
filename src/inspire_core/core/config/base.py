"""Base class for section-scoped configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from .cache import get_cached_config
from .manager import resolve_project_root


class BaseDomainConfig(ABC):
    """Typed, cached view over one top-level configuration section.

    Usage:
        class TimeConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "time"

            @cached_property
            def timespec(self) -> str:
                return self.section.get("timespec", "seconds")
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self._repo_root = repo_root
        self._config = get_cached_config(repo_root=repo_root)

    @property
    def repo_root(self) -> Path:
        return resolve_project_root(self._repo_root)

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """This domain's section, or an empty dict when it is absent."""
        return self._config.get(self._config_section(), {}) or {}


__all__ = ["BaseDomainConfig"]

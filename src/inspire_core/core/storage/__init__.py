"""File and directory helpers: MIME lookup, name cleaning and moves."""
from __future__ import annotations

from . import files, paths

__all__ = ["files", "paths"]

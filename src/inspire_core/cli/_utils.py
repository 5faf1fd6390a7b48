"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from inspire_core.core.config import resolve_project_root


def get_repo_root(args: argparse.Namespace) -> Path:
    """Project root from ``--repo-root``, else ``INSPIRE_PROJECT_ROOT``, else cwd."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return resolve_project_root()


__all__ = ["get_repo_root"]

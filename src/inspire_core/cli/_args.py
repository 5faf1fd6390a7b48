"""Argument registration helpers shared by CLI commands."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag (project whose .inspire/config is loaded)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override project root path",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Adds: --json, --repo-root"""
    add_json_flag(parser)
    add_repo_root_flag(parser)


__all__ = ["add_json_flag", "add_repo_root_flag", "add_standard_flags"]

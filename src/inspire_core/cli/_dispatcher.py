"""
Auto-discovery CLI dispatcher for Inspire.

Scans subfolders for commands and registers them automatically.
Adding a new command = adding a .py file to the appropriate subfolder.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from inspire_core.core.exceptions import InspireError

logger = logging.getLogger(__name__)

_CLI_PACKAGE = "inspire_core.cli"


def _command_info(module: Any, default_summary: str) -> dict[str, Any]:
    return {
        "module": module,
        "summary": getattr(module, "SUMMARY", default_summary),
        "register_args": getattr(module, "register_args", None),
        "main": getattr(module, "main", None),
    }


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """Discover CLI domain subfolders (guid, config, ...).

    Returns:
        Dict mapping domain name to directory path
    """
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.name == "commands":
            continue
        if item.is_dir() and not item.name.startswith("_"):
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_")
                for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


def _discover_modules(package: str, directory: Path, default_prefix: str) -> dict[str, dict[str, Any]]:
    commands: dict[str, dict[str, Any]] = {}
    if not directory.exists():
        return commands
    for item in sorted(directory.glob("*.py")):
        if item.name.startswith("_"):
            continue
        cmd_name = item.stem
        try:
            module = importlib.import_module(f"{package}.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import {package}.{cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = _command_info(module, f"{default_prefix}{cmd_name}")
    return commands


@lru_cache(maxsize=1)
def discover_root_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands (no domain prefix)."""
    commands_dir = Path(__file__).parent / "commands"
    return _discover_modules(f"{_CLI_PACKAGE}.commands", commands_dir, "")


@lru_cache(maxsize=32)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """Discover all commands in a domain subfolder."""
    domain_dir = Path(__file__).parent / domain
    return _discover_modules(f"{_CLI_PACKAGE}.{domain}", domain_dir, f"{domain} ")


def _add_command(subparsers: Any, cmd_name: str, cmd_info: dict[str, Any]) -> None:
    primary_name = cmd_name.replace("_", "-")
    aliases = [cmd_name] if primary_name != cmd_name else []
    cmd_parser = subparsers.add_parser(primary_name, aliases=aliases, help=cmd_info["summary"])
    if cmd_info["register_args"]:
        cmd_info["register_args"](cmd_parser)
    if cmd_info["main"]:
        cmd_parser.set_defaults(_func=cmd_info["main"])


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered domains and commands."""
    parser = argparse.ArgumentParser(
        prog="inspire-core",
        description="Inspire core utilities - command lines, content file names, hashing and config",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="domain",
        title="domains",
        description="Available command domains",
        metavar="<domain>",
    )

    for cmd_name, cmd_info in sorted(discover_root_commands().items()):
        _add_command(subparsers, cmd_name, cmd_info)

    for domain_name in sorted(discover_domains().keys()):
        domain_commands = discover_commands(domain_name)
        if not domain_commands:
            continue
        domain_parser = subparsers.add_parser(
            domain_name,
            help=f"{domain_name.title()} commands",
        )
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain_name} commands",
            metavar="<command>",
        )
        for cmd_name, cmd_info in sorted(domain_commands.items()):
            _add_command(cmd_subparsers, cmd_name, cmd_info)

    return parser


def _get_version() -> str:
    from inspire_core import __version__

    return __version__


def _configure_logging(args: argparse.Namespace) -> None:
    from inspire_core.cli._utils import get_repo_root
    from inspire_core.core.logging import configure_from_config

    configure_from_config(get_repo_root(args))


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the Inspire CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.domain:
        parser.print_help()
        return 0

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        domain_parser = parser._subparsers._group_actions[0].choices.get(args.domain)
        if domain_parser:
            domain_parser.print_help()
        return 0

    try:
        _configure_logging(args)
        return func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except InspireError as e:
        logger.debug("Command failed", exc_info=True)
        from inspire_core.cli._output import OutputFormatter

        OutputFormatter(json_mode=bool(getattr(args, "json", False))).error(e, error_code=type(e).__name__)
        return 1
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Inspire config show command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, project overrides
under .inspire/config and INSPIRE_* environment variables.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from inspire_core.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from inspire_core.core.config import ConfigManager
from inspire_core.core.utils.io import dump_yaml_string

SUMMARY = "Show current configuration"

_MISSING = object()


def _nest_key(key: str, value: Any) -> Any:
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'commandline.operator_prefixes')",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml", "table"],
        default="table",
        help="Output format (default: table)",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def _format_value(value: Any, indent: int = 0) -> str:
    """Format a value for table display."""
    prefix = "  " * indent
    if isinstance(value, dict):
        lines = []
        for k, v in value.items():
            formatted = _format_value(v, indent + 1)
            if "\n" in formatted or isinstance(v, dict):
                lines.append(f"{prefix}{k}:")
                lines.append(formatted)
            else:
                lines.append(f"{prefix}{k}: {formatted}")
        return "\n".join(lines)
    if isinstance(value, list):
        if not value:
            return "[]"
        return f"[{', '.join(str(v) for v in value)}]"
    return str(value)


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    config_manager = ConfigManager(get_repo_root(args))
    output_format = "json" if formatter.json_mode else args.format

    if args.key:
        value = config_manager.get(args.key, _MISSING)
        if value is _MISSING:
            formatter.text(f"Key not found: {args.key}")
            return 1
        data = _nest_key(args.key, value)
    else:
        data = config_manager.get_all()

    if output_format == "json":
        formatter.json_output({args.key: value} if args.key else data)
    elif output_format == "yaml":
        formatter.text(dump_yaml_string(data).rstrip())
    else:
        if not args.key:
            formatter.text("Inspire Configuration")
            formatter.text("=" * 60)
        for section in sorted(data):
            formatter.text(f"[{section}]")
            formatter.text(_format_value(data[section], 1) if isinstance(data[section], dict)
                           else f"  {_format_value(data[section])}")
            formatter.text("")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

"""
Inspire args command.

SUMMARY: Tokenize a command line and map its parameters
"""

from __future__ import annotations

import argparse
import sys

from inspire_core.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from inspire_core.core.commandline import CommandLine
from inspire_core.core.config.domains import CommandLineConfig

SUMMARY = "Tokenize a command line and map its parameters"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        help="Full command line, executable first (quote it as one argument)",
    )
    parser.add_argument(
        "--prefixes",
        help="Operator prefix characters (default: commandline.operator_prefixes)",
    )
    parser.add_argument(
        "--bare-key",
        help="Key for the unnamed value (default: commandline.bare_value_key)",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    cfg = CommandLineConfig(repo_root=get_repo_root(args))

    cmd = CommandLine(
        args.text,
        operator_prefixes=args.prefixes or cfg.operator_prefixes,
        bare_value_key=args.bare_key or cfg.bare_value_key,
    )
    result = cmd.result

    if formatter.json_mode:
        formatter.json_output(
            {
                "executable": cmd.executable_path,
                "tokens": list(cmd.tokens),
                "parameters": result.parameters,
                "errors": [e.to_json_error() for e in result.errors],
                "warnings": [{"kind": w.kind, "message": w.message} for w in result.warnings],
            }
        )
    else:
        formatter.text(f"executable: {cmd.executable_path}")
        formatter.text("tokens:")
        for token in cmd.tokens:
            formatter.text(f"  {token!r}")
        formatter.text("parameters:")
        for name, value in result.parameters.items():
            formatter.text_kv(name, repr(value))
        for warning in result.warnings:
            formatter.text(f"warning: {warning.message}")
        for error in result.errors:
            formatter.text(f"error: {error}")

    return 0 if result.ok else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

"""
Inspire guid strip command.

SUMMARY: Reduce a content file name to its GUID-free base name
"""

from __future__ import annotations

import argparse
import sys

from inspire_core.cli import OutputFormatter, add_json_flag
from inspire_core.core.utils.filenames import strip_guid

SUMMARY = "Reduce a content file name to its GUID-free base name"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="File name or path")
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    result = strip_guid(args.name)
    formatter.success({"name": args.name, "result": result}, result or "")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

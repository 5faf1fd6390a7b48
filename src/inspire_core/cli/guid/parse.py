"""
Inspire guid parse command.

SUMMARY: Print the GUID embedded in a content file name
"""

from __future__ import annotations

import argparse
import sys

from inspire_core.cli import OutputFormatter, add_json_flag
from inspire_core.core.utils.filenames import EMPTY_GUID, parse_guid

SUMMARY = "Print the GUID embedded in a content file name"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="File name or path")
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    guid = parse_guid(args.name)
    formatter.success({"name": args.name, "guid": str(guid)}, str(guid))
    return 0 if guid != EMPTY_GUID else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

"""
Inspire guid contains command.

SUMMARY: Check whether a content file name carries a GUID

Exits 0 when it does and 1 when it does not.
"""

from __future__ import annotations

import argparse
import sys

from inspire_core.cli import OutputFormatter, add_json_flag
from inspire_core.core.utils.filenames import contains_guid

SUMMARY = "Check whether a content file name carries a GUID"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="File name or path")
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    found = contains_guid(args.name)
    formatter.success({"name": args.name, "containsGuid": found}, "yes" if found else "no")
    return 0 if found else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

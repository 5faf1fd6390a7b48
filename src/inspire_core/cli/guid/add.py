"""
Inspire guid add command.

SUMMARY: Embed a GUID into a content file name

The GUID replaces any GUID already present. Names without an extension
get filenames.default_extension from configuration.
"""

from __future__ import annotations

import argparse
import sys
import uuid

from inspire_core.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from inspire_core.core.config import ConfigManager
from inspire_core.core.utils.filenames import DEFAULT_EXTENSION, add_guid

SUMMARY = "Embed a GUID into a content file name"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="File name or path")
    parser.add_argument(
        "--guid",
        help="GUID to embed (default: a new random GUID)",
    )
    parser.add_argument(
        "--extension",
        help="Extension for names without one (default: filenames.default_extension)",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    guid = uuid.UUID(args.guid) if args.guid else uuid.uuid4()
    extension = args.extension
    if extension is None:
        extension = ConfigManager(get_repo_root(args)).get("filenames.default_extension", DEFAULT_EXTENSION)

    result = add_guid(args.name, guid, default_extension=extension)
    formatter.success({"name": args.name, "guid": str(guid), "result": result}, result)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

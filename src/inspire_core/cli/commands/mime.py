"""
Inspire mime command.

SUMMARY: Look up MIME content types by file extension
"""

from __future__ import annotations

import argparse
import sys

from inspire_core.cli import OutputFormatter, add_json_flag
from inspire_core.core.storage import files

SUMMARY = "Look up MIME content types by file extension"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("names", nargs="+", help="File names or paths")
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    rows = []
    for name in args.names:
        content_type = files.find_mime_content_type_by_extension(name)
        rows.append(
            {
                "name": name,
                "contentType": content_type,
                "isXml": files.file_is_xml(name),
                "isImage": files.is_image_content(content_type),
            }
        )

    if formatter.json_mode:
        formatter.json_output(rows)
    else:
        for row in rows:
            formatter.text(f"{row['name']}: {row['contentType']}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

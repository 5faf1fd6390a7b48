"""
Inspire hash command.

SUMMARY: Print the SHA-2 hash of text or a file
"""

from __future__ import annotations

import argparse
import sys

from inspire_core.cli import OutputFormatter, add_json_flag
from inspire_core.core.utils.hashing import (
    HashMethod,
    file_hash_string,
    to_hash_string,
    to_xml_hash_string,
)

SUMMARY = "Print the SHA-2 hash of text or a file"


def register_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="Text to hash (UTF-8)")
    source.add_argument("--file", help="Hash the contents of this file")
    parser.add_argument(
        "--method",
        choices=[m.value for m in HashMethod],
        default=HashMethod.SHA256.value,
        help="Hash algorithm (default: sha256)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=0,
        help="Truncate the digest to this many bytes (text only)",
    )
    parser.add_argument(
        "--xml",
        action="store_true",
        help="Hash the UTF-16-LE encoding of the text",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    method = HashMethod(args.method)

    if args.file:
        digest = file_hash_string(args.file, method)
    elif args.xml:
        digest = to_xml_hash_string(args.text, method, args.max_length)
    else:
        digest = to_hash_string(args.text, method, args.max_length)

    formatter.success({"method": method.value, "hash": digest}, digest)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))

"""
Inspire CLI package.

Commands are auto-discovered from subfolders (guid/, config/) and from
commands/ for top-level commands.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json, print_error
from ._args import add_json_flag, add_repo_root_flag, add_standard_flags
from ._utils import get_repo_root

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    "print_error",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_standard_flags",
    # Utilities
    "get_repo_root",
]

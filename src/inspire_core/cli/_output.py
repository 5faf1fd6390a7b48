"""CLI output formatting in JSON and text modes."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional


class OutputFormatter:
    """Output formatter shared by all commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(self, data: Dict[str, Any], message: str, *, status: str = "success") -> None:
        """Print ``data`` (JSON mode) or ``message`` (text mode)."""
        if self.json_mode:
            print(json.dumps({"status": status, **data}, indent=self.indent, default=str))
        else:
            print(message)

    def error(self, error: Exception, message: Optional[str] = None, *, error_code: str = "error") -> None:
        """Report ``error`` on stderr.

        Errors that know how to describe themselves (``to_json_error``)
        contribute their context in JSON mode.
        """
        msg = message or str(error)
        if self.json_mode:
            payload: Dict[str, Any] = {"error": error_code, "message": msg}
            to_json = getattr(error, "to_json_error", None)
            if callable(to_json):
                payload["details"] = to_json()
            print(json.dumps(payload, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)

    def text_kv(self, key: str, value: Any, prefix: str = "  ") -> None:
        """Print ``key: value`` in text mode; silent in JSON mode."""
        if not self.json_mode:
            print(f"{prefix}{key}: {value}")


def format_json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, default=str)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


__all__ = ["OutputFormatter", "format_json", "print_error"]

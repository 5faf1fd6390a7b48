"""Core helpers for Inspire.

Subpackages:
- config/: layered YAML configuration
- utils/: string, filename, date, hashing, URI, locale and resource helpers
- storage/: file and directory helpers
"""
from __future__ import annotations

from .commandline import (
    CommandLine,
    ParameterParseResult,
    ParseWarning,
    current_command_line,
    parse_command_line,
    parse_parameters,
    tokenize_command_line,
)
from .exceptions import (
    ConfigError,
    DuplicateParameterError,
    InspireError,
    ResourceNotFoundError,
    SchemaValidationError,
)

__all__ = [
    "CommandLine",
    "ParameterParseResult",
    "ParseWarning",
    "current_command_line",
    "parse_command_line",
    "parse_parameters",
    "tokenize_command_line",
    "InspireError",
    "DuplicateParameterError",
    "ResourceNotFoundError",
    "ConfigError",
    "SchemaValidationError",
]

from __future__ import annotations

from typing import Any, Dict, Mapping


class InspireError(Exception):
    """Base exception for Inspire core."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class DuplicateParameterError(InspireError, KeyError):
    """Raised when a command-line parameter name appears more than once."""

    def __init__(self, name: str, *, context: Mapping[str, Any] | None = None) -> None:
        ctx = dict(context or {})
        ctx.setdefault("name", name)
        message = f"Duplicate command-line parameter: {name!r}"
        InspireError.__init__(self, message, context=ctx)
        KeyError.__init__(self, message)
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DuplicateParameterError):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((DuplicateParameterError, self.name))


class ResourceNotFoundError(InspireError, FileNotFoundError):
    """Raised when an embedded resource cannot be located."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        InspireError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ConfigError(InspireError, RuntimeError):
    """Raised when configuration cannot be loaded or is malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        InspireError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class SchemaValidationError(ConfigError):
    """Raised when merged configuration fails schema validation."""


__all__ = [
    "InspireError",
    "DuplicateParameterError",
    "ResourceNotFoundError",
    "ConfigError",
    "SchemaValidationError",
]

"""Shell-style command-line tokenizing and parameter mapping.

A command line is split into tokens with a single left-to-right scan that
understands double quotes, then mapped to ``name -> value`` pairs where
``-name`` or ``/name`` operators take the following token as their value.

Example:
    >>> parse_command_line('prog.exe -name value -flag').parameters
    {'name': 'value', 'flag': ''}
"""
from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import psutil

from .exceptions import DuplicateParameterError

logger = logging.getLogger(__name__)

DEFAULT_OPERATOR_PREFIXES = "-/"
DEFAULT_BARE_VALUE_KEY = "parameter"

QUOTE = '"'
_LINE_BREAKS = re.compile(r"\r\n|\n|\r|\t")
_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class ParseWarning:
    """Non-fatal diagnostic produced while tokenizing."""

    kind: str
    message: str
    position: int = -1


@dataclass(frozen=True)
class ParameterParseResult:
    """Outcome of mapping tokens to named parameters.

    ``parameters`` keeps the first value seen for each name; every repeated
    name is reported in ``errors`` instead of overwriting it.
    """

    parameters: Dict[str, str] = field(default_factory=dict)
    errors: Tuple[DuplicateParameterError, ...] = ()
    warnings: Tuple[ParseWarning, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> Dict[str, str]:
        """Return the parameters, raising the first duplicate error if any."""
        if self.errors:
            raise self.errors[0]
        return dict(self.parameters)


def normalize_command_line(text: str) -> str:
    """Turn line breaks and tabs into spaces and collapse whitespace runs."""
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", _LINE_BREAKS.sub(" ", text))


def tokenize_command_line(text: str, *, warnings: Optional[List[ParseWarning]] = None) -> List[str]:
    """Split ``text`` into tokens, honouring double quotes.

    Quoted content becomes its own token (``""`` yields an empty token).
    A quote that opens inside an unquoted token emits the quoted token
    first, then the unquoted remainder. An unterminated quote is flushed
    as the final token and reported through ``warnings``.
    """
    normalized = normalize_command_line(text)
    tokens: List[str] = []
    unquoted: List[str] = []
    quoted: List[str] = []
    in_quotes = False
    quote_start = -1

    for position, ch in enumerate(normalized):
        if ch == QUOTE:
            if in_quotes:
                tokens.append("".join(quoted))
                quoted = []
            else:
                quote_start = position
            in_quotes = not in_quotes
        elif ch == " " and not in_quotes:
            if unquoted:
                tokens.append("".join(unquoted))
                unquoted = []
        elif in_quotes:
            quoted.append(ch)
        else:
            unquoted.append(ch)

    if unquoted:
        tokens.append("".join(unquoted))

    if in_quotes:
        tokens.append("".join(quoted))
        warning = ParseWarning(
            kind="unterminated-quote",
            message=f"Unterminated quote opened at position {quote_start}",
            position=quote_start,
        )
        logger.warning("%s in command line %r", warning.message, normalized)
        if warnings is not None:
            warnings.append(warning)

    return tokens


def parse_parameters(
    tokens: Sequence[str],
    *,
    operator_prefixes: str = DEFAULT_OPERATOR_PREFIXES,
    bare_value_key: str = DEFAULT_BARE_VALUE_KEY,
) -> ParameterParseResult:
    """Map tokens (index 0 is the executable) to named parameters."""
    parameters: Dict[str, str] = {}
    errors: List[DuplicateParameterError] = []

    def commit(name: str, value: str) -> None:
        if name in parameters:
            logger.debug("Duplicate parameter %r ignored", name)
            errors.append(DuplicateParameterError(name, context={"value": value}))
            return
        parameters[name] = value

    pending: Optional[str] = None
    bare_value: Optional[str] = None

    for token in list(tokens)[1:]:
        if not token:
            continue
        if token[0] in operator_prefixes:
            if pending is not None:
                commit(pending, "")
            name = token[1:]
            pending = name if name.strip() else None
        elif pending is not None:
            commit(pending, token)
            pending = None
        else:
            bare_value = token

    if pending is not None:
        commit(pending, "")
    if bare_value is not None and bare_value.strip():
        commit(bare_value_key, bare_value)

    return ParameterParseResult(parameters=parameters, errors=tuple(errors))


def parse_command_line(text: str, **options: Any) -> ParameterParseResult:
    """Tokenize ``text`` and map it to parameters in one call.

    ``options`` are passed to :func:`parse_parameters`.
    """
    warnings: List[ParseWarning] = []
    tokens = tokenize_command_line(text, warnings=warnings)
    result = parse_parameters(tokens, **options)
    return ParameterParseResult(
        parameters=result.parameters,
        errors=result.errors,
        warnings=tuple(warnings),
    )


def quote_argument(arg: str) -> str:
    """Double-quote ``arg`` when it contains whitespace."""
    if arg and not any(ch.isspace() for ch in arg):
        return arg
    return f"{QUOTE}{arg}{QUOTE}"


def join_arguments(args: Iterable[str]) -> str:
    return " ".join(quote_argument(str(a)) for a in args)


class CommandLine:
    """Parsed view of one command-line string.

    Instances are read-only; build them with the constructor or
    :meth:`from_process`.
    """

    __slots__ = ("_text", "_tokens", "_result")

    def __init__(
        self,
        text: str,
        *,
        operator_prefixes: str = DEFAULT_OPERATOR_PREFIXES,
        bare_value_key: str = DEFAULT_BARE_VALUE_KEY,
    ) -> None:
        warnings: List[ParseWarning] = []
        tokens = tokenize_command_line(text, warnings=warnings)
        mapped = parse_parameters(
            tokens,
            operator_prefixes=operator_prefixes,
            bare_value_key=bare_value_key,
        )
        object.__setattr__(self, "_text", text or "")
        object.__setattr__(self, "_tokens", tuple(tokens))
        object.__setattr__(
            self,
            "_result",
            ParameterParseResult(
                parameters=mapped.parameters,
                errors=mapped.errors,
                warnings=tuple(warnings),
            ),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_process(cls, *, config: Any = None) -> "CommandLine":
        """Build from the running process's argv.

        ``config`` is a ``CommandLineConfig``; the project config is loaded
        when it is omitted.
        """
        if config is None:
            from .config.domains import CommandLineConfig

            config = CommandLineConfig()
        argv = psutil.Process().cmdline()
        return cls(
            join_arguments(argv),
            operator_prefixes=config.operator_prefixes,
            bare_value_key=config.bare_value_key,
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    @property
    def executable_path(self) -> str:
        return self._tokens[0] if self._tokens else ""

    @property
    def result(self) -> ParameterParseResult:
        return self._result

    @property
    def parameters(self) -> Dict[str, str]:
        """Parameters by name. Raises :class:`DuplicateParameterError` on collisions."""
        return self._result.unwrap()

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.parameters.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self._result.parameters

    def __repr__(self) -> str:
        return f"CommandLine({self._text!r})"


_current: Optional[CommandLine] = None
_current_lock = threading.Lock()


def current_command_line() -> CommandLine:
    """Return the process command line, parsed once and cached."""
    global _current
    with _current_lock:
        if _current is None:
            _current = CommandLine.from_process()
            logger.debug("Parsed process command line: %r", _current.text)
        return _current


def reset_command_line_cache() -> None:
    """Forget the cached process command line (tests only)."""
    global _current
    with _current_lock:
        _current = None


__all__ = [
    "CommandLine",
    "ParameterParseResult",
    "ParseWarning",
    "current_command_line",
    "join_arguments",
    "normalize_command_line",
    "parse_command_line",
    "parse_parameters",
    "quote_argument",
    "reset_command_line_cache",
    "tokenize_command_line",
]

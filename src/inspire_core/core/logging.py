"""Logging for Inspire: a category-aware logger facade and handler setup.

Every record carries a ``category`` attribute (an :class:`ErrorCategory`
value) so formats may use ``%(category)s``.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional, Union

from inspire_core.core.utils.io import ensure_parent_dir
from inspire_core.core.utils.types import recurse_messages

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(category)s]: %(message)s"
DEFAULT_CATEGORY = "General"

_INSPIRE_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: Union[str, int]) -> int:
    if isinstance(name, int):
        return name
    value = logging.getLevelName(str(name).upper())
    return value if isinstance(value, int) else logging.INFO


def _category_value(category: Any) -> str:
    return str(getattr(category, "value", category) or DEFAULT_CATEGORY)


class CategoryFilter(logging.Filter):
    """Give records without a category the default one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "category"):
            record.category = DEFAULT_CATEGORY
        return True


class LoggerService:
    """Category-aware wrapper over a stdlib :class:`logging.Logger`.

    Messages take ``%``-style args. Passing ``exception`` attaches its
    traceback, or, with ``report_exception_messages``, appends the flattened
    chain of exception messages instead.

    Example:
        >>> log = LoggerService("inspire.import")
        >>> log.warn("Skipped %s", "a.xml", category=ErrorCategory.APPLICATION)
    """

    def __init__(self, logger: Union[logging.Logger, str, None] = None) -> None:
        if isinstance(logger, logging.Logger):
            self.logger = logger
        else:
            self.logger = logging.getLogger(logger or "inspire_core")

    def _log(
        self,
        level: int,
        message: str,
        args: tuple[Any, ...],
        category: Any,
        exception: Optional[BaseException],
        report_exception_messages: bool,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        text = message % args if args else message
        exc_info: Optional[BaseException] = None
        if exception is not None:
            if report_exception_messages:
                text = f"{text}\n{recurse_messages(exception)}".rstrip("\n")
            else:
                exc_info = exception
        self.logger.log(level, text, exc_info=exc_info, extra={"category": _category_value(category)})

    def debug(self, message: str, *args: Any, category: Any = DEFAULT_CATEGORY,
              exception: Optional[BaseException] = None, report_exception_messages: bool = False) -> None:
        self._log(logging.DEBUG, message, args, category, exception, report_exception_messages)

    def info(self, message: str, *args: Any, category: Any = DEFAULT_CATEGORY,
             exception: Optional[BaseException] = None, report_exception_messages: bool = False) -> None:
        self._log(logging.INFO, message, args, category, exception, report_exception_messages)

    def warn(self, message: str, *args: Any, category: Any = DEFAULT_CATEGORY,
             exception: Optional[BaseException] = None, report_exception_messages: bool = False) -> None:
        self._log(logging.WARNING, message, args, category, exception, report_exception_messages)

    def error(self, message: str, *args: Any, category: Any = DEFAULT_CATEGORY,
              exception: Optional[BaseException] = None, report_exception_messages: bool = False) -> None:
        self._log(logging.ERROR, message, args, category, exception, report_exception_messages)

    def fatal(self, message: str, *args: Any, category: Any = DEFAULT_CATEGORY,
              exception: Optional[BaseException] = None, report_exception_messages: bool = False) -> None:
        self._log(logging.CRITICAL, message, args, category, exception, report_exception_messages)


def configure_stdlib_logging(
    *,
    log_path: Optional[Path] = None,
    level: Union[str, int] = "INFO",
    fmt: str = DEFAULT_FORMAT,
) -> logging.Handler:
    """Install the Inspire handler on the root logger.

    Writes to ``log_path`` when given, otherwise to stderr. Calling again
    with the same target only updates the level.
    """
    global _INSPIRE_HANDLER, _CONFIGURED_TARGET

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _INSPIRE_HANDLER is not None and _CONFIGURED_TARGET == target:
        _INSPIRE_HANDLER.setLevel(_level_from_name(level))
        return _INSPIRE_HANDLER

    if _INSPIRE_HANDLER is not None:
        root.removeHandler(_INSPIRE_HANDLER)
        _INSPIRE_HANDLER.close()
        _INSPIRE_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        ensure_parent_dir(target)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(fmt))
    handler.addFilter(CategoryFilter())
    root.addHandler(handler)

    _INSPIRE_HANDLER = handler
    _CONFIGURED_TARGET = target
    return handler


def configure_from_config(repo_root: Optional[Path] = None) -> logging.Handler:
    """Install handlers from the ``logging`` config section."""
    from inspire_core.core.config.domains import LoggingConfig

    cfg = LoggingConfig(repo_root=repo_root)
    return configure_stdlib_logging(log_path=cfg.file, level=cfg.level, fmt=cfg.format)


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the Inspire handler."""
    global _INSPIRE_HANDLER, _CONFIGURED_TARGET
    if _INSPIRE_HANDLER is not None:
        logging.getLogger().removeHandler(_INSPIRE_HANDLER)
        _INSPIRE_HANDLER.close()
    _INSPIRE_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = [
    "CategoryFilter",
    "DEFAULT_FORMAT",
    "LoggerService",
    "configure_from_config",
    "configure_stdlib_logging",
    "reset_stdlib_logging_for_tests",
]

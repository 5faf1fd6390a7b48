"""Collecting user-facing error messages during an operation.

:class:`ErrorManager` accumulates :class:`ErrorMessage` records instead of
raising, so a request can report every problem at once. Callers inspect
``has_errors`` and friends afterwards.
"""
from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from inspire_core.core.logging import LoggerService
from inspire_core.core.utils.types import LocalizedDescription, describe

NOT_FOUND_CODE = 404
FORBIDDEN_CODE = 403


@describe(
    FATAL=LocalizedDescription("LabelFatalText"),
    CRITICAL=LocalizedDescription("LabelCriticalText"),
    WARNING=LocalizedDescription("LabelWarningText"),
    VALIDATION=LocalizedDescription("LabelValidationText"),
)
class ErrorType(str, Enum):
    FATAL = "Fatal"
    CRITICAL = "Critical"
    WARNING = "Warning"
    VALIDATION = "Validation"


@describe(
    GENERAL=LocalizedDescription("LabelGeneralText"),
    SECURITY=LocalizedDescription("LabelSecurityText"),
    APPLICATION=LocalizedDescription("LabelApplicationText"),
    SYSTEM=LocalizedDescription("LabelSystemText"),
)
class ErrorCategory(str, Enum):
    GENERAL = "General"
    SECURITY = "Security"
    APPLICATION = "Application"
    SYSTEM = "System"


@describe(
    DEBUG=LocalizedDescription("LabelDebugText"),
    VALIDATION=LocalizedDescription("LabelValidationText"),
    WARNING=LocalizedDescription("LabelWarningText"),
    ERROR=LocalizedDescription("LabelErrorText"),
    CRITICAL=LocalizedDescription("LabelCriticalText"),
)
class EventType(str, Enum):
    DEBUG = "Debug"
    VALIDATION = "Validation"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ErrorMessage:
    message: str = ""
    error_type: ErrorType = ErrorType.WARNING
    category: ErrorCategory = ErrorCategory.GENERAL
    stack_trace: str = ""
    property_name: str = ""
    suggested_error_code: int = 0
    event_date: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "errorType": self.error_type.value,
            "category": self.category.value,
            "stackTrace": self.stack_trace,
            "propertyName": self.property_name,
            "suggestedErrorCode": self.suggested_error_code,
            "eventDate": self.event_date.isoformat(),
        }


def _format(message: str, args: tuple[Any, ...]) -> str:
    return message % args if args else message


def _stack_trace(exc: Optional[BaseException]) -> str:
    if exc is None:
        return ""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


class ErrorManager:
    """Accumulates error messages for one unit of work.

    With ``log_messages`` enabled every reported message is also written
    to ``logger``.
    """

    def __init__(self, *, log_messages: bool = False, logger: Optional[LoggerService] = None) -> None:
        self.messages: List[ErrorMessage] = []
        self.log_messages = log_messages
        self.logger = logger or LoggerService(__name__)

    # ---------- state ----------

    @property
    def has_errors(self) -> bool:
        """Any message other than a warning."""
        return any(m.error_type is not ErrorType.WARNING for m in self.messages)

    @property
    def has_critical_errors(self) -> bool:
        return any(m.error_type in (ErrorType.FATAL, ErrorType.CRITICAL) for m in self.messages)

    @property
    def has_validation_errors(self) -> bool:
        return any(m.error_type is ErrorType.VALIDATION for m in self.messages)

    @property
    def has_forbidden_errors(self) -> bool:
        return any(m.suggested_error_code == FORBIDDEN_CODE for m in self.messages)

    def clear(self) -> None:
        self.messages.clear()

    # ---------- builders ----------

    def create_error_message(
        self,
        message: str = "",
        error_type: ErrorType = ErrorType.WARNING,
        stack_trace: str = "",
        category: ErrorCategory = ErrorCategory.GENERAL,
    ) -> ErrorMessage:
        return ErrorMessage(message=message, error_type=error_type, category=category, stack_trace=stack_trace)

    def create_validation_message(
        self,
        property_name: str,
        message: str,
        category: ErrorCategory = ErrorCategory.GENERAL,
    ) -> ErrorMessage:
        return ErrorMessage(
            message=message,
            error_type=ErrorType.VALIDATION,
            category=category,
            property_name=property_name,
        )

    # ---------- reporters ----------

    def _add(self, entry: ErrorMessage, exc: Optional[BaseException] = None) -> ErrorMessage:
        self.messages.append(entry)
        if self.log_messages:
            log = {
                ErrorType.FATAL: self.logger.fatal,
                ErrorType.CRITICAL: self.logger.error,
                ErrorType.WARNING: self.logger.warn,
                ErrorType.VALIDATION: self.logger.info,
            }[entry.error_type]
            log("%s", entry.message, category=entry.category, exception=exc)
        return entry

    def _report(
        self,
        error_type: ErrorType,
        message: Union[str, BaseException],
        args: tuple[Any, ...],
        category: ErrorCategory,
        exc: Optional[BaseException],
        code: int = 0,
    ) -> ErrorMessage:
        if isinstance(message, BaseException):
            exc = exc or message
            text = str(message)
        else:
            text = _format(message, args)
        entry = self.create_error_message(text, error_type, _stack_trace(exc), category)
        entry.suggested_error_code = code
        return self._add(entry, exc)

    def critical_not_found(self, message: str, *args: Any,
                           category: ErrorCategory = ErrorCategory.GENERAL) -> ErrorMessage:
        return self._report(ErrorType.CRITICAL, message, args, category, None, NOT_FOUND_CODE)

    def critical_forbidden(self, message: str, *args: Any,
                           category: ErrorCategory = ErrorCategory.GENERAL) -> ErrorMessage:
        return self._report(ErrorType.CRITICAL, message, args, category, None, FORBIDDEN_CODE)

    def fatal(self, message: Union[str, BaseException], *args: Any,
              category: ErrorCategory = ErrorCategory.GENERAL,
              exc: Optional[BaseException] = None) -> ErrorMessage:
        return self._report(ErrorType.FATAL, message, args, category, exc)

    def critical(self, message: Union[str, BaseException], *args: Any,
                 category: ErrorCategory = ErrorCategory.GENERAL,
                 exc: Optional[BaseException] = None) -> ErrorMessage:
        return self._report(ErrorType.CRITICAL, message, args, category, exc)

    def warning(self, message: str, *args: Any,
                category: ErrorCategory = ErrorCategory.GENERAL,
                exc: Optional[BaseException] = None) -> ErrorMessage:
        return self._report(ErrorType.WARNING, message, args, category, exc)

    def validation(self, property_name: str, message: str, *args: Any,
                   category: ErrorCategory = ErrorCategory.GENERAL) -> ErrorMessage:
        entry = self.create_validation_message(property_name, _format(message, args), category)
        return self._add(entry)


__all__ = [
    "ErrorCategory",
    "ErrorManager",
    "ErrorMessage",
    "ErrorType",
    "EventType",
    "FORBIDDEN_CODE",
    "NOT_FOUND_CODE",
]

"""Lenient conversions from text, plus enum descriptions."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union

E = TypeVar("E", bound=Enum)

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
DECIMAL_MAX = Decimal("79228162514264337593543950335")

TRUE_VALUES = frozenset({"T", "TRUE", "1", "Y", "YES", "O"})

# Tried in order after ISO 8601.
DATETIME_FORMATS = (
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


def to_guid(value: Optional[str]) -> uuid.UUID:
    """Parse a GUID, returning the all-zero GUID on failure."""
    try:
        return uuid.UUID(str(value).strip())
    except (TypeError, ValueError, AttributeError):
        return uuid.UUID(int=0)


def _to_bounded_int(value: Optional[str], default: int, low: int, high: int) -> int:
    if not value:
        return default
    try:
        result = int(value.strip())
    except ValueError:
        return default
    return result if low <= result <= high else default


def to_int(value: Optional[str], default: int = 0) -> int:
    """Parse a 32-bit integer; malformed or out-of-range text gives ``default``."""
    return _to_bounded_int(value, default, INT32_MIN, INT32_MAX)


def to_long(value: Optional[str], default: int = 0) -> int:
    return _to_bounded_int(value, default, INT64_MIN, INT64_MAX)


def to_decimal(value: Optional[str], default: Union[Decimal, float, int] = 0) -> Decimal:
    """Parse a decimal, allowing ``,`` group separators.

    NaN, infinities and values beyond 28 significant digits give ``default``.
    """
    fallback = Decimal(str(default))
    if not value:
        return fallback
    try:
        result = Decimal(value.strip().replace(",", ""))
    except InvalidOperation:
        return fallback
    if not result.is_finite() or result.copy_abs() > DECIMAL_MAX:
        return fallback
    return result


def convert_to_string(value: Any, default: str = "") -> str:
    if value is None:
        return default
    result = str(value)
    return result if result else default


def to_datetime(value: Optional[str], default: Optional[datetime] = None) -> Optional[datetime]:
    """Parse ISO 8601 or a US-style date; unparseable text gives ``default``."""
    if not value or not value.strip():
        return default
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return default


def to_enum(
    value: Optional[str],
    enum_type: Type[E],
    *,
    ignore_case: bool = True,
    default: Optional[E] = None,
) -> Optional[E]:
    """Look up an enum member by name; blank text gives ``default``.

    Raises:
        ValueError: If ``value`` names no member of ``enum_type``
    """
    if not value or not value.strip():
        return default
    name = value.strip()
    if name in enum_type.__members__:
        return enum_type[name]
    if ignore_case:
        for member_name, member in enum_type.__members__.items():
            if member_name.lower() == name.lower():
                return member
    raise ValueError(f"{value!r} is not a valid {enum_type.__name__}")


def to_boolean(value: Optional[str], default: bool = False) -> bool:
    if not value or not value.strip():
        return default
    return value.strip().upper() in TRUE_VALUES


def recurse_messages(exc: Optional[BaseException], level: int = 0) -> str:
    """Flatten an exception chain, one message per line.

    Nested causes are prefixed with ``-->`` markers showing their depth.
    """
    if exc is None:
        return ""
    message = f"{exc}\n"
    if level > 0:
        message = "-" * level + ">" + message
    inner = exc.__cause__ or exc.__context__
    if inner is not None:
        message += recurse_messages(inner, level + 1)
    return message


def zero_to_none(value: Optional[int]) -> Optional[int]:
    return value if value else None


# ---------- enum descriptions ----------


@dataclass(frozen=True)
class LocalizedDescription:
    """A description stored as a resource key and resolved per locale."""

    key: str

    def resolve(self, locale: Optional[str] = None) -> str:
        from .resources import get_resource_string

        return get_resource_string(self.key, locale) if self.key else self.key


Description = Union[str, LocalizedDescription]

_descriptions: Dict[Type[Enum], Dict[str, Description]] = {}


def describe(**descriptions: Description) -> Callable[[Type[E]], Type[E]]:
    """Class decorator attaching descriptions to enum members by name.

    Example:
        >>> @describe(ASC=LocalizedDescription("SortAscendingText"))
        ... class SortDirection(Enum):
        ...     ASC = "asc"
    """

    def decorator(enum_type: Type[E]) -> Type[E]:
        unknown = set(descriptions) - set(enum_type.__members__)
        if unknown:
            raise ValueError(f"Unknown {enum_type.__name__} members: {sorted(unknown)}")
        _descriptions.setdefault(enum_type, {}).update(descriptions)
        return enum_type

    return decorator


def to_description(member: Enum, locale: Optional[str] = None) -> str:
    """Description registered for ``member``, or its name.

    Raises:
        ValueError: If ``member`` is not an enum member
    """
    if not isinstance(member, Enum):
        raise ValueError(f"Not an enum member: {member!r}")
    description = _descriptions.get(type(member), {}).get(member.name)
    if description is None:
        return member.name
    if isinstance(description, LocalizedDescription):
        return description.resolve(locale)
    return description


@describe(
    ASC=LocalizedDescription("SortAscendingText"),
    DESC=LocalizedDescription("SortDescendingText"),
)
class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


__all__ = [
    "SortDirection",
    "LocalizedDescription",
    "convert_to_string",
    "describe",
    "recurse_messages",
    "to_boolean",
    "to_datetime",
    "to_decimal",
    "to_description",
    "to_enum",
    "to_guid",
    "to_int",
    "to_long",
    "zero_to_none",
]

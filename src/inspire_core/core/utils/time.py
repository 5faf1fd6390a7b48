from __future__ import annotations

"""Timezone-aware time helpers and business-day arithmetic.

ISO 8601 formatting choices come from YAML config (``time.iso8601``).
"""

import calendar
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional, Union

logger = logging.getLogger(__name__)

EDITOR_DATE_FORMAT = "%Y%m%dT%H%M%S%z"
UNIVERSAL_EDITOR_DATE_FORMAT = "%Y%m%dT%H%M%S"

DateLike = Union[date, datetime]


def _cfg() -> Dict[str, Any]:
    """Return the ``time.iso8601`` settings.

    Raises:
        RuntimeError: If the section is missing from the merged configuration
    """
    from ..config.domains import TimeConfig

    cfg = TimeConfig()
    if not cfg.iso8601:
        raise RuntimeError(
            "time.iso8601 configuration section is missing. "
            "Add 'time.iso8601' section to your YAML config."
        )
    return {
        "timespec": cfg.timespec,
        "use_z_suffix": cfg.use_z_suffix,
        "strip_microseconds": cfg.strip_microseconds,
    }


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime using config-driven precision."""
    cfg = _cfg()
    now = datetime.now(timezone.utc)
    if cfg["strip_microseconds"]:
        now = now.replace(microsecond=0)
    return now


def utc_timestamp(dt: Optional[datetime] = None) -> str:
    """Return an ISO 8601 UTC timestamp according to YAML configuration."""
    cfg = _cfg()
    dt = to_utc_kind(dt) if dt is not None else utc_now()
    if cfg["strip_microseconds"]:
        dt = dt.replace(microsecond=0)
    ts = dt.isoformat(timespec=cfg["timespec"]) if cfg["timespec"] else dt.isoformat()
    if cfg["use_z_suffix"]:
        ts = ts.replace("+00:00", "Z")
    return ts


def parse_iso8601(timestamp_str: str) -> datetime:
    """Parse an ISO 8601 timestamp string into a UTC datetime."""
    cfg = _cfg()
    ts = timestamp_str.strip()
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    dt = to_utc_kind(datetime.fromisoformat(ts))
    if cfg["strip_microseconds"]:
        dt = dt.replace(microsecond=0)
    return dt


def to_utc_kind(dt: datetime) -> datetime:
    """Treat a naive datetime as UTC; convert an aware one to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


# ---------- business days ----------


def _check_year_month(year: int, month: int) -> None:
    if year < 1 or year > 9999:
        raise ValueError(f"year out of range: {year}")
    if month < 1 or month > 12:
        raise ValueError(f"month out of range: {month}")


def first_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """First ``weekday`` (``calendar.MONDAY`` ...) of the month."""
    _check_year_month(year, month)
    first = date(year, month, 1)
    return first + timedelta(days=(weekday - first.weekday()) % 7)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Last ``weekday`` (``calendar.MONDAY`` ...) of the month."""
    _check_year_month(year, month)
    last = date(year, month, calendar.monthrange(year, month)[1])
    return last - timedelta(days=(last.weekday() - weekday) % 7)


def _observed(holiday: date) -> date:
    # Saturday holidays are observed on Friday, Sunday ones on Monday.
    if holiday.weekday() == calendar.SATURDAY:
        return holiday - timedelta(days=1)
    if holiday.weekday() == calendar.SUNDAY:
        return holiday + timedelta(days=1)
    return holiday


def basic_holidays(year: int) -> tuple[date, ...]:
    """US holidays observed in ``year``."""
    thanksgiving = first_weekday_of_month(year, 11, calendar.THURSDAY) + timedelta(weeks=3)
    return (
        _observed(date(year, 1, 1)),
        last_weekday_of_month(year, 5, calendar.MONDAY),
        _observed(date(year, 7, 4)),
        first_weekday_of_month(year, 9, calendar.MONDAY),
        thanksgiving,
        _observed(date(year, 12, 25)),
    )


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def is_holiday(value: DateLike, holidays: Optional[Iterable[DateLike]] = None) -> bool:
    """Whether ``value`` is a basic US holiday or one of ``holidays``."""
    day = _as_date(value)
    if day in basic_holidays(day.year):
        return True
    if holidays:
        return any(_as_date(h) == day for h in holidays)
    return False


def add_business_days(
    value: DateLike,
    days: int,
    *,
    ignore_holidays: bool = True,
    holidays: Optional[Iterable[DateLike]] = None,
) -> DateLike:
    """Move ``days`` business days from ``value``, skipping weekends.

    Holidays are skipped too when ``ignore_holidays`` is False. Negative
    ``days`` walk backwards.
    """
    custom = list(holidays) if holidays is not None else None
    step = timedelta(days=-1 if days < 0 else 1)
    direction = -1 if days < 0 else 1
    result = value
    remaining = days
    while remaining != 0:
        result = result + step
        if result.weekday() >= calendar.SATURDAY:
            continue
        if not ignore_holidays and is_holiday(result, custom):
            continue
        remaining -= direction
    return result


# ---------- editor dates ----------


def localized_editor_date_to_utc(
    text: Optional[str],
    fmt: str = EDITOR_DATE_FORMAT,
    default: Optional[datetime] = None,
) -> Optional[datetime]:
    """Parse an editor timestamp such as ``20180203T100101-0500`` into UTC.

    Returns ``default`` when ``text`` does not match ``fmt``.
    """
    if not text:
        return default
    try:
        parsed = datetime.strptime(text.strip(), fmt)
    except ValueError:
        logger.debug("Unparseable editor date %r", text)
        return default
    return to_utc_kind(parsed)


def universal_editor_date_to_string(dt: datetime, fmt: str = UNIVERSAL_EDITOR_DATE_FORMAT) -> str:
    """Format a UTC datetime for the editor, e.g. ``20180301T110101+0000``."""
    return dt.strftime(fmt) + "+0000"


__all__ = [
    "add_business_days",
    "basic_holidays",
    "first_weekday_of_month",
    "is_holiday",
    "last_weekday_of_month",
    "localized_editor_date_to_utc",
    "parse_iso8601",
    "to_utc_kind",
    "universal_editor_date_to_string",
    "utc_now",
    "utc_timestamp",
]

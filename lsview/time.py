"""Timestamp formatting.

Timestamps are integer nanoseconds since the Unix epoch, as found in
``os.stat_result.st_mtime_ns`` and its siblings.
"""

from __future__ import annotations

import locale
import os
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from functools import lru_cache
from zoneinfo import ZoneInfo

from .cell import display_width

_NANOS_PER_SECOND = 1_000_000_000
_EPOCH = datetime(1970, 1, 1)
_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZONEINFO_DIR = "/usr/share/zoneinfo"
_LOCALTIME = "/etc/localtime"
_ENGLISH_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class TimeFormat(Enum):
    """How timestamps are written out."""

    DEFAULT_FORMAT = "default"
    ISO_FORMAT = "iso"
    LONG_ISO = "long-iso"
    FULL_ISO = "full-iso"

    def format_local(self, time: int) -> str:
        """Format a timestamp without a time zone."""
        date = _local(time)
        if self is TimeFormat.FULL_ISO:
            return _full(date, time)
        return self._format_date(date)

    def format_zoned(self, time: int, zone: tzinfo) -> str:
        """Format a timestamp converted into the given time zone."""
        date = _zoned(time, zone)
        if self is TimeFormat.FULL_ISO:
            return f"{_full(date, time)} {_offset_suffix(date)}"
        return self._format_date(date)

    def _format_date(self, date: datetime) -> str:
        if self is TimeFormat.DEFAULT_FORMAT:
            return _default(date)
        if self is TimeFormat.ISO_FORMAT:
            return _iso(date)
        return _long(date)


def determine_time_zone() -> ZoneInfo:
    """Load the zone named by ``TZ``, or the system's local zone.

    Raises OSError when the zone file cannot be read and ValueError when it
    is not a valid zone file.
    """
    name = os.environ.get("TZ")
    if name is None:
        path = _LOCALTIME
    elif name.startswith("/"):
        path = name
    else:
        path = f"{_ZONEINFO_DIR}/{name.removeprefix(':')}"
    with open(path, "rb") as handle:
        return ZoneInfo.from_file(handle)


def _local(time: int) -> datetime:
    return _EPOCH + timedelta(seconds=time // _NANOS_PER_SECOND)


def _zoned(time: int, zone: tzinfo) -> datetime:
    return (_EPOCH_UTC + timedelta(seconds=time // _NANOS_PER_SECOND)).astimezone(zone)


def _default(date: datetime) -> str:
    month = _month_names()[date.month - 1]
    width = _maximum_month_width()
    if width in (4, 5):
        month = month.ljust(width)
    day = f"{date.day:>2}"
    if _is_recent(date):
        return f"{day} {month} {date.hour:02}:{date.minute:02}"
    return f"{day} {month} {date.year:>5}"


def _iso(date: datetime) -> str:
    if _is_recent(date):
        return f"{date.month:02}-{date.day:02} {date.hour:02}:{date.minute:02}"
    return f"{date.year:04}-{date.month:02}-{date.day:02}"


def _long(date: datetime) -> str:
    return f"{date.year:04}-{date.month:02}-{date.day:02} {date.hour:02}:{date.minute:02}"


def _full(date: datetime, time: int) -> str:
    return (
        f"{date.year:04}-{date.month:02}-{date.day:02} "
        f"{date.hour:02}:{date.minute:02}:{date.second:02}.{time % _NANOS_PER_SECOND:09}"
    )


def _offset_suffix(date: datetime) -> str:
    offset = date.utcoffset() or timedelta(0)
    total = int(offset.total_seconds())
    hours = abs(total) // 3600 * (-1 if total < 0 else 1)
    minutes = abs(total) // 60 % 60
    return f"{hours:+03d}{minutes:02d}"


def _is_recent(date: datetime) -> bool:
    return date.year == _current_year()


@lru_cache(maxsize=None)
def _current_year() -> int:
    return datetime.now(timezone.utc).year


@lru_cache(maxsize=None)
def _month_names() -> tuple[str, ...]:
    """Abbreviated month names from the user's locale, falling back to English."""
    if not hasattr(locale, "nl_langinfo"):
        return _ENGLISH_MONTHS
    previous = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, "")
        names = tuple(
            locale.nl_langinfo(getattr(locale, f"ABMON_{number}")) for number in range(1, 13)
        )
    except (locale.Error, AttributeError):
        return _ENGLISH_MONTHS
    finally:
        locale.setlocale(locale.LC_TIME, previous)
    return names if all(names) else _ENGLISH_MONTHS


@lru_cache(maxsize=None)
def _maximum_month_width() -> int:
    # Only the first eleven months are considered when choosing the padding.
    return max(display_width(name) for name in _month_names()[:11])
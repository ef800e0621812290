"""Modification dates and their rendering."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from lsdmeta.options import DateFlag, Elem, Flags, PlainColors

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# 365.2425 * 24 * 60 * 60 / 2: half a mean Gregorian year, in seconds.
_HALF_YEAR = timedelta(seconds=15_778_476)

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY

_DEFAULT_LOCALE = "en_US"


@functools.lru_cache(maxsize=None)
def current_locale() -> str:
    """The user's locale as language_TERRITORY, defaulting to en_US."""
    for variable in ("LC_ALL", "LC_TIME", "LANG"):
        value = os.environ.get(variable, "")
        if value:
            break
    else:
        value = ""
    name = value.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    if not name or name in ("C", "POSIX"):
        return _DEFAULT_LOCALE
    return name


def _c_format(value: datetime) -> str:
    """Format like the C locale's %c, independent of the process locale."""
    return (
        f"{_DAY_NAMES[value.weekday()]} {_MONTH_NAMES[value.month - 1]} "
        f"{value.day:2d} {value:%H:%M:%S} {value.year}"
    )


def _rough_period(seconds: int) -> str:
    n = abs(seconds)
    if n > 547 * _DAY:
        return f"{max(n // _YEAR, 2)} years"
    if n > 345 * _DAY:
        return "a year"
    if n > 45 * _DAY:
        return f"{max(n // _MONTH, 2)} months"
    if n > 29 * _DAY:
        return "a month"
    if n > 10 * _DAY + 12 * _HOUR:
        return f"{max(n // _WEEK, 2)} weeks"
    if n > 6 * _DAY + 12 * _HOUR:
        return "a week"
    if n > 36 * _HOUR:
        return f"{max(n // _DAY, 2)} days"
    if n > 22 * _HOUR:
        return "a day"
    if n > 90 * _MINUTE:
        return f"{max(n // _HOUR, 2)} hours"
    if n > 45 * _MINUTE:
        return "an hour"
    if n > 90:
        return f"{max(n // _MINUTE, 2)} minutes"
    if n > 45:
        return "a minute"
    if n > 10:
        return f"{n} seconds"
    return "now"


def _humanize(delta: timedelta) -> str:
    seconds = int(delta.total_seconds())
    text = _rough_period(seconds)
    if text == "now":
        return text
    return f"{text} ago" if seconds < 0 else f"in {text}"


@functools.total_ordering
@dataclass(frozen=True)
class Date:
    """A local timestamp; value is None when the time cannot be represented."""

    value: Optional[datetime] = None

    @classmethod
    def from_timestamp(cls, timestamp: float) -> "Date":
        try:
            return cls(datetime.fromtimestamp(timestamp).astimezone())
        except (OverflowError, OSError, ValueError):
            return cls(None)

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Date":
        return cls.from_timestamp(st.st_mtime)

    def _key(self) -> Tuple[int, float]:
        if self.value is None:
            return (1, 0.0)
        return (0, self.value.timestamp())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def render(self, colors: PlainColors, flags: Flags) -> str:
        now = datetime.now().astimezone()
        if self.value is not None and self.value > now - timedelta(hours=1):
            elem = Elem.HOUR_OLD
        elif self.value is not None and self.value > now - timedelta(days=1):
            elem = Elem.DAY_OLD
        else:
            elem = Elem.OLDER
        return colors.colorize(self.date_string(flags), elem)

    def date_string(self, flags: Flags) -> str:
        value = self.value
        if value is None:
            return "-"
        if flags.date is DateFlag.DATE:
            return _c_format(value)
        if flags.date is DateFlag.LOCALE:
            return value.strftime("%c")
        if flags.date is DateFlag.RELATIVE:
            return _humanize(value - datetime.now().astimezone())
        if flags.date is DateFlag.ISO:
            if value > datetime.now().astimezone() - _HALF_YEAR:
                return value.strftime("%m-%d %H:%M")
            return value.strftime("%Y-%m-%d")
        return value.strftime(flags.date_format or "%c")
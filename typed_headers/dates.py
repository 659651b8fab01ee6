"""HTTP dates and the headers built on them: Date, Expires, Last-Modified and friends."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TypeVar, Union

from typed_headers.core import Header, HeaderError, just_one

_D = TypeVar("_D", bound="_DateHeader")

_U64_MAX = 2**64 - 1
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_LONG_DAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_DAY_ALT = "|".join(_DAYS)
_LONG_DAY_ALT = "|".join(_LONG_DAYS)
_MONTH_ALT = "|".join(_MONTHS)
_TIME = r"([0-9]{2}):([0-9]{2}):([0-9]{2})"

_IMF_FIXDATE = re.compile(
    rf"({_DAY_ALT}), ([0-9]{{2}}) ({_MONTH_ALT}) ([0-9]{{4}}) {_TIME} GMT", re.ASCII
)
_RFC850 = re.compile(
    rf"({_LONG_DAY_ALT}), ([0-9]{{2}})-({_MONTH_ALT})-([0-9]{{2}}) {_TIME} GMT",
    re.ASCII,
)
_ASCTIME = re.compile(
    rf"({_DAY_ALT}) ({_MONTH_ALT}) ([ 0-9][0-9]) {_TIME} ([0-9]{{4}})", re.ASCII
)
_SECONDS = re.compile(r"\+?[0-9]+", re.ASCII)


def _build(
    weekday: int, day: str, month: str, year: int, hour: str, minute: str, second: str
) -> datetime:
    try:
        when = datetime(
            year,
            _MONTHS.index(month) + 1,
            int(day.strip()),
            int(hour),
            int(minute),
            int(second),
            tzinfo=timezone.utc,
        )
    except ValueError:
        raise HeaderError() from None
    if year < 1970 or when.weekday() != weekday:
        raise HeaderError()
    return when


def parse_http_date(text: str) -> datetime:
    """Parse an HTTP date in IMF-fixdate, RFC 850 or asctime form, as UTC."""
    match = _IMF_FIXDATE.fullmatch(text)
    if match:
        wday, day, month, year, hour, minute, second = match.groups()
        return _build(_DAYS.index(wday), day, month, int(year), hour, minute, second)
    match = _RFC850.fullmatch(text)
    if match:
        wday, day, month, short_year, hour, minute, second = match.groups()
        year = int(short_year)
        year += 2000 if year < 70 else 1900
        return _build(_LONG_DAYS.index(wday), day, month, year, hour, minute, second)
    match = _ASCTIME.fullmatch(text)
    if match:
        wday, month, day, hour, minute, second, year = match.groups()
        return _build(_DAYS.index(wday), day, month, int(year), hour, minute, second)
    raise HeaderError()


def _normalize(when: datetime) -> datetime:
    """Convert to UTC at whole-second precision; naive values are taken as UTC."""
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc).replace(microsecond=0)


def format_http_date(when: datetime) -> str:
    """Format a moment as an IMF-fixdate, e.g. ``Sun, 06 Nov 1994 08:49:37 GMT``."""
    when = _normalize(when)
    return (
        f"{_DAYS[when.weekday()]}, {when.day:02d} {_MONTHS[when.month - 1]} "
        f"{when.year:04d} {when.hour:02d}:{when.minute:02d}:{when.second:02d} GMT"
    )


def parse_seconds(text: str) -> int:
    """Parse a non-negative decimal number of seconds."""
    if not _SECONDS.fullmatch(text):
        raise HeaderError()
    seconds = int(text)
    if seconds > _U64_MAX:
        raise HeaderError()
    return seconds


@dataclass(frozen=True, order=True)
class _DateHeader(Header):
    when: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "when", _normalize(self.when))

    @classmethod
    def decode(cls: type[_D], values: Iterable[str]) -> _D:
        return cls(parse_http_date(just_one(values)))

    def encode(self) -> list[str]:
        return [format_http_date(self.when)]


class Date(_DateHeader):
    """``Date`` header: when the message was originated."""

    name = "date"


class Expires(_DateHeader):
    """``Expires`` header: when the response becomes stale."""

    name = "expires"


class LastModified(_DateHeader):
    """``Last-Modified`` header: when the representation was last changed."""

    name = "last-modified"


class IfModifiedSince(_DateHeader):
    """``If-Modified-Since`` header."""

    name = "if-modified-since"

    def is_modified(self, last_modified: datetime) -> bool:
        """Whether a resource last modified at ``last_modified`` counts as modified."""
        return self.when < _normalize(last_modified)


class IfUnmodifiedSince(_DateHeader):
    """``If-Unmodified-Since`` header."""

    name = "if-unmodified-since"

    def precondition_passes(self, last_modified: datetime) -> bool:
        """Whether a resource last modified at ``last_modified`` passes."""
        return self.when >= _normalize(last_modified)


@dataclass(frozen=True)
class RetryAfter(Header):
    """``Retry-After`` header: either an HTTP date or a delay in seconds."""

    value: Union[datetime, int]

    name = "retry-after"

    def __post_init__(self) -> None:
        if isinstance(self.value, datetime):
            object.__setattr__(self, "value", _normalize(self.value))
        elif isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Retry-After holds a datetime or a number of seconds")
        elif not 0 <= self.value <= _U64_MAX:
            raise ValueError(f"delay out of range: {self.value}")

    @classmethod
    def date(cls, when: datetime) -> RetryAfter:
        """Retry after the given moment."""
        return cls(when)

    @classmethod
    def delay(cls, seconds: int | timedelta) -> RetryAfter:
        """Retry after a delay; fractions of a second are dropped."""
        if isinstance(seconds, timedelta):
            seconds = seconds // timedelta(seconds=1)
        return cls(seconds)

    @classmethod
    def decode(cls, values: Iterable[str]) -> RetryAfter:
        first = next(iter(values), None)
        if first is None:
            raise HeaderError()
        try:
            return cls(parse_seconds(first))
        except HeaderError:
            return cls(parse_http_date(first))

    def encode(self) -> list[str]:
        if isinstance(self.value, datetime):
            return [format_http_date(self.value)]
        return [str(self.value)]
# The MIT License (MIT)
#
# Copyright (c) The datetimekit developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why are all the value types in one file?
#   - Flat is better than nested
#   - It prevents circular imports since the classes 'know' about each other
# - Wall clock arithmetic (LocalDate, LocalTime, LocalDateTime) is always
#   done by pinning the value to the UTC zone, doing the arithmetic on
#   the instant axis, and reading the fields back. Carrying of seconds into
#   minutes, days into months, etc. thus happens in one place only.
# - Fixed offsets use our own calendar math, so they work for any year.
#   Named zones defer to ``zoneinfo`` for the offset, and are thus limited
#   to the years 1-9999.
from __future__ import annotations

import calendar
import enum
from abc import ABC, abstractmethod
from datetime import (
    datetime as _datetime,
    timedelta as _timedelta,
    timezone as _timezone,
    tzinfo as _tzinfo,
)
from math import isfinite
from struct import pack, unpack
from time import time_ns
from typing import (
    TYPE_CHECKING,
    ClassVar,
    Optional,
    Union,
    no_type_check,
    overload,
)
from zoneinfo import ZoneInfo

from ._common import (
    MAX_OFFSET_SECS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
    UTC,
    _ImmutableBase,
    mk_fixed_tzinfo,
)
from ._math import (
    add_months,
    civil_from_days,
    cycle,
    days_from_civil,
    days_in_month,
    days_in_year,
    fields_to_millis,
    is_leap,
    is_valid_date,
    millis_to_fields,
    seconds_to_millis,
)
from ._parse import offset_from_identifier, parse_datetime
from ._tz import find_abbreviation, find_tz, get_system_tz

__all__ = [
    # Date and time
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "DateTime",
    "Instant",
    # Zones and clocks
    "ZoneOffset",
    "Clock",
    "SystemClock",
    "FixedClock",
    # Spans and time units
    "Duration",
    "Period",
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    # Calendar helpers
    "Month",
    "DayOfWeek",
    "Year",
]

if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__
_EPOCH = _datetime(1970, 1, 1, tzinfo=UTC)
_GMT = _timezone(_timedelta(0), "GMT")
# zoneinfo (and datetime) can only represent these years
_MIN_NAMED_YEAR = 1
_MAX_NAMED_YEAR = 9999


class Month(enum.Enum):
    """The months of the year; ``.value`` is the month number (1-12).

    Arithmetic wraps around in both directions:

    >>> Month.DECEMBER + 2
    <Month.FEBRUARY: 2>
    >>> Month.JANUARY - 1
    <Month.DECEMBER: 12>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def plus(self, months: int, /) -> Month:
        return Month(cycle(self.value, months, 12))

    def minus(self, months: int, /) -> Month:
        return self.plus(-months)

    def __add__(self, other: int) -> Month:
        if not isinstance(other, int):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: int) -> Month:
        if not isinstance(other, int):
            return NotImplemented
        return self.minus(other)

    def number_of_days(self, year: int, /) -> int:
        """The number of days in this month, in the given year

        >>> Month.FEBRUARY.number_of_days(2000)
        29
        """
        return days_in_month(year, self.value)

    def display_name(self, locale: Optional[str] = None) -> str:
        """The full name of the month in the given locale
        (e.g. ``"de_DE.UTF-8"``), or in the current locale if none is given.

        >>> Month.MARCH.display_name()
        'March'

        Raises ``locale.Error`` if the locale is not available.
        """
        if locale is None:
            return calendar.month_name[self.value]
        return calendar.LocaleTextCalendar(locale=locale).formatmonthname(
            2001, self.value, 0, withyear=False
        )


class DayOfWeek(enum.Enum):
    """The days of the week; ``.value`` corresponds with ISO numbering."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def plus(self, days: int, /) -> DayOfWeek:
        return DayOfWeek(cycle(self.value, days, 7))

    def minus(self, days: int, /) -> DayOfWeek:
        return self.plus(-days)

    def __add__(self, other: int) -> DayOfWeek:
        if not isinstance(other, int):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: int) -> DayOfWeek:
        if not isinstance(other, int):
            return NotImplemented
        return self.minus(other)

    def display_name(self, locale: Optional[str] = None) -> str:
        """The full name of the day in the given locale,
        or in the current locale if none is given.

        >>> DayOfWeek.MONDAY.display_name()
        'Monday'
        """
        if locale is None:
            return calendar.day_name[self.value - 1]
        # The width must be large enough not to truncate the name
        return (
            calendar.LocaleTextCalendar(locale=locale)
            .formatweekday(self.value - 1, 100)
            .strip()
        )


@final
class Year(_ImmutableBase):
    """A year in the proleptic Gregorian calendar.
    Year zero and negative years are allowed.

    >>> Year(2000).is_leap()
    True
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def is_leap(self) -> bool:
        return is_leap(self._value)

    def number_of_days(self) -> int:
        return days_in_year(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Year({self._value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: Year) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: Year) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: Year) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: Year) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value


@final
class Duration(_ImmutableBase):
    """An exact span of time, in (fractional) seconds.

    Durations are independent of any calendar: a day is always
    86,400 seconds. Adding one to a date or time happens on the
    instant axis, so it observes changes in a zone's offset.

    Example
    -------
    >>> d = Duration(90)
    Duration(90.0)
    >>> d + minutes(1)
    Duration(150.0)

    Note
    ----
    A shorter way to create a duration is to use the helper functions
    :func:`~datetimekit.hours`, :func:`~datetimekit.minutes`, etc.
    """

    __slots__ = ("_secs",)

    ZERO: ClassVar[Duration]

    def __init__(self, seconds: float) -> None:
        if not isfinite(seconds):
            raise ValueError(f"Duration must be finite, got {seconds!r}")
        self._secs = float(seconds)

    @classmethod
    def between(cls, start: Instant, end: Instant, /) -> Duration:
        """The duration from ``start`` to ``end``.
        Negative if ``end`` is before ``start``."""
        return cls(end._secs - start._secs)

    @property
    def seconds(self) -> float:
        return self._secs

    def in_milliseconds(self) -> float:
        return self._secs * 1_000

    def in_minutes(self) -> float:
        return self._secs / SECONDS_PER_MINUTE

    def in_hours(self) -> float:
        return self._secs / SECONDS_PER_HOUR

    def py_timedelta(self) -> _timedelta:
        """Convert to a :class:`~datetime.timedelta`.
        Precision beyond microseconds is lost."""
        return _timedelta(seconds=self._secs)

    @classmethod
    def from_py_timedelta(cls, td: _timedelta, /) -> Duration:
        return cls(td.total_seconds())

    def plus(self, other: Duration, /) -> Duration:
        return Duration(self._secs + other._secs)

    def minus(self, other: Duration, /) -> Duration:
        return Duration(self._secs - other._secs)

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._secs + other._secs)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._secs - other._secs)

    def __mul__(self, other: float) -> Duration:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(self._secs * other)

    def __rmul__(self, other: float) -> Duration:
        return self * other

    def __neg__(self) -> Duration:
        return Duration(-self._secs)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return Duration(abs(self._secs))

    def __bool__(self) -> bool:
        """True if the duration is non-zero"""
        return bool(self._secs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._secs == other._secs

    def __hash__(self) -> int:
        return hash(self._secs)

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._secs < other._secs

    def __le__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._secs <= other._secs

    def __gt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._secs > other._secs

    def __ge__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._secs >= other._secs

    def __str__(self) -> str:
        return f"{self._secs} seconds"

    def __repr__(self) -> str:
        return f"Duration({self._secs})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_dur, (pack("<d", self._secs),)


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_dur(data: bytes) -> Duration:
    return Duration(*unpack("<d", data))


Duration.ZERO = Duration(0)


def milliseconds(i: float, /) -> Duration:
    """Create a :class:`Duration` with the given number of milliseconds.

    >>> milliseconds(1500) == Duration(1.5)
    True
    """
    return Duration(i / 1_000)


def seconds(i: float, /) -> Duration:
    return Duration(i)


def minutes(i: float, /) -> Duration:
    return Duration(i * SECONDS_PER_MINUTE)


def hours(i: float, /) -> Duration:
    """Create a :class:`Duration` with the given number of hours.

    >>> hours(1) == minutes(60)
    True
    """
    return Duration(i * SECONDS_PER_HOUR)


def days(i: float, /) -> Duration:
    """Create a :class:`Duration` of the given number of 24-hour days.

    Use :class:`Period` for calendar days instead.
    """
    return Duration(i * SECONDS_PER_DAY)


def weeks(i: float, /) -> Duration:
    return Duration(i * SECONDS_PER_WEEK)


@final
class Period(_ImmutableBase):
    """A calendar span of years, months, and days.

    The components are kept separately and never normalized:
    ``Period(1, 14)`` is not equal to ``Period(2, 2)``.
    There is no ordering, since the length of "one month"
    depends on the date it's applied to.

    Example
    -------
    >>> p = Period(years=1, days=3)
    Period(1, 0, 3)
    >>> str(-p)
    '-1 year, -3 days'
    >>> LocalDate(2011, 2, 26) + Period(days=4)
    LocalDate(2011-03-02)
    """

    __slots__ = ("_years", "_months", "_days")

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        self._years = years
        self._months = months
        self._days = days

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    def plus(self, other: Period, /) -> Period:
        return Period(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
        )

    def minus(self, other: Period, /) -> Period:
        return self.plus(-other)

    def __add__(self, other: Period) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Period) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Period:
        return Period(-self._years, -self._months, -self._days)

    def __pos__(self) -> Period:
        return self

    def __bool__(self) -> bool:
        """True if any component is non-zero"""
        return bool(self._years or self._months or self._days)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (self._years, self._months, self._days) == (
            other._years,
            other._months,
            other._days,
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __str__(self) -> str:
        """A readable description, e.g. ``"1 year, 2 months"``.
        Zero components are left out."""
        parts = [
            f"{n} {unit}{'s' * (abs(n) != 1)}"
            for n, unit in (
                (self._years, "year"),
                (self._months, "month"),
                (self._days, "day"),
            )
            if n
        ]
        return ", ".join(parts) or "empty period"

    def __repr__(self) -> str:
        return f"Period({self._years}, {self._months}, {self._days})"


def years(i: int, /) -> Period:
    return Period(years=i)


def months(i: int, /) -> Period:
    return Period(months=i)


def _format_offset(secs: int) -> str:
    if secs == 0:
        return "Z"
    hrs, rest = divmod(abs(secs), SECONDS_PER_HOUR)
    mins, secs_only = divmod(rest, SECONDS_PER_MINUTE)
    return (
        f"{'-' if secs < 0 else '+'}{hrs:02}:{mins:02}"
        + f":{secs_only:02}" * bool(secs_only)
    )


def _offset_secs(td: Optional[_timedelta]) -> int:
    if td is None:
        raise ValueError("Zone has no UTC offset")
    return int(td.total_seconds())


@final
class ZoneOffset(_ImmutableBase):
    """A zone: either a fixed offset from UTC, or a named zone
    from the IANA database whose offset varies over time.

    Accepted identifiers are:

    - ``"Z"``, for UTC
    - an IANA zone name, like ``"Europe/Paris"``
    - a common abbreviation, like ``"EST"``
    - a fixed offset ``±hh:mm`` or ``±hh:mm:ss``, up to 18 hours

    Example
    -------
    >>> ZoneOffset("+05:30")
    ZoneOffset(+05:30)
    >>> ZoneOffset("Australia/Sydney")
    ZoneOffset(Australia/Sydney)
    >>> ZoneOffset("+aa:bb")
    Traceback (most recent call last):
      ...
    MalformedZoneIdentifier: Invalid input: "+aa:bb". Zone identifier is not in expected format

    Note
    ----
    Equality only considers the underlying ``tzinfo``.
    Since fixed offsets are stored with whole-minute precision,
    ``ZoneOffset("+01:00:15") == ZoneOffset("+01:00")``.
    The remaining seconds (the *fudge*) are still used for
    conversions and rendering.
    """

    __slots__ = ("_tz", "_fudge", "_key")

    def __init__(self, identifier: str) -> None:
        if identifier == "Z":
            self._tz, self._fudge, self._key = UTC, 0, None
        elif tz := find_tz(identifier) or find_abbreviation(identifier):
            self._tz, self._fudge, self._key = tz, 0, tz.key
        else:
            self._tz, self._fudge = _fixed_tz(
                offset_from_identifier(identifier)
            )
            self._key = None

    @classmethod
    def parse(cls, identifier: str, /) -> ZoneOffset:
        """Alias for the constructor"""
        return cls(identifier)

    @classmethod
    def utc(cls) -> ZoneOffset:
        return cls._from_tz_unchecked(UTC, 0)

    @classmethod
    def gmt(cls) -> ZoneOffset:
        """Zero offset, but named GMT. Equal to :meth:`utc`."""
        return cls._from_tz_unchecked(_GMT, 0)

    @classmethod
    def system_default(cls) -> ZoneOffset:
        """The zone of the system, as determined by the ``TZ`` environment
        variable or the operating system settings.

        The result is cached. Use :func:`~datetimekit.reset_system_tz`
        to refresh it after changing the settings.
        """
        return cls.from_tzinfo(get_system_tz())

    @classmethod
    def from_tzinfo(cls, tz: _tzinfo, /) -> ZoneOffset:
        """Wrap an existing :class:`~datetime.tzinfo`, for example
        a :class:`~zoneinfo.ZoneInfo` or :class:`~datetime.timezone`.
        Its offset is used as-is, without any correction."""
        if not isinstance(tz, _tzinfo):
            raise TypeError(f"Expected tzinfo, got {type(tz)!r}")
        return cls._from_tz_unchecked(tz, 0)

    @classmethod
    def from_seconds(cls, secs: int, /) -> ZoneOffset:
        """A fixed offset of the given number of seconds (at most 18 hours)

        >>> ZoneOffset.from_seconds(-3615)
        ZoneOffset(-01:00:15)
        """
        if abs(secs) > MAX_OFFSET_SECS:
            raise ValueError("Offset must be within +/- 18 hours")
        return cls._from_tz_unchecked(*_fixed_tz(secs))

    @property
    def key(self) -> Optional[str]:
        """The IANA key of a named zone, None for fixed offsets"""
        return self._key

    @property
    def fudge(self) -> int:
        """Seconds of the offset that the ``tzinfo`` couldn't store"""
        return self._fudge

    def tzinfo(self) -> _tzinfo:
        return self._tz

    def is_fixed(self) -> bool:
        return isinstance(self._tz, _timezone)

    def offset_at(self, instant: Instant, /) -> Duration:
        """The offset from UTC in effect at the given instant"""
        return Duration(self._offset_for_instant(instant._secs))

    def zone_identifier(self, at: Optional[Instant] = None) -> str:
        """The offset as ``Z``, ``±hh:mm``, or ``±hh:mm:ss``.
        Seconds are only included if they are non-zero.

        For named zones, the offset at ``at`` is used (default: now).

        >>> ZoneOffset("+00:00:00").zone_identifier()
        'Z'
        >>> ZoneOffset("+04:04:00").zone_identifier()
        '+04:04'
        """
        if self.is_fixed():
            secs = _offset_secs(self._tz.utcoffset(None)) + self._fudge
        else:
            secs = self._offset_for_instant(
                (at or Instant.now())._secs
            )
        return _format_offset(secs)

    def display_name(self, locale: Optional[str] = None) -> str:
        """The name of the zone in standard time (e.g. ``"AEST"``),
        or the identifier if the offset has second-level precision.

        >>> ZoneOffset("+10:00").display_name()
        'UTC+10:00'
        >>> ZoneOffset("+10:00:30").display_name()
        '+10:00:30'

        The ``locale`` is accepted for symmetry with
        :meth:`Month.display_name`, but has no effect: the zone database
        only provides the (English) abbreviations.
        """
        if self._fudge:
            return self.zone_identifier()
        tz = self._tz
        if self.is_fixed():
            return tz.tzname(None) or self.zone_identifier()
        # The month without daylight saving differs per hemisphere
        for month in (1, 7):
            probe = _datetime(2001, month, 1, tzinfo=tz)
            if not probe.dst():
                break
        return probe.tzname() or str(self)

    def _offset_for_instant(self, secs: float) -> int:
        tz = self._tz
        if isinstance(tz, _timezone):
            return _offset_secs(tz.utcoffset(None)) + self._fudge
        try:
            return _offset_secs(
                (_EPOCH + _timedelta(seconds=secs)).astimezone(tz).utcoffset()
            )
        except (OverflowError, ValueError):
            raise ValueError("Instant out of range") from None

    def _offset_for_local(self, date: LocalDate, time: LocalTime) -> int:
        tz = self._tz
        if isinstance(tz, _timezone):
            return _offset_secs(tz.utcoffset(None)) + self._fudge
        if not self._covers_year(date._year):
            raise ValueError("Instant out of range")
        # fold=0: in a repeated hour, the first occurrence is taken
        return _offset_secs(
            _datetime(
                date._year,
                date._month,
                date._day,
                time._hour,
                time._minute,
                time._second,
                tzinfo=tz,
            ).utcoffset()
        )

    def _covers_year(self, year: int) -> bool:
        return (
            isinstance(self._tz, _timezone)
            or _MIN_NAMED_YEAR <= year <= _MAX_NAMED_YEAR
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._tz == other._tz

    def __hash__(self) -> int:
        return hash(self._tz)

    def __str__(self) -> str:
        """The key of named zones, the identifier of fixed offsets"""
        return self._key or self.zone_identifier()

    def __repr__(self) -> str:
        return f"ZoneOffset({self})"

    @classmethod
    def _from_tz_unchecked(cls, tz: _tzinfo, fudge: int) -> ZoneOffset:
        self = _object_new(cls)
        self._tz = tz
        self._fudge = fudge
        self._key = tz.key if isinstance(tz, ZoneInfo) else None
        return self


def _fixed_tz(secs: int) -> tuple[_timezone, int]:
    # The tzinfo is kept at whole minutes, the precision of
    # ``%z``, RFC 2822, and most other consumers of tzinfo objects.
    # We measure what it actually stored, and keep the difference.
    tz = mk_fixed_tzinfo(int(secs / SECONDS_PER_MINUTE) * SECONDS_PER_MINUTE)
    return tz, secs - _offset_secs(tz.utcoffset(None))


@final
class Instant(_ImmutableBase):
    """A point on the timeline, as seconds since the Unix epoch
    (1970-01-01 00:00:00 UTC). Leap seconds are not counted.

    Example
    -------
    >>> Instant(1_000_000_000)
    Instant(2001-09-09 01:46:40Z)
    >>> Instant(10) - Instant(4)
    Duration(6.0)
    """

    __slots__ = ("_secs",)

    def __init__(self, seconds: float) -> None:
        if not isfinite(seconds):
            raise ValueError(f"Instant must be finite, got {seconds!r}")
        self._secs = float(seconds)

    @classmethod
    def from_millis(cls, ms: float, /) -> Instant:
        return cls(ms / 1_000)

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> Instant:
        """The current instant, according to the clock
        (by default, the system clock)"""
        return (clock or SystemClock()).instant()

    @classmethod
    def from_py_datetime(cls, d: _datetime, /) -> Instant:
        """Create from an aware standard library ``datetime``.

        The inverse of the ``py_datetime()`` method.
        """
        if d.tzinfo is None or d.utcoffset() is None:
            raise ValueError("Cannot create Instant from a naive datetime")
        return cls((d - _EPOCH).total_seconds())

    @property
    def seconds(self) -> float:
        return self._secs

    @property
    def millis(self) -> float:
        return self._secs * 1_000

    def py_datetime(self) -> _datetime:
        """Convert to a standard library ``datetime`` in UTC.
        Precision beyond microseconds is lost."""
        try:
            return _EPOCH + _timedelta(seconds=self._secs)
        except OverflowError:
            raise ValueError("Instant out of range") from None

    def plus(self, d: Duration, /) -> Instant:
        return Instant(self._secs + d._secs)

    @overload
    def minus(self, other: Instant, /) -> Duration: ...

    @overload
    def minus(self, other: Duration, /) -> Instant: ...

    def minus(
        self, other: Union[Instant, Duration], /
    ) -> Union[Duration, Instant]:
        """Subtract a duration, or get the duration between two instants.
        ``a.minus(b)`` is positive if ``a`` is later than ``b``."""
        if isinstance(other, Instant):
            return Duration(self._secs - other._secs)
        return Instant(self._secs - other._secs)

    def __add__(self, other: Duration) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    def __sub__(
        self, other: Union[Instant, Duration]
    ) -> Union[Duration, Instant]:
        if not isinstance(other, (Instant, Duration)):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._secs == other._secs

    def __hash__(self) -> int:
        return hash(self._secs)

    def __lt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._secs < other._secs

    def __le__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._secs <= other._secs

    def __gt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._secs > other._secs

    def __ge__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._secs >= other._secs

    def __str__(self) -> str:
        date, time = _split_millis(seconds_to_millis(self._secs))
        return f"{date} {time}Z"

    def __repr__(self) -> str:
        return f"Instant({self})"

    @no_type_check
    def __reduce__(self):
        return _unpkl_inst, (pack("<d", self._secs),)


@no_type_check
def _unpkl_inst(data: bytes) -> Instant:
    return Instant(*unpack("<d", data))


class Clock(ABC):
    """A source of the current instant and zone.

    Pass one to the ``now()`` methods to control what "now" is,
    for example a :class:`FixedClock` in tests.
    """

    __slots__ = ()

    @abstractmethod
    def instant(self) -> Instant:
        """The current instant"""

    @abstractmethod
    def offset(self) -> ZoneOffset:
        """The zone in which the current instant is observed"""


@final
class SystemClock(Clock):
    """The real time of the system, observed in the given zone.
    Without a zone, the system zone is used."""

    __slots__ = ("_zone",)

    def __init__(self, zone: Optional[ZoneOffset] = None) -> None:
        self._zone = zone

    def instant(self) -> Instant:
        return Instant(time_ns() / 1_000_000_000)

    def offset(self) -> ZoneOffset:
        return self._zone or ZoneOffset.system_default()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemClock):
            return NotImplemented
        return self._zone == other._zone

    def __hash__(self) -> int:
        return hash(self._zone)

    def __repr__(self) -> str:
        return f"SystemClock({self._zone!r})"


@final
class FixedClock(Clock):
    """A clock that is stopped at the given instant.

    >>> clock = FixedClock(Instant(0), ZoneOffset("+02:00"))
    >>> LocalTime.now(clock)
    LocalTime(02:00:00)
    """

    __slots__ = ("_instant", "_zone")

    def __init__(self, instant: Instant, zone: ZoneOffset) -> None:
        self._instant = instant
        self._zone = zone

    def instant(self) -> Instant:
        return self._instant

    def offset(self) -> ZoneOffset:
        return self._zone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedClock):
            return NotImplemented
        return (self._instant, self._zone) == (other._instant, other._zone)

    def __hash__(self) -> int:
        return hash((self._instant, self._zone))

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r}, {self._zone!r})"


@final
class LocalDate(_ImmutableBase):
    """A date without a time or zone, in the proleptic Gregorian calendar.

    Example
    -------
    >>> d = LocalDate(2021, 1, 2)
    LocalDate(2021-01-02)
    >>> d + hours(48)
    LocalDate(2021-01-04)
    >>> LocalDate(2011, 1, 31) + months(1)
    LocalDate(2011-03-03)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        if not 1 <= month <= 12:
            raise ValueError(f"month must be in 1..12, got {month}")
        if not 1 <= day <= days_in_month(year, month):
            raise ValueError(f"day is out of range for month: {day}")
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> LocalDate:
        """Today's date, according to the clock's instant and zone"""
        return DateTime.now(clock).date()

    @classmethod
    def from_instant(cls, instant: Instant, zone: ZoneOffset, /) -> LocalDate:
        return DateTime.from_instant(instant, zone).date()

    @classmethod
    def strptime(
        cls, s: str, fmt: str, /, zone: Optional[ZoneOffset] = None
    ) -> LocalDate:
        """Parse a date with a :meth:`~datetime.datetime.strptime` format.

        See :meth:`DateTime.strptime` for how offsets in the input
        are handled.
        """
        return DateTime.strptime(s, fmt, zone).date()

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def month_enum(self) -> Month:
        return Month(self._month)

    def day_of_week(self) -> DayOfWeek:
        """The day of the week

        >>> LocalDate(2021, 1, 2).day_of_week()
        <DayOfWeek.SATURDAY: 6>
        """
        # 1970-01-01 was a Thursday
        return DayOfWeek((self._days() + 3) % 7 + 1)

    def at(self, t: LocalTime, /) -> LocalDateTime:
        """Combine a date with a time

        >>> LocalDate(2021, 1, 2).at(LocalTime(12, 30))
        LocalDateTime(2021-01-02 12:30:00)
        """
        return LocalDateTime._from_parts(self, t)

    def plus(self, delta: Union[Duration, Period], /) -> LocalDate:
        """Add a duration or period.

        A duration is added on the instant axis, starting at midnight.
        A period adds the years and months first, then counts the days
        on from the same day of the resulting month. An overflowing day
        spills into the next month rather than being clamped:

        >>> LocalDate(2011, 2, 26).plus(Period(days=4))
        LocalDate(2011-03-02)
        """
        if isinstance(delta, Period):
            year, month = add_months(
                self._year, self._month, 12 * delta._years + delta._months
            )
            return LocalDate._from_days(
                days_from_civil(year, month, 1) + self._day - 1 + delta._days
            )
        return (_pin(self, _MIDNIGHT) + delta).date()

    def minus(self, delta: Union[Duration, Period], /) -> LocalDate:
        return self.plus(-delta)

    def __add__(self, other: Union[Duration, Period]) -> LocalDate:
        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Union[Duration, Period]) -> LocalDate:
        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._tuple() == other._tuple()

    def __hash__(self) -> int:
        return hash(self._tuple())

    def __lt__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._tuple() < other._tuple()

    def __le__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._tuple() <= other._tuple()

    def __gt__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._tuple() > other._tuple()

    def __ge__(self, other: LocalDate) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._tuple() >= other._tuple()

    def __str__(self) -> str:
        return f"{self._year}-{self._month:02}-{self._day:02}"

    def __repr__(self) -> str:
        return f"LocalDate({self})"

    def _tuple(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def _days(self) -> int:
        return days_from_civil(self._year, self._month, self._day)

    @classmethod
    def _from_days(cls, days: int) -> LocalDate:
        return cls._unchecked(*civil_from_days(days))

    @classmethod
    def _unchecked(cls, year: int, month: int, day: int) -> LocalDate:
        self = _object_new(cls)
        self._year = year
        self._month = month
        self._day = day
        return self

    @no_type_check
    def __reduce__(self):
        return _unpkl_date, (pack("<qBB", *self._tuple()),)


@no_type_check
def _unpkl_date(data: bytes) -> LocalDate:
    return LocalDate(*unpack("<qBB", data))


@final
class LocalTime(_ImmutableBase):
    """A time of day without a date or zone, with millisecond precision.

    Arithmetic wraps around midnight.

    Example
    -------
    >>> t = LocalTime(hour=12, minute=30)
    LocalTime(12:30:00)
    >>> t + hours(12) + milliseconds(13)
    LocalTime(00:30:00.013)
    """

    __slots__ = ("_hour", "_minute", "_second", "_millisecond")

    MIDNIGHT: ClassVar[LocalTime]

    def __init__(
        self, hour: int, minute: int, second: int = 0, millisecond: int = 0
    ) -> None:
        if not 0 <= hour < 24:
            raise ValueError(f"hour must be in 0..23, got {hour}")
        if not 0 <= minute < 60:
            raise ValueError(f"minute must be in 0..59, got {minute}")
        if not 0 <= second < 60:
            raise ValueError(f"second must be in 0..59, got {second}")
        if not 0 <= millisecond < 1_000:
            raise ValueError(
                f"millisecond must be in 0..999, got {millisecond}"
            )
        self._hour = hour
        self._minute = minute
        self._second = second
        self._millisecond = millisecond

    @classmethod
    def midnight(cls) -> LocalTime:
        return cls.MIDNIGHT

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> LocalTime:
        return DateTime.now(clock).time()

    @classmethod
    def from_instant(cls, instant: Instant, zone: ZoneOffset, /) -> LocalTime:
        return DateTime.from_instant(instant, zone).time()

    @classmethod
    def strptime(
        cls, s: str, fmt: str, /, zone: Optional[ZoneOffset] = None
    ) -> LocalTime:
        return DateTime.strptime(s, fmt, zone).time()

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def millisecond(self) -> int:
        return self._millisecond

    def on(self, d: LocalDate, /) -> LocalDateTime:
        """Combine a time with a date

        >>> LocalTime(12, 30).on(LocalDate(2021, 1, 2))
        LocalDateTime(2021-01-02 12:30:00)
        """
        return LocalDateTime._from_parts(d, self)

    def plus(self, d: Duration, /) -> LocalTime:
        if not isinstance(d, Duration):
            raise TypeError(f"Expected Duration, got {type(d)!r}")
        return (_pin(_SOME_DATE, self) + d).time()

    def minus(self, d: Duration, /) -> LocalTime:
        return self.plus(-d)

    def __add__(self, other: Duration) -> LocalTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Duration) -> LocalTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._tuple() == other._tuple()

    def __hash__(self) -> int:
        return hash(self._tuple())

    def __lt__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._tuple() < other._tuple()

    def __le__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._tuple() <= other._tuple()

    def __gt__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._tuple() > other._tuple()

    def __ge__(self, other: LocalTime) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._tuple() >= other._tuple()

    def __str__(self) -> str:
        return (
            f"{self._hour:02}:{self._minute:02}:{self._second:02}"
            + f".{self._millisecond:03}" * bool(self._millisecond)
        )

    def __repr__(self) -> str:
        return f"LocalTime({self})"

    def _tuple(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._millisecond)

    @classmethod
    def _unchecked(
        cls, hour: int, minute: int, second: int, millisecond: int
    ) -> LocalTime:
        self = _object_new(cls)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._millisecond = millisecond
        return self

    @no_type_check
    def __reduce__(self):
        return _unpkl_time, (pack("<BBBH", *self._tuple()),)


@no_type_check
def _unpkl_time(data: bytes) -> LocalTime:
    return LocalTime(*unpack("<BBBH", data))


LocalTime.MIDNIGHT = LocalTime(0, 0)


def _is_valid_time(
    hour: int, minute: int, second: int, millisecond: int
) -> bool:
    return (
        0 <= hour < 24
        and 0 <= minute < 60
        and 0 <= second < 60
        and 0 <= millisecond < 1_000
    )


@final
class LocalDateTime(_ImmutableBase):
    """A date and time without a zone.

    Example
    -------
    >>> dt = LocalDateTime(2000, 5, 6, 10, 11, 12)
    LocalDateTime(2000-05-06 10:11:12)
    >>> dt.assume_zone(ZoneOffset("+02:00")).instant()
    Instant(2000-05-06 08:11:12Z)
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        self._date = LocalDate(year, month, day)
        self._time = LocalTime(hour, minute, second, millisecond)

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> LocalDateTime:
        return DateTime.now(clock).local()

    @classmethod
    def from_instant(
        cls, instant: Instant, zone: ZoneOffset, /
    ) -> LocalDateTime:
        return DateTime.from_instant(instant, zone).local()

    @classmethod
    def strptime(
        cls, s: str, fmt: str, /, zone: Optional[ZoneOffset] = None
    ) -> LocalDateTime:
        return DateTime.strptime(s, fmt, zone).local()

    @property
    def year(self) -> int:
        return self._date._year

    @property
    def month(self) -> int:
        return self._date._month

    @property
    def day(self) -> int:
        return self._date._day

    @property
    def hour(self) -> int:
        return self._time._hour

    @property
    def minute(self) -> int:
        return self._time._minute

    @property
    def second(self) -> int:
        return self._time._second

    @property
    def millisecond(self) -> int:
        return self._time._millisecond

    def date(self) -> LocalDate:
        return self._date

    def time(self) -> LocalTime:
        return self._time

    def assume_zone(self, zone: ZoneOffset, /) -> DateTime:
        """Pin the date and time to a zone

        >>> LocalDateTime(2000, 5, 6, 10).assume_zone(ZoneOffset("Z"))
        DateTime(2000-05-06 10:00:00Z)
        """
        return DateTime._from_local(self._date, self._time, zone)

    def plus(self, delta: Union[Duration, Period], /) -> LocalDateTime:
        """Add a duration or period. A period only affects the date."""
        if isinstance(delta, Period):
            return LocalDateTime._from_parts(
                self._date.plus(delta), self._time
            )
        return (_pin(self._date, self._time) + delta).local()

    def minus(self, delta: Union[Duration, Period], /) -> LocalDateTime:
        return self.plus(-delta)

    def __add__(self, other: Union[Duration, Period]) -> LocalDateTime:
        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Union[Duration, Period]) -> LocalDateTime:
        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(-other)

    def with_year(self, year: int, /) -> LocalDateTime:
        """A copy with the year replaced, or this value unchanged
        if the result would be invalid (i.e. February 29th)"""
        return self._replaced(year=year) or self

    def with_month(self, month: int, /) -> LocalDateTime:
        return self._replaced(month=month) or self

    def with_day(self, day: int, /) -> LocalDateTime:
        return self._replaced(day=day) or self

    def with_hour(self, hour: int, /) -> LocalDateTime:
        return self._replaced(hour=hour) or self

    def with_minute(self, minute: int, /) -> LocalDateTime:
        return self._replaced(minute=minute) or self

    def with_second(self, second: int, /) -> LocalDateTime:
        return self._replaced(second=second) or self

    def with_millisecond(self, millisecond: int, /) -> LocalDateTime:
        return self._replaced(millisecond=millisecond) or self

    def _replaced(self, **kwargs: int) -> Optional[LocalDateTime]:
        fields = {
            "year": self._date._year,
            "month": self._date._month,
            "day": self._date._day,
            "hour": self._time._hour,
            "minute": self._time._minute,
            "second": self._time._second,
            "millisecond": self._time._millisecond,
        }
        fields.update(kwargs)
        if not (
            is_valid_date(fields["year"], fields["month"], fields["day"])
            and _is_valid_time(
                fields["hour"],
                fields["minute"],
                fields["second"],
                fields["millisecond"],
            )
        ):
            return None
        return LocalDateTime(**fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._tuple() == other._tuple()

    def __hash__(self) -> int:
        return hash(self._tuple())

    def __lt__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._tuple() < other._tuple()

    def __le__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._tuple() <= other._tuple()

    def __gt__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._tuple() > other._tuple()

    def __ge__(self, other: LocalDateTime) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._tuple() >= other._tuple()

    def __str__(self) -> str:
        return f"{self._date} {self._time}"

    def __repr__(self) -> str:
        return f"LocalDateTime({self})"

    def _tuple(self) -> tuple[int, ...]:
        return self._date._tuple() + self._time._tuple()

    @classmethod
    def _from_parts(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        self = _object_new(cls)
        self._date = date
        self._time = time
        return self


@final
class DateTime(_ImmutableBase):
    """A date and time in a specific zone.

    This is the bridge between instants and wall clock fields.

    Example
    -------
    >>> sydney = ZoneOffset("Australia/Sydney")
    >>> d = DateTime(2012, 7, 1, 12, 34, 56, zone=sydney)
    DateTime(2012-07-01 12:34:56+10:00[Australia/Sydney])
    >>> d.in_zone(ZoneOffset("Europe/Paris"))
    DateTime(2012-07-01 04:34:56+02:00[Europe/Paris])

    Important
    ---------
    Equality and ordering mean different things:
    ``==`` compares the date, time, *and* zone,
    while ``<``, ``>`` etc. compare the instants.
    Two values at the same moment in different zones are thus not equal,
    even though neither is before the other.
    Use :meth:`same_instant` to compare the moments only.
    """

    __slots__ = ("_date", "_time", "_zone", "_secs")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        zone: ZoneOffset,
    ) -> None:
        self._init_local(
            LocalDate(year, month, day),
            LocalTime(hour, minute, second, millisecond),
            zone,
        )

    @classmethod
    def from_instant(cls, instant: Instant, zone: ZoneOffset, /) -> DateTime:
        """The date and time in the zone at the given instant

        >>> DateTime.from_instant(Instant(0), ZoneOffset("+01:00"))
        DateTime(1970-01-01 01:00:00+01:00)
        """
        secs = instant._secs
        self = _object_new(cls)
        self._date, self._time = _split_millis(
            seconds_to_millis(secs) + zone._offset_for_instant(secs) * 1_000
        )
        self._zone = zone
        self._secs = secs
        return self

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> DateTime:
        """The current date and time in the clock's zone
        (by default, the system clock and zone)"""
        clock = clock or SystemClock()
        return cls.from_instant(clock.instant(), clock.offset())

    @classmethod
    def strptime(
        cls, s: str, fmt: str, /, zone: Optional[ZoneOffset] = None
    ) -> DateTime:
        """Parse with a :meth:`~datetime.datetime.strptime` format,
        and express the result in the given zone (default: the system zone).

        If the input contains an offset (``%z``), it determines the instant,
        which is then converted to the zone. Otherwise, the input is
        read as a time in the zone.

        >>> DateTime.strptime(
        ...     "2012-12-25 12:34:56.789+10:00",
        ...     "%Y-%m-%d %H:%M:%S.%f%z",
        ...     zone=ZoneOffset("+03:00"),
        ... )
        DateTime(2012-12-25 05:34:56.789+03:00)

        Raises :class:`~datetimekit.UnableToParseDate` if the
        string doesn't match the format.
        """
        if zone is None:
            zone = ZoneOffset.system_default()
        parsed = parse_datetime(s, fmt)
        if parsed.tzinfo is None:
            return cls._from_local(
                LocalDate(parsed.year, parsed.month, parsed.day),
                LocalTime(
                    parsed.hour,
                    parsed.minute,
                    parsed.second,
                    parsed.microsecond // 1_000,
                ),
                zone,
            )
        return cls.from_instant(Instant.from_py_datetime(parsed), zone)

    @property
    def zone(self) -> ZoneOffset:
        return self._zone

    @property
    def year(self) -> int:
        return self._date._year

    @property
    def month(self) -> int:
        return self._date._month

    @property
    def day(self) -> int:
        return self._date._day

    @property
    def hour(self) -> int:
        return self._time._hour

    @property
    def minute(self) -> int:
        return self._time._minute

    @property
    def second(self) -> int:
        return self._time._second

    @property
    def millisecond(self) -> int:
        return self._time._millisecond

    def instant(self) -> Instant:
        return Instant(self._secs)

    def local(self) -> LocalDateTime:
        return LocalDateTime._from_parts(self._date, self._time)

    def date(self) -> LocalDate:
        return self._date

    def time(self) -> LocalTime:
        return self._time

    def in_zone(self, zone: ZoneOffset, /) -> DateTime:
        """The same instant, expressed in another zone"""
        return DateTime.from_instant(self.instant(), zone)

    def same_instant(self, other: DateTime, /) -> bool:
        """Whether both represent the same moment, regardless of zone

        >>> a = DateTime(2020, 1, 1, 12, zone=ZoneOffset("+01:00"))
        >>> b = DateTime(2020, 1, 1, 11, zone=ZoneOffset("Z"))
        >>> a == b
        False
        >>> a.same_instant(b)
        True
        """
        return self._secs == other._secs

    def plus(self, delta: Union[Duration, Period], /) -> DateTime:
        """Add a duration or period.

        A duration is exact: it's added to the instant, so the
        wall clock may jump if the zone's offset changes in between.
        A period only changes the date; the time and zone stay the same.
        """
        if isinstance(delta, Period):
            return DateTime._from_local(
                self._date.plus(delta), self._time, self._zone
            )
        return DateTime.from_instant(
            Instant(self._secs + delta._secs), self._zone
        )

    def minus(self, delta: Union[Duration, Period], /) -> DateTime:
        return self.plus(-delta)

    def __add__(self, other: Union[Duration, Period]) -> DateTime:
        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(other)

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    @overload
    def __sub__(self, other: Union[Duration, Period]) -> DateTime: ...

    def __sub__(
        self, other: Union[DateTime, Duration, Period]
    ) -> Union[Duration, DateTime]:
        """Subtract a duration or period, or get the exact
        duration between two values"""
        if isinstance(other, DateTime):
            return Duration(self._secs - other._secs)
        elif isinstance(other, (Duration, Period)):
            return self.plus(-other)
        return NotImplemented

    def with_year(self, year: int, /) -> DateTime:
        """A copy with the year replaced, or this value unchanged
        if the result would be invalid"""
        return self._with(year=year)

    def with_month(self, month: int, /) -> DateTime:
        return self._with(month=month)

    def with_day(self, day: int, /) -> DateTime:
        return self._with(day=day)

    def with_hour(self, hour: int, /) -> DateTime:
        return self._with(hour=hour)

    def with_minute(self, minute: int, /) -> DateTime:
        return self._with(minute=minute)

    def with_second(self, second: int, /) -> DateTime:
        return self._with(second=second)

    def with_millisecond(self, millisecond: int, /) -> DateTime:
        return self._with(millisecond=millisecond)

    def _with(self, **kwargs: int) -> DateTime:
        local = self.local()._replaced(**kwargs)
        if local is None or not self._zone._covers_year(local._date._year):
            return self
        return DateTime._from_local(local._date, local._time, self._zone)

    def strftime(self, fmt: str, /) -> str:
        """Format with :meth:`~datetime.datetime.strftime`"""
        return self.py_datetime().strftime(fmt)

    def py_datetime(self) -> _datetime:
        """Convert to an aware standard library ``datetime``.

        Fixed offsets with second precision get a ``tzinfo``
        carrying the exact offset.
        """
        zone = self._zone
        tz = (
            mk_fixed_tzinfo(zone._offset_for_instant(self._secs))
            if zone._fudge
            else zone._tz
        )
        return _datetime(
            self._date._year,
            self._date._month,
            self._date._day,
            self._time._hour,
            self._time._minute,
            self._time._second,
            self._time._millisecond * 1_000,
            tzinfo=tz,
        )

    def __eq__(self, other: object) -> bool:
        """Equal if the date, time, and zone are all equal.

        Note that this is stricter than :meth:`same_instant`.
        """
        if not isinstance(other, DateTime):
            return NotImplemented
        return (self._date, self._time, self._zone) == (
            other._date,
            other._time,
            other._zone,
        )

    def __hash__(self) -> int:
        return hash((self._date, self._time, self._zone))

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._secs < other._secs

    def __le__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._secs <= other._secs

    def __gt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._secs > other._secs

    def __ge__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._secs >= other._secs

    def __str__(self) -> str:
        zone = self._zone
        return (
            f"{self._date} {self._time}"
            + _format_offset(zone._offset_for_instant(self._secs))
            + f"[{zone._key}]" * bool(zone._key)
        )

    def __repr__(self) -> str:
        return f"DateTime({self})"

    @classmethod
    def _from_local(
        cls, date: LocalDate, time: LocalTime, zone: ZoneOffset
    ) -> DateTime:
        self = _object_new(cls)
        self._init_local(date, time, zone)
        return self

    def _init_local(
        self, date: LocalDate, time: LocalTime, zone: ZoneOffset
    ) -> None:
        secs = _instant_secs(date, time, zone)
        if not zone.is_fixed():
            # A time skipped by a DST transition moves forward by the
            # length of the gap
            date, time = _split_millis(
                seconds_to_millis(secs)
                + zone._offset_for_instant(secs) * 1_000
            )
        self._date = date
        self._time = time
        self._zone = zone
        self._secs = secs


def _instant_secs(date: LocalDate, time: LocalTime, zone: ZoneOffset) -> float:
    ms = fields_to_millis(*date._tuple(), *time._tuple())
    return (ms - zone._offset_for_local(date, time) * 1_000) / 1_000


def _split_millis(ms: int) -> tuple[LocalDate, LocalTime]:
    year, month, day, hour, minute, second, millis = millis_to_fields(ms)
    return (
        LocalDate._unchecked(year, month, day),
        LocalTime._unchecked(hour, minute, second, millis),
    )


def _pin(date: LocalDate, time: LocalTime) -> DateTime:
    return DateTime._from_local(date, time, _UTC_ZONE)


_UTC_ZONE = ZoneOffset.utc()
# Any date will do, since only the time is kept
_SOME_DATE = LocalDate(2001, 1, 1)
_MIDNIGHT = LocalTime.MIDNIGHT

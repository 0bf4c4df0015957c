from datetime import timedelta as _timedelta, timezone as _timezone
from functools import lru_cache
from typing import no_type_check

UTC = _timezone.utc
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_WEEK = SECONDS_PER_DAY * DAYS_PER_WEEK
MILLIS_PER_DAY = SECONDS_PER_DAY * 1_000
MAX_OFFSET_SECS = 18 * SECONDS_PER_HOUR


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


class DateTimeError(ValueError):
    """Base class for the errors raised when a date, time or zone
    cannot be constructed. ``reason`` is a technical description,
    useful for logging rather than for end users."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


# We cache fixed-offset tzinfo objects to avoid creating multiple identical ones.
# It's very common to only have whole-hour offsets, so this helps a lot.
@lru_cache
def mk_fixed_tzinfo(secs: int, /) -> _timezone:
    if secs == 0:
        return UTC
    return _timezone(_timedelta(seconds=secs))

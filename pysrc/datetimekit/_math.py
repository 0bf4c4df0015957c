"""Date, calendar, and time arithmetic helpers.

Everything here is proleptic Gregorian and works for any signed year,
including zero and negative years.
"""

from ._common import MILLIS_PER_DAY

# Day numbers are counted from 1970-01-01 (day 0)
_DAYS_PER_400Y = 146_097
_EPOCH_SHIFT = 719_468  # days from 0000-03-01 to 1970-01-01


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def days_in_month(year: int, month: int) -> int:
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def is_valid_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    year_delta, month0_new = divmod(month - 1 + months, 12)
    return year + year_delta, month0_new + 1


def cycle(ordinal: int, n: int, cardinality: int) -> int:
    """Offset a 1-based ordinal by ``n``, wrapping around in both directions"""
    return (ordinal - 1 + n) % cardinality + 1


# The conversions below shift the year to start in March, so that
# the leap day is always the last day of the (shifted) year.
def days_from_civil(year: int, month: int, day: int) -> int:
    y = year - (month <= 2)
    era, yoe = divmod(y, 400)
    mp = (month + 9) % 12  # March=0, ..., February=11
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_PER_400Y + doe - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    era, doe = divmod(days + _EPOCH_SHIFT, _DAYS_PER_400Y)
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    return yoe + era * 400 + (month <= 2), month, day


def fields_to_millis(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
) -> int:
    return (
        days_from_civil(year, month, day) * MILLIS_PER_DAY
        + ((hour * 60 + minute) * 60 + second) * 1_000
        + millisecond
    )


def millis_to_fields(
    ms: int,
) -> tuple[int, int, int, int, int, int, int]:
    days, ms_of_day = divmod(ms, MILLIS_PER_DAY)
    year, month, day = civil_from_days(days)
    secs, millis = divmod(ms_of_day, 1_000)
    mins, second = divmod(secs, 60)
    hour, minute = divmod(mins, 60)
    return year, month, day, hour, minute, second, millis


def seconds_to_millis(secs: float) -> int:
    # Rounding (instead of truncating) keeps e.g. 0.8s from becoming 799ms
    return round(secs * 1_000)

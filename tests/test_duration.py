import pickle
from datetime import timedelta

import pytest

from datetimekit import (
    DateTime,
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Period,
    ZoneOffset,
    days,
    hours,
    milliseconds,
    minutes,
    seconds,
    weeks,
)

from .common import AlwaysEqual, NeverEqual


class TestInit:

    def test_seconds(self):
        assert Duration(123).seconds == 123
        assert Duration(-1.5).seconds == -1.5

    @pytest.mark.parametrize(
        "d, secs",
        [
            (milliseconds(1_500), 1.5),
            (seconds(3), 3),
            (minutes(2), 120),
            (hours(1), 3_600),
            (days(1), 86_400),
            (weeks(1), 604_800),
            (hours(-0.5), -1_800),
        ],
    )
    def test_unit_factories(self, d, secs):
        assert d == Duration(secs)

    @pytest.mark.parametrize(
        "secs", [float("nan"), float("inf"), float("-inf")]
    )
    def test_not_finite(self, secs):
        with pytest.raises(ValueError, match="finite"):
            Duration(secs)
        with pytest.raises(ValueError, match="finite"):
            hours(secs)

    def test_overflowing_arithmetic(self):
        with pytest.raises(ValueError, match="finite"):
            Duration(1e308) * 10

    def test_between(self):
        assert Duration.between(Instant(123), Instant(456)).seconds == 333
        assert Duration.between(Instant(456), Instant(123)).seconds == -333

    def test_zero(self):
        assert Duration.ZERO == Duration(0)


class TestArithmetic:

    def test_add_subtract(self):
        assert hours(1) + minutes(30) == minutes(90)
        assert hours(1).plus(minutes(30)) == minutes(90)
        assert hours(1) - minutes(30) == minutes(30)
        assert hours(1).minus(minutes(90)) == minutes(-30)

    def test_negate(self):
        assert -hours(1) == Duration(-3_600)
        assert +hours(1) == hours(1)
        assert abs(-hours(1)) == hours(1)

    def test_multiply(self):
        assert hours(1) * 2 == hours(2)
        assert 1.5 * hours(2) == hours(3)

    def test_invalid(self):
        with pytest.raises(TypeError):
            hours(1) + 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            hours(1) * hours(1)  # type: ignore[operator]


def test_comparison():
    assert hours(1) < hours(2)
    assert hours(1) <= hours(1)
    assert hours(2) > minutes(119)
    assert hours(2) >= minutes(120)
    with pytest.raises(TypeError):
        hours(1) < 3_600  # type: ignore[operator]


def test_equality():
    d = hours(1)
    same = minutes(60)
    assert d == same
    assert not d == hours(2)
    assert d != hours(2)
    assert not d == NeverEqual()
    assert d == AlwaysEqual()
    assert hash(d) == hash(same)


def test_bool():
    assert not Duration(0)
    assert Duration(0.001)


def test_str_repr():
    assert str(Duration(3_600)) == "3600.0 seconds"
    assert repr(Duration(1.5)) == "Duration(1.5)"


def test_py_timedelta():
    assert hours(1).py_timedelta() == timedelta(hours=1)
    assert Duration.from_py_timedelta(timedelta(minutes=3)) == minutes(3)


def test_pickle():
    d = Duration(1.25)
    assert pickle.loads(pickle.dumps(d)) == d


class TestAddToLocalDate:

    @pytest.mark.parametrize(
        "d, delta, expect",
        [
            (LocalDate(1910, 10, 10), days(3) + hours(5), (1910, 10, 13)),
            (LocalDate(1911, 10, 10), hours(23), (1911, 10, 10)),
            (LocalDate(1911, 10, 10), hours(24), (1911, 10, 11)),
            (LocalDate(1911, 10, 10), hours(25), (1911, 10, 11)),
            # leap year
            (LocalDate(2016, 2, 27), hours(47), (2016, 2, 28)),
            (LocalDate(2016, 2, 27), hours(48), (2016, 2, 29)),
            (LocalDate(2016, 2, 27), hours(49), (2016, 2, 29)),
            (LocalDate(2016, 2, 27), hours(72), (2016, 3, 1)),
            (LocalDate(2016, 2, 27), hours(73), (2016, 3, 1)),
            # non-leap year
            (LocalDate(2015, 2, 27), hours(47), (2015, 2, 28)),
            (LocalDate(2015, 2, 27), hours(48), (2015, 3, 1)),
            (LocalDate(2015, 2, 27), hours(49), (2015, 3, 1)),
            (LocalDate(2015, 2, 27), hours(72), (2015, 3, 2)),
            (LocalDate(2015, 2, 27), hours(73), (2015, 3, 2)),
            # negative years work too
            (LocalDate(-1, 12, 31), hours(24), (0, 1, 1)),
        ],
    )
    def test_carry(self, d, delta, expect):
        result = d + delta
        assert (result.year, result.month, result.day) == expect

    def test_subtract(self):
        assert LocalDate(2016, 3, 1) - hours(1) == LocalDate(2016, 2, 29)
        assert LocalDate(2016, 3, 1).minus(hours(24)) == LocalDate(2016, 2, 29)


class TestAddToLocalTime:

    @pytest.mark.parametrize(
        "delta, expect",
        [
            (days(3) + hours(5), LocalTime(15, 0)),
            (hours(0), LocalTime(10, 0)),
            (days(2), LocalTime(10, 0)),
            (milliseconds(800), LocalTime(10, 0, 0, 800)),
            (milliseconds(1_500), LocalTime(10, 0, 1, 500)),
            (hours(14), LocalTime(0, 0)),
            (-hours(11), LocalTime(23, 0)),
        ],
    )
    def test_wraps(self, delta, expect):
        assert LocalTime(10, 0, 0, 0) + delta == expect

    def test_subtract(self):
        assert LocalTime(0, 0) - milliseconds(1) == LocalTime(23, 59, 59, 999)

    def test_period_not_accepted(self):
        t = LocalTime(10, 0)
        with pytest.raises(TypeError):
            t.plus(Period(days=3))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            t.minus(Period(days=3))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            t + Period(days=3)  # type: ignore[operator]


def test_add_to_local_datetime():
    d = LocalDateTime(2011, 12, 31, 23, 59, 59)
    assert d + seconds(1) == LocalDateTime(2012, 1, 1)
    assert d + milliseconds(999) == LocalDateTime(2011, 12, 31, 23, 59, 59, 999)
    assert LocalDateTime(2012, 1, 1) - milliseconds(1) == d.with_millisecond(
        999
    )


class TestAddToDateTime:

    @pytest.mark.parametrize(
        "secs, expect",
        [
            (0, (2011, 12, 31, 23, 59, 59, 0)),
            (1, (2012, 1, 1, 0, 0, 0, 0)),
            (2, (2012, 1, 1, 0, 0, 1, 0)),
        ],
    )
    def test_year_rollover(self, secs, expect):
        d = DateTime(2011, 12, 31, 23, 59, 59, zone=ZoneOffset.gmt())
        result = d + seconds(secs)
        assert (
            result.year,
            result.month,
            result.day,
            result.hour,
            result.minute,
            result.second,
            result.millisecond,
        ) == expect

    @pytest.mark.parametrize(
        "secs, expect",
        [
            (0, (2012, 6, 30, 23, 59, 59)),
            (1, (2012, 7, 1, 0, 0, 0)),
            (2, (2012, 7, 1, 0, 0, 1)),
        ],
    )
    def test_leap_seconds_are_ignored(self, secs, expect):
        # A leap second was inserted at the end of June 30th 2012
        d = DateTime(2012, 6, 30, 23, 59, 59, zone=ZoneOffset.gmt())
        result = d + seconds(secs)
        assert result.local() == LocalDateTime(*expect)

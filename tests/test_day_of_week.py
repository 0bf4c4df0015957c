import pytest
from hypothesis import given
from hypothesis.strategies import integers, sampled_from

from datetimekit import DayOfWeek, LocalDate, days

_days = sampled_from(list(DayOfWeek))


def test_iso_numbering():
    assert DayOfWeek.MONDAY.value == 1
    assert DayOfWeek.SUNDAY.value == 7


@pytest.mark.parametrize(
    "n, expect",
    [
        (1, DayOfWeek.TUESDAY),
        (2, DayOfWeek.WEDNESDAY),
        (8, DayOfWeek.TUESDAY),
        (11, DayOfWeek.FRIDAY),
        (12, DayOfWeek.SATURDAY),
        (13, DayOfWeek.SUNDAY),
        (24, DayOfWeek.THURSDAY),
        (0, DayOfWeek.MONDAY),
        (-1, DayOfWeek.SUNDAY),
        (-13, DayOfWeek.TUESDAY),
        (-15, DayOfWeek.SUNDAY),
    ],
)
def test_plus(n, expect):
    assert DayOfWeek.MONDAY.plus(n) is expect
    assert DayOfWeek.MONDAY + n is expect


@pytest.mark.parametrize(
    "n, expect",
    [
        (1, DayOfWeek.SUNDAY),
        (2, DayOfWeek.SATURDAY),
        (8, DayOfWeek.SUNDAY),
        (11, DayOfWeek.THURSDAY),
        (12, DayOfWeek.WEDNESDAY),
        (0, DayOfWeek.MONDAY),
        (-1, DayOfWeek.TUESDAY),
        (-13, DayOfWeek.SUNDAY),
        (-15, DayOfWeek.TUESDAY),
    ],
)
def test_minus(n, expect):
    assert DayOfWeek.MONDAY.minus(n) is expect
    assert DayOfWeek.MONDAY - n is expect


@given(_days, integers())
def test_minus_is_plus_negated(d, n):
    assert d.minus(n) is d.plus(-n)
    assert d.minus(n) is d.plus(-(n % 7))


@given(integers(-100_000, 100_000), integers(-1_000, 1_000))
def test_matches_calendar(start, n):
    d = LocalDate(1970, 1, 1) + days(start)
    assert d.day_of_week().plus(n) is (d + days(n)).day_of_week()


def test_invalid_arithmetic():
    with pytest.raises(TypeError):
        DayOfWeek.MONDAY + "1"  # type: ignore[operator]


class TestDisplayName:

    def test_current_locale(self):
        assert DayOfWeek.MONDAY.display_name() == "Monday"
        assert DayOfWeek.SUNDAY.display_name() == "Sunday"

    @pytest.mark.parametrize(
        "d, expect",
        [
            (DayOfWeek.FRIDAY, "Friday"),
            (DayOfWeek.WEDNESDAY, "Wednesday"),
        ],
    )
    def test_c_locale(self, d, expect):
        assert d.display_name("C") == expect

import pytest
from hypothesis import given
from hypothesis.strategies import integers, sampled_from

from datetimekit import Month

_months = sampled_from(list(Month))


@pytest.mark.parametrize(
    "n, expect",
    [
        (1, Month.FEBRUARY),
        (2, Month.MARCH),
        (8, Month.SEPTEMBER),
        (11, Month.DECEMBER),
        (12, Month.JANUARY),
        (13, Month.FEBRUARY),
        (24, Month.JANUARY),
        (27, Month.APRIL),
        (0, Month.JANUARY),
        (-1, Month.DECEMBER),
        (-13, Month.DECEMBER),
        (-15, Month.OCTOBER),
        (-95, Month.FEBRUARY),
    ],
)
def test_plus(n, expect):
    assert Month.JANUARY.plus(n) is expect
    assert Month.JANUARY + n is expect


@pytest.mark.parametrize(
    "n, expect",
    [
        (1, Month.DECEMBER),
        (2, Month.NOVEMBER),
        (8, Month.MAY),
        (11, Month.FEBRUARY),
        (12, Month.JANUARY),
        (13, Month.DECEMBER),
        (24, Month.JANUARY),
        (27, Month.OCTOBER),
        (0, Month.JANUARY),
        (-1, Month.FEBRUARY),
        (-13, Month.FEBRUARY),
        (-15, Month.APRIL),
        (-95, Month.DECEMBER),
    ],
)
def test_minus(n, expect):
    assert Month.JANUARY.minus(n) is expect
    assert Month.JANUARY - n is expect


@given(_months, integers())
def test_minus_is_plus_negated(m, n):
    assert m.minus(n) is m.plus(-n)
    assert m.minus(n) is m.plus(-(n % 12))


@given(_months, integers(-1_000, 1_000))
def test_plus_then_minus(m, n):
    assert m.plus(n).minus(n) is m


def test_invalid_arithmetic():
    with pytest.raises(TypeError):
        Month.JANUARY + 1.5  # type: ignore[operator]
    with pytest.raises(TypeError):
        Month.JANUARY - Month.MARCH  # type: ignore[operator]


@pytest.mark.parametrize(
    "m, year, expect",
    [
        (Month.JANUARY, 2001, 31),
        (Month.FEBRUARY, 2001, 28),
        (Month.FEBRUARY, 2000, 29),
        (Month.FEBRUARY, 1900, 28),
        (Month.APRIL, 2001, 30),
        (Month.DECEMBER, -1, 31),
    ],
)
def test_number_of_days(m, year, expect):
    assert m.number_of_days(year) == expect


class TestDisplayName:

    def test_current_locale(self):
        assert Month.JANUARY.display_name() == "January"
        assert Month.SEPTEMBER.display_name() == "September"

    @pytest.mark.parametrize(
        "m, expect",
        [
            (Month.JANUARY, "January"),
            (Month.MAY, "May"),
            (Month.DECEMBER, "December"),
        ],
    )
    def test_c_locale(self, m, expect):
        assert m.display_name("C") == expect

import pytest

from algolab.calendar_time import (
    DateTime,
    TimeSpan,
    days_in_month,
    is_leap_year,
    is_valid,
)


def test_default_is_epoch():
    assert DateTime().unixtime() == 0
    assert str(DateTime()) == "1.1.1970 0:0:0"


def test_known_unixtime_of_2000():
    assert DateTime(1, 1, 2000).unixtime() == 946684800
    assert DateTime.from_unixtime(946684800) == DateTime(1, 1, 2000)


def test_str_has_no_padding():
    assert str(DateTime(2, 2, 2012, 10, 30, 30)) == "2.2.2012 10:30:30"
    assert str(DateTime(12, 11, 2013)) == "12.11.2013 0:0:0"


@pytest.mark.parametrize(
    "moment",
    [
        DateTime(2, 2, 2012, 10, 30, 30),
        DateTime(29, 2, 2000, 23, 59, 59),
        DateTime(31, 12, 1969, 12, 0, 1),
        DateTime(1, 3, 1900),
        DateTime(15, 6, 2100, 4, 4, 4),
    ],
)
def test_unixtime_round_trip(moment):
    assert DateTime.from_unixtime(moment.unixtime()) == moment


@pytest.mark.parametrize("text", ["2.2.2012 4:4:4", "1.1.2010 7:7:7", "8.8.2011 9:9:9"])
def test_parse_round_trip(text):
    assert str(DateTime.parse(text)) == text


@pytest.mark.parametrize("text", ["bad", "2.2.2012", "2-2-2012 4:4:4", "30.2.2012 1:1:1"])
def test_parse_rejects(text):
    with pytest.raises(ValueError):
        DateTime.parse(text)


@pytest.mark.parametrize(
    "fields",
    [(30, 2, 2012), (29, 2, 2013), (1, 13, 2012), (0, 1, 2012), (1, 1, 2012, 24, 0, 0)],
)
def test_invalid_fields_raise(fields):
    with pytest.raises(ValueError):
        DateTime(*fields)


def test_leap_years():
    assert is_leap_year(2000)
    assert is_leap_year(2012)
    assert not is_leap_year(1900)
    assert not is_leap_year(2013)


@pytest.mark.parametrize("year", [1900, 2000, 2012, 2013])
def test_year_length_matches_leap_rule(year):
    total = sum(days_in_month(year, month) for month in range(1, 13))
    assert total == 365 + is_leap_year(year)
    assert DateTime(1, 1, year + 1).unixtime() - DateTime(1, 1, year).unixtime() == total * 86400


def test_days_in_month_rejects_bad_month():
    with pytest.raises(ValueError):
        days_in_month(2012, 0)


def test_is_valid():
    assert is_valid(2012, 2, 29, 23, 59, 59)
    assert not is_valid(2012, 2, 29, 23, 60, 0)


def test_reference_monday():
    assert DateTime(3, 1, 2000).day_of_week() == 1
    assert DateTime(10, 1, 2000, 15, 0, 0).day_of_week() == 1


def test_day_of_week_advances_by_one():
    start = DateTime(20, 12, 1999)
    for offset in range(-10, 20):
        today = start.add_days(offset)
        tomorrow = today.add_days(1)
        assert tomorrow.day_of_week() == today.day_of_week() % 7 + 1


def test_difference_and_addition():
    first = DateTime(2, 2, 2012, 10, 30, 30)
    second = DateTime(12, 11, 2013)
    span = second - first
    assert first + span == second
    assert second - span == first
    assert (first - second) == -span


def test_timespan_truncates_toward_zero():
    span = TimeSpan(5 * 86400 + 7)
    assert span.days() == 5
    assert span.hours() == 5 * 24
    assert span.minutes() == 5 * 24 * 60
    assert (-span).days() == -5
    assert TimeSpan(-59).minutes() == 0


def test_timespan_ordering():
    assert TimeSpan(1) < TimeSpan(2)
    assert -TimeSpan(3) == TimeSpan(-3)
    assert str(TimeSpan(500)) == "500"


def test_ordering():
    early = DateTime(2, 2, 2012, 10, 30, 30)
    late = DateTime(12, 11, 2013)
    assert early < late
    assert late > early
    assert early <= early
    assert sorted([late, early]) == [early, late]


def test_add_small_units_are_consistent():
    moment = DateTime(31, 12, 2012, 23, 59, 59)
    assert moment.add_seconds(1) == DateTime(1, 1, 2013)
    assert moment.add_minutes(60) == moment.add_hours(1)
    assert moment.add_hours(24) == moment.add_days(1)


def test_add_months_clamps_day():
    assert DateTime(31, 1, 2013).add_months(1) == DateTime(28, 2, 2013)


@pytest.mark.parametrize("months", [-25, -13, -3, -1, 0, 1, 11, 13, 40])
def test_add_months_round_trip(months):
    moment = DateTime(15, 3, 2012, 4, 4, 4)
    assert moment.add_months(months).add_months(-months) == moment
    assert moment.add_months(months).day == 15


def test_add_years_keeps_fields_and_clamps_leap_day():
    assert DateTime(5, 6, 2010, 1, 2, 3).add_years(2) == DateTime(5, 6, 2012, 1, 2, 3)
    assert DateTime(29, 2, 2012).add_years(1).month == 2
    assert DateTime(29, 2, 2012).add_years(4) == DateTime(29, 2, 2016)


def test_now_is_valid_and_after_2000():
    now = DateTime.now()
    assert now > DateTime(1, 1, 2000)
    assert DateTime.from_unixtime(now.unixtime()) == now
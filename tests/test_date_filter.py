import pytest

from rhit.date import Date, DateParseError
from rhit.filters.date_filter import DateFilter, DateFilterKind


def test_date_filter_fully_defined_range():
    df = DateFilter.parse("2021/01/03-2021/02/15", None, None)
    assert df.contains(Date(2021, 1, 28)) is True
    assert df.contains(Date(2021, 2, 1)) is True
    assert df.contains(Date(2021, 2, 15)) is True
    assert df.contains(Date(2021, 2, 16)) is False


def test_date_filter_precise_date():
    df = DateFilter.parse("2021/02/15", 2021, None)
    assert df.contains(Date(2021, 1, 28)) is False
    assert df.contains(Date(2021, 2, 15)) is True
    assert df.contains(Date(2021, 2, 16)) is False


def test_date_filter_not_date():
    df = DateFilter.parse("!2021/02/15", 2021, None)
    assert df.contains(Date(2021, 1, 28)) is True
    assert df.contains(Date(2021, 2, 15)) is False
    assert df.contains(Date(2021, 2, 16)) is True


def test_date_filter_after_date_implicit_year():
    df = DateFilter.parse(">02/15", 2021, None)
    assert df.contains(Date(2020, 11, 12)) is False
    assert df.contains(Date(2021, 1, 28)) is False
    assert df.contains(Date(2021, 2, 15)) is False
    assert df.contains(Date(2021, 2, 16)) is True


def test_date_filter_after_date():
    df = DateFilter.parse(">2021/02/15", 2021, None)
    assert df.contains(Date(2021, 1, 28)) is False
    assert df.contains(Date(2021, 2, 15)) is False
    assert df.contains(Date(2021, 2, 16)) is True


def test_date_filter_before_date():
    df = DateFilter.parse("<2021/02/15", 2021, None)
    assert df.contains(Date(2021, 1, 28)) is True
    assert df.contains(Date(2021, 2, 15)) is False
    assert df.contains(Date(2021, 2, 16)) is False


def test_date_filter_default_year():
    df = DateFilter.parse("02/15", 2021, 2)
    assert df.contains(Date(2021, 1, 28)) is False
    assert df.contains(Date(2021, 2, 15)) is True
    assert df.contains(Date(2021, 2, 16)) is False


def test_date_filter_default_month_year():
    df = DateFilter.parse("15", 2021, 2)
    assert df.contains(Date(2021, 1, 28)) is False
    assert df.contains(Date(2021, 2, 15)) is True
    assert df.contains(Date(2021, 2, 16)) is False


def test_date_filter_month():
    df = DateFilter.parse("2021/02", 2021, 2)
    assert df.contains(Date(2021, 1, 28)) is False
    assert df.contains(Date(2021, 2, 15)) is True
    assert df.contains(Date(2021, 3, 1)) is False


def test_date_filter_year():
    df = DateFilter.parse("2021", 2021, 2)
    assert df.contains(Date(2020, 12, 28)) is False
    assert df.contains(Date(2021, 1, 28)) is True
    assert df.contains(Date(2021, 2, 15)) is True
    assert df.contains(Date(2022, 3, 1)) is False


def test_year_is_a_range_over_the_whole_year():
    df = DateFilter.parse("2021", None, None)
    assert df == DateFilter(DateFilterKind.RANGE, Date(2021, 1, 1), Date(2021, 12, 31))


def test_prefixed_kinds():
    assert DateFilter.parse(">2021/02/15", None, None).kind is DateFilterKind.AFTER
    assert DateFilter.parse("<2021/02/15", None, None).kind is DateFilterKind.BEFORE
    assert DateFilter.parse("!2021/02/15", None, None).kind is DateFilterKind.NOT


@pytest.mark.parametrize("pattern", ["02/15", "15", ">02/15", "01/03-02/15"])
def test_ambiguous_without_context(pattern):
    with pytest.raises(DateParseError):
        DateFilter.parse(pattern, None, None)


@pytest.mark.parametrize("pattern", ["2021/13", "2021/02/32", "x/y/z"])
def test_invalid_dates(pattern):
    with pytest.raises(DateParseError):
        DateFilter.parse(pattern, 2021, 2)
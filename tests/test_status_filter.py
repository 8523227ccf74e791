import pytest

from rhit.filters.status_filter import StatusFilter, StatusFilterParseError


def test_status_filter():
    sf = StatusFilter.parse("400")
    assert sf.accepts(400) is True
    assert sf.accepts(401) is False
    sf = StatusFilter.parse("2xx,405-512")
    assert sf.accepts(200) is True
    assert sf.accepts(299) is True
    assert sf.accepts(300) is False
    assert sf.accepts(400) is False
    assert sf.accepts(405) is True
    assert sf.accepts(512) is True
    assert sf.accepts(513) is False
    sf = StatusFilter.parse("4xx,!404")
    assert sf.accepts(200) is False
    assert sf.accepts(400) is True
    assert sf.accepts(404) is False
    assert sf.accepts(421) is True


def test_only_exclusions_accept_everything_else():
    sf = StatusFilter.parse("!5xx")
    assert sf.include == ()
    assert sf.exclude == ((500, 599),)
    assert sf.accepts(200)
    assert not sf.accepts(502)


def test_classes_and_ranges_are_parsed():
    sf = StatusFilter.parse("3xx,310-340,514")
    assert sf.include == ((300, 399), (310, 340), (514, 514))


@pytest.mark.parametrize("pattern", ["", "abc", "4xx,", "400-", "-400", "!", "70000", "4x"])
def test_invalid_patterns(pattern):
    with pytest.raises(StatusFilterParseError):
        StatusFilter.parse(pattern)
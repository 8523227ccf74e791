import pytest

from rhit.key import Key


@pytest.mark.parametrize("value", ["h", "hit", "hits", "HITS", "Hit"])
def test_parse_hits(value):
    assert Key.parse(value) is Key.HITS


@pytest.mark.parametrize("value", ["b", "byte", "bytes", "BYTES"])
def test_parse_bytes(value):
    assert Key.parse(value) is Key.BYTES


@pytest.mark.parametrize("value", ["", "size", "hitz"])
def test_parse_illegal(value):
    with pytest.raises(ValueError):
        Key.parse(value)
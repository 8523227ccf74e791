from types import SimpleNamespace

import pytest

from rhit.histo_line import V_CHARS
from rhit.key import Key
from rhit.line_group import LineGroup
from rhit.trend_computer import TrendComputer


def computer(key=Key.HITS):
    return TrendComputer(0, 4, 2, 2, 1.0, key)


def line(date_idx, bytes_sent):
    return SimpleNamespace(date_idx=date_idx, bytes_sent=bytes_sent)


def test_hits_and_bytes():
    lines = [line(0, 10), line(1, 20), line(3, 30)]
    group = LineGroup("x", lines, computer())
    assert group.hits() == 3
    assert group.bytes == 60
    assert group.key_sum == group.hits()
    assert group.any() is lines[0]
    assert group.value == "x"


def test_key_sum_bytes():
    lines = [line(0, 10), line(1, 20)]
    group = LineGroup("x", lines, computer(Key.BYTES))
    assert group.key_sum == group.bytes == 30


def test_histo_line_length_and_peak():
    lines = [line(0, 1), line(2, 1), line(2, 1)]
    group = LineGroup("x", lines, computer())
    histo = group.histo_line()
    assert len(histo) == 4
    assert histo[1] == V_CHARS[0]
    assert V_CHARS[8] not in histo


def test_empty_group_is_rejected():
    with pytest.raises(ValueError):
        LineGroup("x", [], computer())
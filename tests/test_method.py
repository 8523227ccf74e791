import pytest

from rhit.method import Method


@pytest.mark.parametrize("method", list(Method))
def test_display_round_trip(method):
    assert Method.parse(str(method)) is method


def test_standard_methods():
    assert Method.parse("GET") is Method.GET
    assert Method.parse("DELETE") is Method.DELETE


def test_empty_is_none():
    assert Method.parse("") is Method.NONE
    assert Method.parse("none") is Method.NONE


@pytest.mark.parametrize("value", ["SSTP", "get", "\\x16\\x03"])
def test_exotic_is_other(value):
    assert Method.parse(value) is Method.OTHER
import pytest

from rhit.date import Date
from rhit.method import Method
from rhit.nginx_log.log_line import LogLine, LogParseError, Ranger

SIO_PULL_LINE = (
    r'10.232.28.160 - - [22/Jan/2021:02:49:30 +0000] '
    r'"GET /socket.io/?EIO=3&transport=polling&t=NSd_nu- HTTP/1.1" 200 99 '
    r'"https://miaou.dystroy.org/3" "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 '
    r'(KHTML, like Gecko) Chrome/73.0.3683.103 Safari/537.36"'
)

NO_VERB_LINE = (
    r'119.142.145.250 - - [10/Jan/2021:10:27:01 +0000] '
    r'"\x16\x03\x01\x00u\x01\x00\x00q\x03\x039a\xDF\xCA\x90\xB1\xB4\xC2SB\x96\xF0\xB7'
    r'\x96CJD\xE1\xBF\x0E\xE1Y\xA2\x87v\x1D\xED\xBDo\x05A\x9D\x00\x00\x1A\xC0/\xC0+'
    r'\xC0\x11\xC0\x07\xC0\x13\xC0\x09\xC0\x14\xC0" 400 173 "-" "-"'
)

ISSUE_3_LINE = (
    r'0.0.0.0 - - [2021-03-03T09:08:37+08:00] '
    r'"GET /zhly/assets/guide/audit-opinion.png HTTP/1.1" 200 3911 '
    r'"http://0.0.0.0:8091/zhly/" "Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
    r'AppleWebKit/537.36 (KHTML, like Gecko) Chrome/90.0.4427.5 Safari/537.36" "-"'
)


def test_parse_sio_line():
    ll = LogLine.parse(SIO_PULL_LINE)
    assert ll.remote_addr == "10.232.28.160"
    assert ll.method is Method.GET
    assert ll.path == "/socket.io/"
    assert ll.status == 200
    assert ll.bytes_sent == 99
    assert ll.referer == "https://miaou.dystroy.org/3"
    assert ll.date == Date(2021, 1, 22)


def test_parse_no_method_line():
    ll = LogLine.parse(NO_VERB_LINE)
    assert ll.method is Method.NONE
    assert ll.status == 400
    assert ll.bytes_sent == 173


def test_parse_issue_3_line():
    ll = LogLine.parse(ISSUE_3_LINE)
    assert ll.remote_addr == "0.0.0.0"
    assert ll.method is Method.GET
    assert ll.status == 200
    assert ll.date == Date(2021, 3, 3)


def test_date_idx_defaults_to_zero():
    assert LogLine.parse(SIO_PULL_LINE).date_idx == 0


def test_unknown_method_is_other():
    line = '1.2.3.4 - - [10/Jan/2021:10:27:01 +0000] "BREW /pot HTTP/1.1" 418 0 "-" "-"'
    ll = LogLine.parse(line)
    assert ll.method is Method.OTHER
    assert ll.path == "/pot"


def test_is_resource():
    assert LogLine.parse(ISSUE_3_LINE).is_resource()
    assert not LogLine.parse(SIO_PULL_LINE).is_resource()


@pytest.mark.parametrize(
    "line",
    [
        "garbage",
        '1.2.3.4 - - [10/Foo/2021:10:27:01 +0000] "GET / HTTP/1.1" 200 1 "-" "-"',
        '1.2.3.4 - - [10/Jan/2021:10:27:01 +0000] "GET / HTTP/1.1" abc 1 "-" "-"',
        '1.2.3.4 - - [10/Jan/2021:10:27:01 +0000] "GET / HTTP/1.1" 200 -5 "-" "-"',
        '1.2.3.4 - - [10/Jan/2021:10:27:01 +0000] "GET / HTTP/1.1',
    ],
)
def test_invalid_lines_raise(line):
    with pytest.raises(LogParseError):
        LogLine.parse(line)


def test_ranger_until_and_between():
    ranger = Ranger("abc def [ghi] jkl")
    assert ranger.until(" ") == "abc"
    assert ranger.between("[", "]") == "ghi"
    assert ranger.between(" ", "l") == "jk"


def test_ranger_between_reuses_last_delimiter():
    ranger = Ranger("a 1 2 3")
    assert ranger.until(" ") == "a"
    assert ranger.between(" ", " ") == "1"
    assert ranger.between(" ", " ") == "2"


def test_ranger_missing_char():
    ranger = Ranger("abc")
    with pytest.raises(LogParseError):
        ranger.until(" ")
import io

from rich.console import Console

from rhit.date import Date
from rhit.key import Key
from rhit.md.printer import Printer, to_percent
from rhit.md.skin import make_skin
from rhit.md.status import print_status_codes
from rhit.method import Method
from rhit.nginx_log.log_line import LogLine
from rhit.trend_computer import TrendComputer


def make_printer(**kwargs):
    out = io.StringIO()
    console = Console(file=out, width=200, color_system=None, highlight=False)
    return Printer(console=console, skin=make_skin(False), **kwargs), out


def make_line(status, date_idx=0):
    return LogLine("1.2.3.4", Date(2021, 1, 1), Method.GET, "/", status, 10, "-", date_idx)


def test_summary_at_detail_zero():
    printer, out = make_printer(detail_level=0)
    print_status_codes([make_line(200), make_line(404)], printer, None)
    text = out.getvalue()
    assert "HTTP status codes:" in text
    assert "50.0%" in text
    assert to_percent(0, 2) in text


def test_grouped_at_detail_one():
    printer, out = make_printer(detail_level=1)
    print_status_codes([make_line(200), make_line(404), make_line(404)], printer, None)
    text = out.getvalue()
    assert "2 HTTP status codes" in text
    assert text.index("404") < text.index("200")


def test_grouped_with_trends():
    printer, out = make_printer(detail_level=1)
    tc = TrendComputer(0, 4, 2, 2, 1.0, Key.HITS)
    lines = [make_line(301, i % 4) for i in range(4)]
    print_status_codes(lines, printer, tc)
    text = out.getvalue()
    assert "301" in text
    assert to_percent(4, 4) in text
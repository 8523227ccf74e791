import io

from rich.console import Console

from rhit.date import Date
from rhit.md.methods import print_methods
from rhit.md.printer import Printer
from rhit.method import Method
from rhit.nginx_log.log_line import LogLine
from rhit.trend_computer import TrendComputer


def _line(method, date_idx=0):
    return LogLine(
        remote_addr="10.0.0.1",
        date=Date(2021, 1, 10 + date_idx),
        method=method,
        path="/",
        status=200,
        bytes_sent=10,
        referer="-",
        date_idx=date_idx,
    )


def _printer():
    buf = io.StringIO()
    console = Console(file=buf, width=200, color_system=None, highlight=False)
    return Printer(console=console), buf


def test_methods_without_trends():
    lines = [_line(Method.GET)] * 3 + [_line(Method.POST)] + [_line(Method.NONE)]
    printer, buf = _printer()
    print_methods(lines, printer, None)
    out = buf.getvalue()
    assert "3 methods" in out
    assert "GET" in out
    assert "POST" in out
    assert "none" in out
    assert out.index("GET") < out.index("POST")


def test_methods_with_trends_shows_percent_and_days():
    lines = [_line(Method.GET, idx) for idx in range(4)] + [_line(Method.PUT, 3)]
    computer = TrendComputer(
        histo_offset=0,
        histo_len=4,
        ref_len=2,
        tail_len=2,
        normalization_factor=1.0,
    )
    printer, buf = _printer()
    print_methods(lines, printer, computer)
    out = buf.getvalue()
    assert "methods" in out
    assert "days" in out
    assert "trend" in out
    assert "%" in out
    assert "PUT" in out
    assert "GET" in out
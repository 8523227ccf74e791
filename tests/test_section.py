from rhit.md.section import FULL_VIEW_LIMIT, Section, View


def test_full_view_limit():
    view = View()
    assert view.is_full
    assert view.limit() == FULL_VIEW_LIMIT == 100


def test_limited_view():
    view = View(7)
    assert not view.is_full
    assert view.limit() == 7


def test_section_holds_view():
    section = Section("methods", "method", View(), False)
    assert section.view.limit() == 100
    assert section.changes is False
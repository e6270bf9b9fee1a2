from cellbook.core.languages import CodeLanguage
from cellbook.notebooks.store import NotebookList


def test_create_keeps_insertion_order():
    nbs = NotebookList()
    a = nbs.create("Zeta", CodeLanguage.JAVASCRIPT)
    b = nbs.create("Alpha", "typescript")

    assert [s.title for s in nbs.summaries()] == ["Zeta", "Alpha"]
    assert a.cell_count == 0 and not a.running
    assert b.language is CodeLanguage.TYPESCRIPT


def test_delete():
    nbs = NotebookList()
    s = nbs.create("One", CodeLanguage.TYPESCRIPT)
    assert nbs.delete(s.id) is True
    assert nbs.delete(s.id) is False
    assert nbs.summaries() == []

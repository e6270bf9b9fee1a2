from cellbook.core.languages import CodeLanguage
from cellbook.notebooks.creation import CreationForm


def _form(default=CodeLanguage.TYPESCRIPT):
    calls = []
    form = CreationForm(default, lambda title, lang: calls.append((title, lang)))
    return form, calls


def test_initial_state():
    form, _ = _form(CodeLanguage.JAVASCRIPT)
    assert form.title == ""
    assert form.language is CodeLanguage.JAVASCRIPT
    assert not form.can_submit


def test_submit_with_default_language():
    form, calls = _form("typescript")
    form.set_title("My Notebook")

    assert form.submit() is True
    assert calls == [("My Notebook", CodeLanguage.TYPESCRIPT)]


def test_invalid_title_never_submits():
    for lang in CodeLanguage:
        form, calls = _form()
        form.select_language(lang)
        for title in ("", "    ", "x" * 44):
            form.set_title(title)
            assert form.submit() is False
        assert calls == []


def test_title_is_passed_as_typed():
    form, calls = _form()
    form.set_title("  padded  ")
    form.submit()
    assert calls == [("  padded  ", CodeLanguage.TYPESCRIPT)]


def test_language_selection():
    form, calls = _form(CodeLanguage.TYPESCRIPT)
    form.select_language(CodeLanguage.JAVASCRIPT)
    form.select_language(CodeLanguage.JAVASCRIPT)
    form.set_title("js book")
    form.submit()

    assert calls == [("js book", CodeLanguage.JAVASCRIPT)]


def test_typing_is_clamped_not_rejected():
    form, _ = _form()
    form.set_title("y" * 50)
    assert form.title == "y" * 44
    assert not form.can_submit


def test_state_is_kept_after_submit():
    form, calls = _form()
    form.set_title("keep me")
    form.submit()
    assert form.title == "keep me"
    form.submit()
    assert len(calls) == 2


def test_language_options():
    form, _ = _form(CodeLanguage.JAVASCRIPT)
    opts = form.language_options()
    assert [(o.tag, o.selected) for o in opts] == [("JS", True), ("TS", False)]
    assert opts[1].tooltip == "TypeScript Notebook"

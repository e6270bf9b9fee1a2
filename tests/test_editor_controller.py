from cellbook.core import modes
from cellbook.core.files import FileEntry
from cellbook.editor.controller import EMPTY_PLACEHOLDER, EditorController, EditorState


def test_empty_state_has_no_editable_surface(store):
    ctrl = EditorController(store)
    view = ctrl.render()

    assert view.state is EditorState.EMPTY
    assert not view.editable
    assert view.source is None
    assert view.mode is None
    assert view.placeholder == EMPTY_PLACEHOLDER


def test_text_change_in_empty_state_is_inert(store):
    ctrl = EditorController(store)
    ctrl.render()
    ctrl.text_changed("ignored")
    assert store.updates == []


def test_open_css_file_and_edit(store):
    ctrl = EditorController(store)
    store.open("styles/app.css", "body{}")

    view = ctrl.render()
    assert view.state is EditorState.EDITING
    assert view.mode == modes.CSS
    assert view.source == "body{}"
    assert view.key == "styles/app.css"

    ctrl.text_changed("body{color:red}")

    assert len(store.updates) == 1
    file, attrs = store.updates[0]
    assert file.path == "styles/app.css"
    assert attrs == {"source": "body{color:red}"}


def test_every_change_is_forwarded_with_full_source(store):
    ctrl = EditorController(store)
    store.open("main.ts", "")
    ctrl.render()

    for text in ("c", "co", "con", "cons"):
        ctrl.text_changed(text)

    assert [attrs["source"] for _, attrs in store.updates] == ["c", "co", "con", "cons"]


def test_file_switch_and_close(store):
    ctrl = EditorController(store)
    store.open("a.json", "{}")
    assert ctrl.render().mode == modes.JSON

    store.open("notes.txt", "hello")
    view = ctrl.render()
    assert ctrl.state is EditorState.EDITING
    assert view.key == "notes.txt"
    assert view.mode is None
    assert view.source == "hello"

    store.close()
    assert ctrl.render().state is EditorState.EMPTY


def test_source_comes_from_store_not_local_copy(store):
    ctrl = EditorController(store)
    store.opened = FileEntry("x.md", "one")
    assert ctrl.render().source == "one"

    store.opened = FileEntry("x.md", "two")
    assert ctrl.render().source == "two"

import pytest

from cellbook.core.files import FileEntry, FileStoreError
from cellbook.infra.workspace_store import WorkspaceFileStore


def _workspace(tmp_path):
    (tmp_path / "styles").mkdir()
    (tmp_path / "styles" / "app.css").write_text("body{}", encoding="utf-8")
    (tmp_path / "README.md").write_text("# Hi\n", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("", encoding="utf-8")
    return WorkspaceFileStore(tmp_path)


def test_list_paths_skips_vendor_dirs(tmp_path):
    store = _workspace(tmp_path)
    assert store.list_paths() == ["README.md", "styles/app.css"]


def test_open_update_flush(tmp_path):
    store = _workspace(tmp_path)
    seen = []
    store.subscribe(lambda: seen.append(store.opened_file()))

    f = store.open_file("styles/app.css")
    assert f == FileEntry("styles/app.css", "body{}")

    store.update_file(f, {"source": "body{color:red}"})
    assert store.opened_file().source == "body{color:red}"
    assert store.dirty_paths == ["styles/app.css"]
    # nothing on disk until flushed
    assert (tmp_path / "styles" / "app.css").read_text(encoding="utf-8") == "body{}"

    assert store.flush() == ["styles/app.css"]
    assert (tmp_path / "styles" / "app.css").read_text(encoding="utf-8") == "body{color:red}"
    assert store.dirty_paths == []
    assert len(seen) == 2


def test_reopen_keeps_unflushed_edits(tmp_path):
    store = _workspace(tmp_path)
    f = store.open_file("README.md")
    store.update_file(f, {"source": "# Changed\n"})
    store.open_file("styles/app.css")

    assert store.open_file("README.md").source == "# Changed\n"


def test_close_file(tmp_path):
    store = _workspace(tmp_path)
    store.open_file("README.md")
    store.close_file()
    assert store.opened_file() is None


def test_update_contract_violations(tmp_path):
    store = _workspace(tmp_path)
    f = store.open_file("README.md")

    with pytest.raises(FileStoreError):
        store.update_file(f, {"path": "other.md"})
    with pytest.raises(FileStoreError):
        store.update_file(FileEntry("styles/app.css", ""), {"source": "x"})


def test_paths_outside_workspace_are_rejected(tmp_path):
    store = _workspace(tmp_path)
    with pytest.raises(FileStoreError):
        store.open_file("../secret.txt")
    with pytest.raises(FileStoreError):
        store.open_file("/etc/passwd")

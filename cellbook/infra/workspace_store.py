from __future__ import annotations

from dataclasses import replace
from pathlib import Path, PurePosixPath

from cellbook.core.files import FileEntry, FileStore, FileStoreError, StoreListener
from cellbook.infra.filesystem import atomic_write_text
from cellbook.logging_setup import log

_UPDATABLE_ATTRS = frozenset({"source"})
_SKIP_DIRS = frozenset({".git", "node_modules", "__pycache__", ".venv"})


class WorkspaceFileStore(FileStore):
    """
    Directory-backed file store.

    Paths are workspace-relative POSIX strings. Edits are applied in memory
    immediately and written to disk by flush(); the caller decides when.
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self._opened: FileEntry | None = None
        self._dirty: dict[str, str] = {}
        self._listeners: list[StoreListener] = []

    # ---- listing / opening ----

    def list_paths(self) -> list[str]:
        if not self.root.is_dir():
            return []
        out = []
        for p in self.root.rglob("*"):
            rel = p.relative_to(self.root)
            if any(part in _SKIP_DIRS for part in rel.parts):
                continue
            if p.is_file():
                out.append(rel.as_posix())
        return sorted(out, key=str.lower)

    def _resolve(self, path: str) -> Path:
        rel = PurePosixPath(path)
        if not path or rel.is_absolute() or ".." in rel.parts:
            raise FileStoreError(f"Path outside workspace: {path!r}")
        return self.root.joinpath(*rel.parts)

    def open_file(self, path: str) -> FileEntry:
        disk_path = self._resolve(path)
        if path in self._dirty:
            source = self._dirty[path]
        elif disk_path.exists():
            source = disk_path.read_text(encoding="utf-8")
        else:
            source = ""
        self._opened = FileEntry(path=path, source=source)
        log.info("File opened: %s", path)
        self._notify()
        return self._opened

    def close_file(self) -> None:
        if self._opened is None:
            return
        log.info("File closed: %s", self._opened.path)
        self._opened = None
        self._notify()

    # ---- FileStore contract ----

    def opened_file(self) -> FileEntry | None:
        return self._opened

    def update_file(self, file: FileEntry, attrs: dict) -> None:
        unknown = set(attrs) - _UPDATABLE_ATTRS
        if unknown:
            raise FileStoreError(f"Unsupported file attributes: {sorted(unknown)}")
        if self._opened is None or self._opened.path != file.path:
            raise FileStoreError(f"File is not opened: {file.path!r}")
        if "source" in attrs:
            source = attrs["source"]
            self._opened = replace(self._opened, source=source)
            self._dirty[file.path] = source
        self._notify()

    def subscribe(self, listener: StoreListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ---- persistence ----

    @property
    def dirty_paths(self) -> list[str]:
        return list(self._dirty)

    def flush(self) -> list[str]:
        """Write pending edits to disk. Returns the paths written."""
        written = []
        for path, source in list(self._dirty.items()):
            atomic_write_text(self._resolve(path), source, encoding="utf-8")
            del self._dirty[path]
            written.append(path)
        if written:
            log.info("Flushed %d file(s): %s", len(written), ", ".join(written))
        return written

from __future__ import annotations

from cellbook.core.files import FileEntry, FileStore
from cellbook.logging_setup import log


class EditSync:
    """
    Controlled-editor wiring: text is always read from the store,
    every change is written straight back as one partial update.
    """

    def __init__(self, store: FileStore):
        self.store = store

    def source_for(self, file: FileEntry) -> str:
        return file.source

    def on_change(self, file: FileEntry, source: str) -> None:
        log.debug("update_file path=%s len=%d", file.path, len(source))
        self.store.update_file(file, {"source": source})

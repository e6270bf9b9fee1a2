import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from cellbook.core.files import FileEntry, FileStore


class RecordingStore(FileStore):
    """Minimal in-memory store that records every update_file call."""

    def __init__(self, opened: FileEntry | None = None):
        self.opened = opened
        self.updates: list[tuple[FileEntry, dict]] = []
        self.listeners = []

    def opened_file(self):
        return self.opened

    def update_file(self, file, attrs):
        self.updates.append((file, dict(attrs)))
        self.opened = FileEntry(path=file.path, source=attrs.get("source", file.source))
        for listener in list(self.listeners):
            listener()

    def subscribe(self, listener):
        self.listeners.append(listener)

    def unsubscribe(self, listener):
        self.listeners.remove(listener)

    def open(self, path, source=""):
        self.opened = FileEntry(path=path, source=source)
        for listener in list(self.listeners):
            listener()

    def close(self):
        self.opened = None
        for listener in list(self.listeners):
            listener()


@pytest.fixture
def store():
    return RecordingStore()


class RejectingStore(RecordingStore):
    """Records update_file calls but never applies them."""

    def update_file(self, file, attrs):
        self.updates.append((file, dict(attrs)))


@pytest.fixture
def rejecting_store():
    return RejectingStore()

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


class FileStoreError(RuntimeError):
    pass


@dataclass(frozen=True)
class FileEntry:
    path: str
    source: str = ""

    def __post_init__(self):
        if not self.path:
            raise ValueError("FileEntry.path must be non-empty")


StoreListener = Callable[[], None]


class FileStore:
    """
    Contract between the editing surface and whatever owns the files.
    The store is the single source of truth for `source`.
    """

    def opened_file(self) -> FileEntry | None:
        raise NotImplementedError

    def update_file(self, file: FileEntry, attrs: dict) -> None:
        """Partial update, e.g. update_file(f, {"source": "..."})."""
        raise NotImplementedError

    def subscribe(self, listener: StoreListener) -> None:
        raise NotImplementedError

    def unsubscribe(self, listener: StoreListener) -> None:
        raise NotImplementedError

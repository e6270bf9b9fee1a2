from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cellbook.core.files import FileEntry, FileStore
from cellbook.core.modes import LanguageMode, resolve_language_mode
from cellbook.editor.sync import EditSync
from cellbook.logging_setup import log

EMPTY_PLACEHOLDER = "Use the file explorer to open a file for editing"


class EditorState(Enum):
    EMPTY = "empty"
    EDITING = "editing"


@dataclass(frozen=True)
class EditorView:
    state: EditorState
    file: FileEntry | None = None
    mode: LanguageMode | None = None
    source: str | None = None
    # identity of the rendered surface; a new key means a full reset
    key: str | None = None
    placeholder: str | None = None

    @property
    def editable(self) -> bool:
        return self.state is EditorState.EDITING


class EditorController:
    """
    Empty/Editing state machine over the store's opened file.

    Holds no text of its own: render() derives everything from the store,
    text_changed() pushes user edits back through EditSync.
    """

    def __init__(self, store: FileStore, sync: EditSync | None = None):
        self.store = store
        self.sync = sync or EditSync(store)
        self._state = EditorState.EMPTY
        self._key: str | None = None

    @property
    def state(self) -> EditorState:
        return self._state

    def render(self) -> EditorView:
        file = self.store.opened_file()
        if file is None:
            self._transition(EditorState.EMPTY, None)
            return EditorView(state=EditorState.EMPTY, placeholder=EMPTY_PLACEHOLDER)

        self._transition(EditorState.EDITING, file.path)
        return EditorView(
            state=EditorState.EDITING,
            file=file,
            mode=resolve_language_mode(file.path),
            source=self.sync.source_for(file),
            key=file.path,
        )

    def text_changed(self, source: str) -> None:
        file = self.store.opened_file()
        if file is None:
            # no editable surface exists in Empty state
            return
        self.sync.on_change(file, source)

    def _transition(self, state: EditorState, key: str | None) -> None:
        if state is self._state and key == self._key:
            return
        log.info("Editor %s -> %s (file=%s)", self._state.value, state.value, key)
        self._state = state
        self._key = key

from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFontDatabase, QTextCursor
from PySide6.QtWidgets import (
    QLabel, QPlainTextEdit, QSplitter, QStackedWidget, QTextBrowser, QVBoxLayout, QWidget,
)

from cellbook.core.files import FileStore
from cellbook.core.modes import MARKDOWN
from cellbook.editor.controller import EditorController, EditorState, EditorView
from cellbook.editor.highlighter import ModeHighlighter
from cellbook.editor.preview import compute_preview_debounce_ms, render_preview_page
from cellbook.logging_setup import log
from cellbook.settings import (
    PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP,
    PREVIEW_DEBOUNCE_MS_DEFAULT,
    PREVIEW_DEBOUNCE_MS_MAX_ADD,
    PREVIEW_DEBOUNCE_MS_MIN,
    normalize_theme,
)
from cellbook.ui.qt_utils import blocked_signals


class EditorPane(QWidget):
    """
    Qt surface for EditorController.

    Text is pushed in from the store on every refresh (signals blocked) and
    user edits go out through controller.text_changed; the widget never
    keeps a copy of its own.
    """

    def __init__(self, store: FileStore, *, theme: str = "dark", parent=None):
        super().__init__(parent)
        self.controller = EditorController(store)
        self._store = store
        self._theme = normalize_theme(theme)
        self._key: str | None = None
        self._applying = False
        self.view: EditorView | None = None

        self.header = QLabel()
        self.header.setObjectName("editorHeader")

        self.placeholder = QLabel()
        self.placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.placeholder.setObjectName("editorPlaceholder")

        self.editor = QPlainTextEdit()
        self.editor.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.highlighter = ModeHighlighter(self.editor.document(), dark_mode=self._theme == "dark")

        self.preview = QTextBrowser()
        self.preview.setOpenExternalLinks(True)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 3)
        self.splitter.setStretchFactor(1, 2)

        self.stack = QStackedWidget()
        self.stack.addWidget(self.placeholder)
        self.stack.addWidget(self.splitter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 0, 12, 12)
        layout.addWidget(self.header)
        layout.addWidget(self.stack, 1)

        # Preview debounce so markdown isn't re-rendered on every keystroke
        self.preview_timer = QTimer(self)
        self.preview_timer.setSingleShot(True)
        self.preview_timer.setInterval(PREVIEW_DEBOUNCE_MS_DEFAULT)
        self.preview_timer.timeout.connect(self._render_preview)

        self.editor.textChanged.connect(self._on_text_changed)
        store.subscribe(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        view = self.controller.render()
        self.view = view

        if view.state is EditorState.EMPTY:
            self._key = None
            self.header.setText("")
            self.placeholder.setText(view.placeholder or "")
            self.preview_timer.stop()
            with self._applying_store_text():
                self.editor.clear()
            self.stack.setCurrentWidget(self.placeholder)
            return

        self.header.setText(view.file.path)
        if view.key != self._key:
            # different file: rebuild the surface from scratch
            self._key = view.key
            with self._applying_store_text():
                self.highlighter.set_mode(view.mode)
                self.editor.setPlainText(view.source)
                self.editor.document().clearUndoRedoStacks()
                self.editor.moveCursor(QTextCursor.MoveOperation.Start)
            self.preview.setVisible(view.mode == MARKDOWN)
            self._render_preview()
        elif self.editor.toPlainText() != view.source:
            with self._applying_store_text():
                self.editor.setPlainText(view.source)
        self.stack.setCurrentWidget(self.splitter)

    def apply_theme(self, theme: str) -> None:
        self._theme = normalize_theme(theme)
        with self._applying_store_text():
            self.highlighter.set_dark_mode(self._theme == "dark")
        self._render_preview()

    def detach(self) -> None:
        self._store.unsubscribe(self.refresh)

    @contextmanager
    def _applying_store_text(self):
        # rehighlight() and setPlainText() both emit textChanged
        self._applying = True
        try:
            with blocked_signals(self.editor):
                yield
        finally:
            self._applying = False

    def _on_text_changed(self) -> None:
        if self._applying or self.view is None or self.view.file is None:
            return
        text = self.editor.toPlainText()
        if text == self.view.source:
            return
        try:
            self.controller.text_changed(text)
        except Exception:
            log.exception("Edit was not accepted by the file store")
        if self.view is not None and self.view.mode == MARKDOWN:
            self.preview_timer.setInterval(
                compute_preview_debounce_ms(
                    len(text),
                    min_ms=PREVIEW_DEBOUNCE_MS_MIN,
                    max_add_ms=PREVIEW_DEBOUNCE_MS_MAX_ADD,
                    chars_per_step=PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP,
                    default_ms=PREVIEW_DEBOUNCE_MS_DEFAULT,
                )
            )
            self.preview_timer.start()

    def _render_preview(self) -> None:
        # renders what the store holds, not what the widget shows
        if self.view is None or self.view.mode != MARKDOWN:
            return
        try:
            self.preview.setHtml(render_preview_page(self.view.source or "", theme=self._theme))
        except Exception:
            log.exception("Failed to render markdown preview")

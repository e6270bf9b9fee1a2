from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings, Qt, QTimer
from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import (
    QFileDialog, QLineEdit, QListWidget, QMainWindow, QMessageBox, QScrollArea,
    QSplitter, QTabWidget, QVBoxLayout, QWidget,
)

from cellbook.core.languages import CodeLanguage
from cellbook.infra.workspace_store import WorkspaceFileStore
from cellbook.logging_setup import log
from cellbook.notebooks.store import NotebookList
from cellbook.settings import (
    APP_NAME,
    AUTOSAVE_DEBOUNCE_MS,
    SettingsKeys,
    get_str,
    normalize_language,
    normalize_theme,
)
from cellbook.ui.cards import NotebookGrid
from cellbook.ui.editor_pane import EditorPane
from cellbook.ui.qt_utils import blocked_signals


class CellbookWindow(QMainWindow):
    def __init__(
        self,
        *,
        workspace: Path | None = None,
        theme: str | None = None,
        default_language: str | None = None,
        settings: QSettings | None = None,
    ):
        super().__init__()
        self.setWindowTitle("cellbook")
        self._settings = settings or QSettings(APP_NAME, APP_NAME)

        # explicit arguments win over persisted values
        self._theme = normalize_theme(theme or get_str(self._settings, SettingsKeys.UI_THEME, "dark"))
        self._default_language = normalize_language(
            default_language or get_str(self._settings, SettingsKeys.DEFAULT_LANGUAGE, "typescript")
        )
        if workspace is None:
            saved = get_str(self._settings, SettingsKeys.WORKSPACE_DIR, "")
            workspace = Path(saved) if saved else Path.cwd()

        self.store = WorkspaceFileStore(workspace)
        self.notebooks = NotebookList()

        # ---- editor tab ----
        self.search = QLineEdit()
        self.search.setPlaceholderText("Filter files…")
        self.file_list = QListWidget()
        self.editor_pane = EditorPane(self.store, theme=self._theme)

        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(8, 8, 8, 8)
        left_layout.addWidget(self.search)
        left_layout.addWidget(self.file_list)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.addWidget(left)
        self.splitter.addWidget(self.editor_pane)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)

        # ---- notebooks tab ----
        self.grid = NotebookGrid(
            default_language=self._default_language,
            on_open=self.open_notebook,
            on_delete=self.delete_notebook,
            on_create=self.create_notebook,
        )
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid)

        self.tabs = QTabWidget()
        self.tabs.addTab(scroll, "Notebooks")
        self.tabs.addTab(self.splitter, "Editor")
        self.setCentralWidget(self.tabs)

        # Autosave debounce: the store keeps edits in memory until flushed
        self.save_timer = QTimer(self)
        self.save_timer.setInterval(AUTOSAVE_DEBOUNCE_MS)
        self.save_timer.setSingleShot(True)
        self.save_timer.timeout.connect(self.save_now)
        self.store.subscribe(self._on_store_changed)

        self.search.textChanged.connect(self.refresh_file_list)
        self.file_list.currentTextChanged.connect(self._on_select_file)

        self._build_menu()
        self._restore_geometry()
        self._apply_theme(self._theme, save=False)
        self._load_workspace(save=True)

    # ---- workspace / files ----

    def choose_workspace(self) -> None:
        d = QFileDialog.getExistingDirectory(self, "Open folder", str(self.store.root))
        if d:
            self._open_workspace_at(Path(d), save=True)

    def _open_workspace_at(self, root: Path, *, save: bool = True) -> None:
        self.save_now()
        self.editor_pane.detach()
        self.store.unsubscribe(self._on_store_changed)

        self.store = WorkspaceFileStore(root)
        self.store.subscribe(self._on_store_changed)
        old_pane = self.editor_pane
        self.editor_pane = EditorPane(self.store, theme=self._theme)
        self.splitter.replaceWidget(1, self.editor_pane)
        old_pane.deleteLater()

        self._load_workspace(save=save)

    def _load_workspace(self, *, save: bool) -> None:
        root = self.store.root
        log.info("Workspace selected: %s", root)
        if save:
            self._settings.setValue(SettingsKeys.WORKSPACE_DIR, str(root))
        self.refresh_file_list()

        last = get_str(self._settings, SettingsKeys.LAST_FILE, "")
        if last and (root / last).is_file():
            self.open_file(last)

    def refresh_file_list(self) -> None:
        q = (self.search.text() or "").strip().lower()
        current = self.store.opened_file()
        with blocked_signals(self.file_list):
            self.file_list.clear()
            for path in self.store.list_paths():
                if q and q not in path.lower():
                    continue
                self.file_list.addItem(path)
                if current is not None and path == current.path:
                    self.file_list.setCurrentRow(self.file_list.count() - 1)

    def _on_select_file(self, path: str) -> None:
        if path:
            self.open_file(path)

    def open_file(self, path: str) -> None:
        self.save_now()
        try:
            self.store.open_file(path)
        except Exception:
            log.exception("Failed to open file: %s", path)
            QMessageBox.warning(self, "Open file", f"Could not open {path}")
            return
        self._settings.setValue(SettingsKeys.LAST_FILE, path)
        self.tabs.setCurrentIndex(1)

    def close_file(self) -> None:
        self.save_now()
        self.store.close_file()
        with blocked_signals(self.file_list):
            self.file_list.clearSelection()

    def _on_store_changed(self) -> None:
        if self.store.dirty_paths:
            self.save_timer.start()

    def save_now(self) -> None:
        self.save_timer.stop()
        try:
            self.store.flush()
        except Exception:
            log.exception("Failed to write pending edits")

    # ---- notebooks ----

    def create_notebook(self, title: str, language: CodeLanguage) -> None:
        self.notebooks.create(title, language)
        self.grid.set_summaries(self.notebooks.summaries())
        self.grid.remount_form()

    def delete_notebook(self, notebook_id: str) -> None:
        summary = self.notebooks.get(notebook_id)
        if summary is None:
            return
        answer = QMessageBox.question(self, "Delete notebook", f"Delete “{summary.title}”?")
        if answer != QMessageBox.StandardButton.Yes:
            return
        self.notebooks.delete(notebook_id)
        self.grid.set_summaries(self.notebooks.summaries())

    def open_notebook(self, notebook_id: str) -> None:
        summary = self.notebooks.get(notebook_id)
        if summary is not None:
            log.info("Open notebook requested id=%s title=%r", notebook_id, summary.title)
            self.statusBar().showMessage(f"{summary.title} ({summary.language.display_name})", 3000)

    # ---- settings / menu ----

    def _apply_theme(self, name: str, *, save: bool = True) -> None:
        self._theme = normalize_theme(name)
        if hasattr(self, "_act_dark"):
            with blocked_signals(self._act_dark), blocked_signals(self._act_light):
                self._act_dark.setChecked(self._theme == "dark")
                self._act_light.setChecked(self._theme == "light")
        self.editor_pane.apply_theme(self._theme)
        if save:
            self._settings.setValue(SettingsKeys.UI_THEME, self._theme)

    def _apply_default_language(self, language: CodeLanguage) -> None:
        self._default_language = language
        self.grid.set_default_language(language)
        self.grid.remount_form()
        self._settings.setValue(SettingsKeys.DEFAULT_LANGUAGE, language.value)

    def _build_menu(self) -> None:
        menubar = self.menuBar()
        filem = menubar.addMenu("File")

        act_open = QAction("Open folder…", self)
        act_open.triggered.connect(self.choose_workspace)
        act_save = QAction("Save", self)
        act_save.setShortcut("Ctrl+S")
        act_save.triggered.connect(self.save_now)
        act_close = QAction("Close file", self)
        act_close.setShortcut("Ctrl+W")
        act_close.triggered.connect(self.close_file)

        filem.addAction(act_open)
        filem.addSeparator()
        filem.addAction(act_save)
        filem.addAction(act_close)

        viewm = menubar.addMenu("View")
        theme_group = QActionGroup(self)
        self._act_dark = QAction("Dark theme", self, checkable=True)
        self._act_light = QAction("Light theme", self, checkable=True)
        for act in (self._act_dark, self._act_light):
            theme_group.addAction(act)
            viewm.addAction(act)
        self._act_dark.triggered.connect(lambda: self._apply_theme("dark"))
        self._act_light.triggered.connect(lambda: self._apply_theme("light"))

        nbm = menubar.addMenu("Notebooks")
        lang_group = QActionGroup(self)
        for lang in CodeLanguage:
            act = QAction(f"New notebooks use {lang.display_name}", self, checkable=True)
            act.setChecked(lang is self._default_language)
            act.triggered.connect(lambda _checked=False, lang=lang: self._apply_default_language(lang))
            lang_group.addAction(act)
            nbm.addAction(act)

    def _restore_geometry(self) -> None:
        geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
        if geo:
            self.restoreGeometry(geo)
        else:
            self.resize(1100, 700)

    def closeEvent(self, event):  # type: ignore[override]
        """Persist pending edits and window geometry."""
        self.save_now()
        self._settings.setValue(SettingsKeys.UI_GEOMETRY, self.saveGeometry())
        super().closeEvent(event)

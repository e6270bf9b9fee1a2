from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter, QPen
from PySide6.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QStyle, QToolButton, QVBoxLayout, QWidget,
)

from cellbook.core.languages import CodeLanguage
from cellbook.core.titles import MAX_NOTEBOOK_TITLE_LENGTH
from cellbook.logging_setup import log
from cellbook.notebooks.cards import SummaryCard
from cellbook.notebooks.creation import CreateHandler, CreationForm
from cellbook.notebooks.models import NotebookSummary

CARD_MIN_WIDTH = 208
CARD_HEIGHT = 108
DASH_INSET = 10


class CardContainer(QFrame):
    """Card frame with the inner dashed guide lines. Emits clicked on a left click."""

    clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setMinimumWidth(CARD_MIN_WIDTH)
        self.setFixedHeight(CARD_HEIGHT)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.body = QVBoxLayout(self)
        self.body.setContentsMargins(20, 16, 20, 16)

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.clicked.emit()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def paintEvent(self, event):  # type: ignore[override]
        super().paintEvent(event)
        painter = QPainter(self)
        pen = QPen(self.palette().mid().color())
        pen.setDashPattern([8, 4])
        painter.setPen(pen)
        w, h = self.width(), self.height()
        painter.drawLine(0, DASH_INSET, w, DASH_INSET)
        painter.drawLine(0, h - DASH_INSET, w, h - DASH_INSET)
        painter.drawLine(DASH_INSET, 0, DASH_INSET, h)
        painter.drawLine(w - DASH_INSET, 0, w - DASH_INSET, h)
        painter.end()


class NotebookCard(CardContainer):
    def __init__(self, model: SummaryCard, parent=None):
        super().__init__(parent)
        self.model = model
        self.setProperty("running", model.running)

        self.title_label = QLabel(model.title)
        self.title_label.setObjectName("cardTitle")
        self.title_label.setWordWrap(True)

        self.status_label = QLabel(("● " if model.running else "") + model.status_text)
        self.status_label.setObjectName("cardStatus")

        self.language_label = QLabel(model.language_tag)
        self.language_label.setObjectName("cardLanguage")

        self.delete_button = QToolButton()
        self.delete_button.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_TrashIcon))
        self.delete_button.setToolTip("Delete notebook")
        self.delete_button.setAutoRaise(True)
        self.delete_button.clicked.connect(self._on_delete_clicked)

        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(self.status_label)
        row.addStretch(1)
        row.addWidget(self.language_label)
        row.addWidget(self.delete_button)

        self.body.addWidget(self.title_label)
        self.body.addStretch(1)
        self.body.addLayout(row)

        self.set_hovered(False)
        self.clicked.connect(self.model.activate)

    def set_hovered(self, hovered: bool) -> None:
        # the language tag and the delete button share one slot
        self.language_label.setVisible(not hovered)
        self.delete_button.setVisible(hovered)

    def enterEvent(self, event):  # type: ignore[override]
        self.set_hovered(True)
        super().enterEvent(event)

    def leaveEvent(self, event):  # type: ignore[override]
        self.set_hovered(False)
        super().leaveEvent(event)

    def _on_delete_clicked(self) -> None:
        # the button consumes the mouse event, so the card's clicked never fires
        self.model.delete()


class CreateNotebookCard(CardContainer):
    submitRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.title_input = QLineEdit()
        self.title_input.setObjectName("cardTitleInput")
        self.title_input.setMaxLength(MAX_NOTEBOOK_TITLE_LENGTH)
        self.title_input.setPlaceholderText("New Notebook")
        self.title_input.setFrame(False)
        self.title_input.returnPressed.connect(self.submitRequested)

        self.plus_label = QLabel("+")
        self.plus_label.setObjectName("cardPlus")

        self.body.addWidget(self.title_input)
        self.body.addStretch(1)
        self.body.addWidget(self.plus_label)

        self.clicked.connect(lambda: self.title_input.setFocus(Qt.FocusReason.MouseFocusReason))


class LanguageButton(QPushButton):
    def __init__(self, language: CodeLanguage, tooltip: str, parent=None):
        super().__init__(language.tag, parent)
        self.language = language
        self.setToolTip(tooltip)
        self.setFlat(True)
        self.setCheckable(True)
        self.setAutoExclusive(False)


class CreateNotebookForm(QWidget):
    """Creation card + JS/TS toggle + Create button over a CreationForm."""

    def __init__(self, default_language: CodeLanguage | str, on_create: CreateHandler, parent=None):
        super().__init__(parent)
        self.form = CreationForm(default_language, on_create)
        self.setMaximumWidth(CARD_MIN_WIDTH + 6)

        self.card = CreateNotebookCard()
        self.card.title_input.textChanged.connect(self._on_title_changed)
        self.card.submitRequested.connect(self.submit)

        self.language_buttons: dict[CodeLanguage, LanguageButton] = {}
        toggle = QHBoxLayout()
        toggle.setSpacing(6)
        for opt in self.form.language_options():
            btn = LanguageButton(opt.language, opt.tooltip)
            btn.clicked.connect(lambda _checked=False, lang=opt.language: self.select_language(lang))
            self.language_buttons[opt.language] = btn
            toggle.addWidget(btn)

        self.create_button = QPushButton("Create")
        self.create_button.clicked.connect(self.submit)

        footer = QHBoxLayout()
        footer.setContentsMargins(0, 0, 0, 0)
        footer.addLayout(toggle)
        footer.addStretch(1)
        footer.addWidget(self.create_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)
        layout.addWidget(self.card)
        layout.addLayout(footer)

        self._sync()

    @property
    def title_input(self) -> QLineEdit:
        return self.card.title_input

    def select_language(self, language: CodeLanguage) -> None:
        self.form.select_language(language)
        self._sync()

    def submit(self) -> None:
        self.form.submit()

    def _on_title_changed(self, text: str) -> None:
        self.form.set_title(text)
        self._sync()

    def _sync(self) -> None:
        self.create_button.setEnabled(self.form.can_submit)
        for opt in self.form.language_options():
            self.language_buttons[opt.language].setChecked(opt.selected)


class NotebookGrid(QWidget):
    """Creation form first, then one card per summary in the order given."""

    def __init__(
        self,
        *,
        default_language: CodeLanguage | str,
        on_open: Callable[[str], None],
        on_delete: Callable[[str], None],
        on_create: CreateHandler,
        columns: int = 4,
        parent=None,
    ):
        super().__init__(parent)
        self._default_language = CodeLanguage.parse(default_language)
        self._on_open = on_open
        self._on_delete = on_delete
        self._on_create = on_create
        self._columns = max(1, columns)

        self.grid = QGridLayout(self)
        self.grid.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.grid.setSpacing(16)

        self.form: CreateNotebookForm | None = None
        self.cards: list[NotebookCard] = []
        self.remount_form()

    def set_default_language(self, language: CodeLanguage | str) -> None:
        self._default_language = CodeLanguage.parse(language)

    def remount_form(self) -> None:
        """Replace the creation form with a fresh one (empty draft)."""
        if self.form is not None:
            self.grid.removeWidget(self.form)
            self.form.deleteLater()
        self.form = CreateNotebookForm(self._default_language, self._on_create)
        self.grid.addWidget(self.form, 0, 0, Qt.AlignmentFlag.AlignTop)

    def set_summaries(self, summaries: list[NotebookSummary]) -> None:
        for card in self.cards:
            self.grid.removeWidget(card)
            card.deleteLater()
        self.cards = []

        for i, summary in enumerate(summaries, start=1):
            model = SummaryCard(summary, on_open=self._on_open, on_delete=self._on_delete)
            card = NotebookCard(model)
            self.cards.append(card)
            self.grid.addWidget(card, i // self._columns, i % self._columns, Qt.AlignmentFlag.AlignTop)
        log.debug("Notebook grid rendered: %d card(s)", len(self.cards))

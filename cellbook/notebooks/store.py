from __future__ import annotations

import uuid

from cellbook.core.languages import CodeLanguage
from cellbook.logging_setup import log
from cellbook.notebooks.models import NotebookSummary


class NotebookList:
    """In-memory notebook summaries, kept in insertion order."""

    def __init__(self, summaries: list[NotebookSummary] | None = None):
        self._items: dict[str, NotebookSummary] = {s.id: s for s in summaries or []}

    def summaries(self) -> list[NotebookSummary]:
        return list(self._items.values())

    def get(self, notebook_id: str) -> NotebookSummary | None:
        return self._items.get(notebook_id)

    def create(self, title: str, language: CodeLanguage | str) -> NotebookSummary:
        summary = NotebookSummary(
            id=uuid.uuid4().hex,
            title=title.strip(),
            cell_count=0,
            language=CodeLanguage.parse(language),
        )
        self._items[summary.id] = summary
        log.info("Notebook created id=%s title=%r", summary.id, summary.title)
        return summary

    def delete(self, notebook_id: str) -> bool:
        removed = self._items.pop(notebook_id, None)
        if removed is not None:
            log.info("Notebook deleted id=%s", notebook_id)
        return removed is not None


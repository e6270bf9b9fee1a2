from __future__ import annotations

from typing import Callable

from cellbook.notebooks.models import NotebookSummary

RUNNING_LABEL = "Running"


def cell_count_label(count: int) -> str:
    return f"{count} {'Cell' if count == 1 else 'Cells'}"


class SummaryCard:
    """
    What a notebook card shows and which intents it emits.
    Widgets render from this; they never look at the summary directly.
    """

    def __init__(
        self,
        summary: NotebookSummary,
        *,
        on_open: Callable[[str], None],
        on_delete: Callable[[str], None],
    ):
        self.summary = summary
        self._on_open = on_open
        self._on_delete = on_delete

    @property
    def title(self) -> str:
        return self.summary.title

    @property
    def running(self) -> bool:
        return self.summary.running

    @property
    def status_text(self) -> str:
        # running state and cell count are never shown together
        if self.summary.running:
            return RUNNING_LABEL
        return cell_count_label(self.summary.cell_count)

    @property
    def language_tag(self) -> str:
        return self.summary.language.tag

    def activate(self) -> None:
        self._on_open(self.summary.id)

    def delete(self) -> None:
        self._on_delete(self.summary.id)

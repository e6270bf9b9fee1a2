from .cards import SummaryCard, cell_count_label
from .creation import CreationForm
from .models import CreationDraft, NotebookSummary
from .store import NotebookList

__all__ = ["SummaryCard",
           "cell_count_label",
           "CreationForm",
           "CreationDraft",
           "NotebookSummary",
           "NotebookList",
           ]

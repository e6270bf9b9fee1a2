from __future__ import annotations

from dataclasses import dataclass

from cellbook.core.languages import CodeLanguage


@dataclass(frozen=True)
class NotebookSummary:
    id: str
    title: str
    running: bool = False
    cell_count: int = 0
    language: CodeLanguage = CodeLanguage.TYPESCRIPT

    def __post_init__(self):
        if self.cell_count < 0:
            raise ValueError("cell_count must be non-negative")
        object.__setattr__(self, "language", CodeLanguage.parse(self.language))


@dataclass
class CreationDraft:
    title: str = ""
    language: CodeLanguage = CodeLanguage.TYPESCRIPT

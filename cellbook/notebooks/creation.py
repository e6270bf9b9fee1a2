from __future__ import annotations

from typing import Callable, NamedTuple

from cellbook.core.languages import CodeLanguage
from cellbook.core.titles import clamp_title_input, is_valid_notebook_title
from cellbook.logging_setup import log
from cellbook.notebooks.models import CreationDraft

CreateHandler = Callable[[str, CodeLanguage], None]


class LanguageOption(NamedTuple):
    language: CodeLanguage
    tag: str
    tooltip: str
    selected: bool


class CreationForm:
    """
    Draft title + language, gated submission.

    The form does not reset itself after a successful submit; callers that
    want a fresh form build a new one.
    """

    def __init__(self, default_language: CodeLanguage | str, on_create: CreateHandler):
        self.draft = CreationDraft(title="", language=CodeLanguage.parse(default_language))
        self._on_create = on_create

    @property
    def title(self) -> str:
        return self.draft.title

    @property
    def language(self) -> CodeLanguage:
        return self.draft.language

    def set_title(self, raw: str) -> None:
        self.draft.title = clamp_title_input(raw)

    def select_language(self, language: CodeLanguage | str) -> None:
        self.draft.language = CodeLanguage.parse(language)

    @property
    def can_submit(self) -> bool:
        return is_valid_notebook_title(self.draft.title)

    def submit(self) -> bool:
        if not self.can_submit:
            return False
        log.info("Creating notebook title=%r language=%s", self.draft.title, self.draft.language.value)
        self._on_create(self.draft.title, self.draft.language)
        return True

    def language_options(self) -> list[LanguageOption]:
        return [
            LanguageOption(
                language=lang,
                tag=lang.tag,
                tooltip=f"{lang.display_name} Notebook",
                selected=lang is self.draft.language,
            )
            for lang in CodeLanguage
        ]

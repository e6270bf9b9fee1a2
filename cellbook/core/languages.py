from __future__ import annotations

from enum import Enum


class CodeLanguage(str, Enum):
    """The two notebook languages. No other value is valid."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def tag(self) -> str:
        return "JS" if self is CodeLanguage.JAVASCRIPT else "TS"

    @property
    def display_name(self) -> str:
        return "JavaScript" if self is CodeLanguage.JAVASCRIPT else "TypeScript"

    @classmethod
    def parse(cls, value: "CodeLanguage | str") -> "CodeLanguage":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unsupported notebook language: {value!r}") from None

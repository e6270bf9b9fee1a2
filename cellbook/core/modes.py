from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageMode:
    """Syntax configuration for the editor. Purely presentational."""

    name: str
    jsx: bool = False
    typescript: bool = False


JSON = LanguageMode("json")
CSS = LanguageMode("css")
HTML = LanguageMode("html")
MARKDOWN = LanguageMode("markdown")
JAVASCRIPT = LanguageMode("javascript", jsx=True)
TYPESCRIPT = LanguageMode("javascript", jsx=True, typescript=True)

_MODES_BY_EXT: dict[str, LanguageMode] = {
    ".json": JSON,
    ".css": CSS,
    ".html": HTML,
    ".md": MARKDOWN,
    ".markdown": MARKDOWN,
    ".js": JAVASCRIPT,
    ".cjs": JAVASCRIPT,
    ".mjs": JAVASCRIPT,
    ".jsx": JAVASCRIPT,
    ".ts": TYPESCRIPT,
    ".cts": TYPESCRIPT,
    ".mts": TYPESCRIPT,
    ".tsx": TYPESCRIPT,
}


def extname(path: str) -> str:
    """
    Extension of the last path segment, dot included ("a/b.css" -> ".css").
    Dotfiles such as ".env" have no extension.
    """
    name = (path or "").replace("\\", "/").rsplit("/", 1)[-1]
    idx = name.rfind(".")
    if idx <= 0:
        return ""
    return name[idx:]


def resolve_language_mode(path: str) -> LanguageMode | None:
    """
    path -> syntax mode, or None for plain text.
    Matching is exact and case-sensitive: "x.JSON" is plain text.
    """
    return _MODES_BY_EXT.get(extname(path))

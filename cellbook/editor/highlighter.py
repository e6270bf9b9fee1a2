from __future__ import annotations

import re

from PySide6.QtGui import QColor, QFont, QSyntaxHighlighter, QTextCharFormat

from cellbook.core.modes import LanguageMode

JS_KEYWORDS = (
    "async await break case catch class const continue debugger default delete do "
    "else export extends finally for from function if import in instanceof let new "
    "of return static super switch this throw try typeof var void while yield"
).split()
TS_KEYWORDS = (
    "abstract as declare enum implements interface keyof namespace private "
    "protected public readonly satisfies type"
).split()
LITERALS = ("true", "false", "null", "undefined")

DARK_COLORS = {
    "keyword": "#569cd6",
    "string": "#ce9178",
    "comment": "#6a9955",
    "number": "#b5cea8",
    "tag": "#569cd6",
    "attribute": "#9cdcfe",
    "property": "#9cdcfe",
    "heading": "#dcdcaa",
}
LIGHT_COLORS = {
    "keyword": "#0000ff",
    "string": "#a31515",
    "comment": "#008000",
    "number": "#098658",
    "tag": "#800000",
    "attribute": "#e50000",
    "property": "#e50000",
    "heading": "#795e26",
}

_STRING_DQ = re.compile(r'"(?:[^"\\]|\\.)*"')
_STRING_SQ = re.compile(r"'(?:[^'\\]|\\.)*'")
_STRING_BT = re.compile(r"`(?:[^`\\]|\\.)*`")
_NUMBER = re.compile(r"\b[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?\b")


def _words(words) -> re.Pattern:
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")


def highlight_rules(mode: LanguageMode | None) -> list[tuple[re.Pattern, str]]:
    """
    Single-line rules for a mode, in application order (later rules win).
    Returns [] for plain text.
    """
    if mode is None:
        return []

    if mode.name == "json":
        return [
            (_NUMBER, "number"),
            (_words(("true", "false", "null")), "keyword"),
            (_STRING_DQ, "string"),
            (re.compile(r'(?P<hl>"(?:[^"\\]|\\.)*")\s*:'), "property"),
        ]
    if mode.name == "css":
        return [
            (_NUMBER, "number"),
            (re.compile(r"(?P<hl>[a-zA-Z-]+)\s*:"), "property"),
            (re.compile(r"@[a-zA-Z-]+"), "keyword"),
            (_STRING_DQ, "string"),
            (_STRING_SQ, "string"),
            (re.compile(r"/\*.*?\*/"), "comment"),
        ]
    if mode.name == "html":
        return [
            (re.compile(r"</?(?P<hl>[a-zA-Z][a-zA-Z0-9-]*)"), "tag"),
            (re.compile(r"\s(?P<hl>[a-zA-Z-:]+)="), "attribute"),
            (_STRING_DQ, "string"),
            (_STRING_SQ, "string"),
            (re.compile(r"<!--.*?-->"), "comment"),
        ]
    if mode.name == "markdown":
        return [
            (re.compile(r"^#{1,6}\s.*$"), "heading"),
            (re.compile(r"(\*\*|__)[^*_]+\1"), "keyword"),
            (re.compile(r"`[^`]+`"), "string"),
            (re.compile(r"\[[^\]]*\]\([^)]*\)"), "attribute"),
        ]

    keywords = JS_KEYWORDS + (TS_KEYWORDS if mode.typescript else [])
    rules = [
        (_NUMBER, "number"),
        (_words(keywords), "keyword"),
        (_words(LITERALS), "keyword"),
    ]
    if mode.jsx:
        rules.append((re.compile(r"</?(?P<hl>[A-Za-z][A-Za-z0-9.]*)(?=[\s/>])"), "tag"))
    rules += [
        (_STRING_DQ, "string"),
        (_STRING_SQ, "string"),
        (_STRING_BT, "string"),
        (re.compile(r"//.*$"), "comment"),
    ]
    return rules


def _multiline_comment_delims(mode: LanguageMode | None) -> tuple[str, str] | None:
    if mode is None or mode.name in ("json", "markdown"):
        return None
    if mode.name == "html":
        return "<!--", "-->"
    return "/*", "*/"


class ModeHighlighter(QSyntaxHighlighter):
    """Regex highlighter for the editor document, driven by a LanguageMode."""

    def __init__(self, document, mode: LanguageMode | None = None, *, dark_mode: bool = True):
        super().__init__(document)
        self.mode = mode
        self.dark_mode = dark_mode
        self._rules = highlight_rules(mode)
        self._comment = _multiline_comment_delims(mode)
        self._setup_formats()

    def _setup_formats(self) -> None:
        colors = DARK_COLORS if self.dark_mode else LIGHT_COLORS
        self.formats = {}
        for name, color in colors.items():
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(color))
            if name in ("keyword", "heading"):
                fmt.setFontWeight(QFont.Weight.Bold)
            self.formats[name] = fmt

    def set_mode(self, mode: LanguageMode | None) -> None:
        self.mode = mode
        self._rules = highlight_rules(mode)
        self._comment = _multiline_comment_delims(mode)
        self.rehighlight()

    def set_dark_mode(self, dark_mode: bool) -> None:
        self.dark_mode = dark_mode
        self._setup_formats()
        self.rehighlight()

    def highlightBlock(self, text):  # type: ignore[override]
        for pattern, format_name in self._rules:
            for match in pattern.finditer(text):
                start, end = match.span("hl") if "hl" in pattern.groupindex else match.span()
                self.setFormat(start, end - start, self.formats[format_name])
        self._highlight_multiline_comment(text)

    def _highlight_multiline_comment(self, text: str) -> None:
        self.setCurrentBlockState(0)
        if not self._comment:
            return
        open_, close = self._comment

        if self.previousBlockState() == 1:
            start, search_from = 0, 0
        else:
            start = text.find(open_)
            search_from = start + len(open_)
        while start >= 0:
            end = text.find(close, search_from)
            if end == -1:
                self.setCurrentBlockState(1)
                length = len(text) - start
            else:
                length = end - start + len(close)
            self.setFormat(start, length, self.formats["comment"])
            start = text.find(open_, start + length)
            search_from = start + len(open_)

from __future__ import annotations

import bleach
import markdown as md

MD_EXTENSIONS = ["fenced_code", "tables", "toc"]

ALLOWED_TAGS = [
    "a", "p", "br", "hr",
    "strong", "em", "code", "pre", "blockquote",
    "ul", "ol", "li",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "table", "thead", "tbody", "tr", "th", "td",
]
ALLOWED_ATTRS = {
    "a": ["href", "title"],
    "th": ["align"], "td": ["align"],
    # anchors from the 'toc' extension
    "h1": ["id"], "h2": ["id"], "h3": ["id"],
    "h4": ["id"], "h5": ["id"], "h6": ["id"],
}
ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

PAGE_CSS = {
    "dark": """
        body { font-family: sans-serif; line-height: 1.5; color: #d4d4d4; background: #1e1e1e; }
        code, pre { background: #2d2d2d; }
        a { color: #569cd6; text-decoration: none; }
    """,
    "light": """
        body { font-family: sans-serif; line-height: 1.5; color: #1e1e1e; background: #ffffff; }
        code, pre { background: #f5f5f5; }
        a { color: #0b57d0; text-decoration: none; }
    """,
}


def sanitize_rendered_html(rendered_html: str) -> str:
    """Markdown may carry raw HTML; strip anything that is not plain formatting."""
    return bleach.clean(
        rendered_html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )


def render_markdown_to_safe_html(text: str) -> str:
    return sanitize_rendered_html(md.markdown(text, extensions=MD_EXTENSIONS))


def render_preview_page(text: str, *, theme: str = "dark") -> str:
    css = PAGE_CSS.get(theme, PAGE_CSS["dark"])
    return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <style>{css}</style>
</head>
<body>{render_markdown_to_safe_html(text)}</body>
</html>
"""


def compute_preview_debounce_ms(
    txt_len: int,
    *,
    min_ms: int,
    max_add_ms: int,
    chars_per_step: int,
    default_ms: int,
) -> int:
    """
    Debounce for preview render.
    Larger files => render less frequently.
    """
    if txt_len < 0 or min_ms < 0 or max_add_ms < 0 or chars_per_step <= 0:
        return default_ms

    steps = txt_len // chars_per_step
    add_ms = min(max_add_ms, steps * min_ms)
    return min_ms + add_ms

from cellbook.editor.preview import (
    compute_preview_debounce_ms,
    render_markdown_to_safe_html,
    render_preview_page,
)
from cellbook.settings import (
    PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP,
    PREVIEW_DEBOUNCE_MS_DEFAULT,
    PREVIEW_DEBOUNCE_MS_MAX_ADD,
    PREVIEW_DEBOUNCE_MS_MIN,
)


def _debounce(n):
    return compute_preview_debounce_ms(
        n,
        min_ms=PREVIEW_DEBOUNCE_MS_MIN,
        max_add_ms=PREVIEW_DEBOUNCE_MS_MAX_ADD,
        chars_per_step=PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP,
        default_ms=PREVIEW_DEBOUNCE_MS_DEFAULT,
    )


def test_compute_preview_debounce_ms():
    assert _debounce(-1) == 350
    assert _debounce(100) == 300
    assert _debounce(400) == 600
    assert _debounce(800) == 800
    assert _debounce(100_000) == 800


def test_markdown_is_rendered():
    out = render_markdown_to_safe_html("# Title\n\n**bold**")
    assert "<strong>bold</strong>" in out
    assert "Title</h1>" in out


def test_script_is_stripped():
    out = render_markdown_to_safe_html("hi <script>alert(1)</script>")
    assert "<script" not in out


def test_javascript_links_are_dropped():
    out = render_markdown_to_safe_html("[x](javascript:void)")
    assert "javascript:" not in out


def test_preview_page_theme():
    assert "#1e1e1e" in render_preview_page("x", theme="dark")
    assert "#ffffff" in render_preview_page("x", theme="light")

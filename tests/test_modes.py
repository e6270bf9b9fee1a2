import pytest

from cellbook.core import modes
from cellbook.core.modes import extname, resolve_language_mode


@pytest.mark.parametrize("path", ["a.js", "src/b.cjs", "c.mjs", "components/App.jsx"])
def test_javascript_family(path):
    mode = resolve_language_mode(path)
    assert mode == modes.JAVASCRIPT
    assert mode.jsx is True
    assert mode.typescript is False


@pytest.mark.parametrize("path", ["a.ts", "b.cts", "c.mts", "src/App.tsx"])
def test_typescript_family(path):
    mode = resolve_language_mode(path)
    assert mode == modes.TYPESCRIPT
    assert mode.jsx is True
    assert mode.typescript is True


def test_other_known_extensions():
    assert resolve_language_mode("package.json") == modes.JSON
    assert resolve_language_mode("styles/app.css") == modes.CSS
    assert resolve_language_mode("public/index.html") == modes.HTML
    assert resolve_language_mode("README.md") == modes.MARKDOWN
    assert resolve_language_mode("notes.markdown") == modes.MARKDOWN


@pytest.mark.parametrize("path", ["Makefile", "a.py", "a.htm", "a.txt", "archive.tar.gz", "x.", ".env"])
def test_unknown_or_missing_extension_is_plain_text(path):
    assert resolve_language_mode(path) is None


def test_matching_is_case_sensitive():
    assert resolve_language_mode("DATA.JSON") is None
    assert resolve_language_mode("App.TSX") is None


def test_extension_comes_from_last_segment():
    assert extname("some.dir/Makefile") == ""
    assert extname("some.dir/app.css") == ".css"
    assert extname("a/b/c.d.ts") == ".ts"
    assert resolve_language_mode("v1.2/config") is None


def test_resolution_is_deterministic():
    assert resolve_language_mode("x.css") is resolve_language_mode("x.css")

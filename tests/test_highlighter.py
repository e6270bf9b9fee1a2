from cellbook.core import modes
from cellbook.editor.highlighter import highlight_rules


def _tokens(mode, text):
    found = []
    for pattern, token in highlight_rules(mode):
        for m in pattern.finditer(text):
            span = m.span("hl") if "hl" in pattern.groupindex else m.span()
            found.append((text[span[0]:span[1]], token))
    return found


def test_plain_text_has_no_rules():
    assert highlight_rules(None) == []


def test_typescript_keywords_only_in_ts_mode():
    js = _tokens(modes.JAVASCRIPT, "interface Foo {}")
    ts = _tokens(modes.TYPESCRIPT, "interface Foo {}")
    assert ("interface", "keyword") not in js
    assert ("interface", "keyword") in ts


def test_jsx_tags():
    assert ("div", "tag") in _tokens(modes.JAVASCRIPT, "return <div className='a'/>")


def test_json_property_and_css_property():
    assert ('"name"', "property") in _tokens(modes.JSON, '{"name": "x"}')
    assert ("color", "property") in _tokens(modes.CSS, "body{color:red}")

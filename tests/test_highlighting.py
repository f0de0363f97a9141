from docrender.highlighting import (
    PLAINTEXT,
    highlight,
    highlight_inline,
    highlight_stylesheet,
    is_supported_language,
)


def test_known_language_is_tokenized():
    result = highlight("def f():\n    return 1", "python")
    assert result.language == "python"
    assert "<span" in result.html
    assert "return" in result.html


def test_unknown_language_falls_back_to_plaintext():
    result = highlight("some <text>", "nosuchlang")
    assert result.language == PLAINTEXT
    assert "&lt;text&gt;" in result.html


def test_missing_language_falls_back_to_plaintext():
    assert highlight("x = 1", None).language == PLAINTEXT
    assert highlight("x = 1", "").language == PLAINTEXT


def test_is_supported_language():
    assert is_supported_language("python")
    assert is_supported_language("JS")
    assert not is_supported_language("nosuchlang")
    assert not is_supported_language(None)


def test_inline_highlight_has_no_trailing_newline():
    html = highlight_inline("echo hi")
    assert not html.endswith("\n")
    assert "echo" in html


def test_stylesheet_unknown_style_does_not_fail():
    css = highlight_stylesheet("no-such-style")
    assert ".hljs" in css

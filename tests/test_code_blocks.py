from docrender.models import CodeFence


def test_fence_info_string_split():
    fence = CodeFence.from_info("python   app/main.py", "x")
    assert fence.language == "python"
    assert fence.filename == "app/main.py"

    bare = CodeFence.from_info("", "x")
    assert bare.language is None
    assert bare.filename is None


def test_code_fence_has_header_and_highlighting(render):
    _, soup = render("```python app.py\ndef f():\n    return 1\n```")
    pre = soup.find("pre")
    header = pre.find("div", class_="code-header")
    assert header.find("div", class_="filename").get_text().strip() == "app.py"
    assert header.find("div", class_="langname").get_text() == "python"
    code = pre.find("code")
    assert code["class"] == ["hljs", "python"]
    assert code.find("span") is not None
    assert code.get_text() == "def f():\n    return 1"


def test_unknown_language_renders_plaintext_body(render):
    _, soup = render("```nosuchlang\nhello world\n```")
    code = soup.find("pre").find("code")
    assert "plaintext" in code["class"]
    assert code.get_text() == "hello world"
    assert soup.find("div", class_="langname").get_text() == "nosuchlang"


def test_fence_without_language(render):
    _, soup = render("```\nplain\n```")
    code = soup.find("pre").find("code")
    assert "plaintext" in code["class"]
    assert code.get_text() == "plain"


def test_tilde_fence(render):
    _, soup = render("~~~bash\necho hi\n~~~")
    assert "bash" in soup.find("code")["class"]


def test_markup_inside_fence_is_escaped(render):
    _, soup = render("```html\n<script>alert(1)</script>\n```")
    assert soup.find("script") is None
    assert "<script>alert(1)</script>" in soup.find("code").get_text()


def test_headings_inside_fence_are_not_collected(render):
    document, soup = render("```markdown\n# Not a heading\n```")
    assert soup.find("h1") is None
    assert document.headings == ()


def test_mermaid_passes_source_through(render):
    source = "graph TD; A-->B;"
    _, soup = render(f"```mermaid\n{source}\n```")
    diagram = soup.find("div", class_="mermaid")
    assert diagram.get_text() == source
    assert diagram["id"] == "mermaid-0"
    assert diagram.find("span") is None
    assert soup.find("pre") is None


def test_mermaid_ids_are_sequential_and_deterministic(render):
    text = "```mermaid\ngraph TD; A-->B;\n```\n\n```mermaid\ngraph LR; C-->D;\n```"
    first, soup = render(text)
    assert [d["id"] for d in soup.find_all("div", class_="mermaid")] == ["mermaid-0", "mermaid-1"]
    second, _ = render(text)
    assert first.html == second.html


def test_inline_code_is_shell_highlighted(render):
    _, soup = render("Run `ls -la | grep md` now.")
    code = soup.find("code")
    assert code["class"] == ["whitespace-break-spaces"]
    assert code.get_text() == "ls -la | grep md"


def test_double_backtick_span(render):
    _, soup = render("Use ``a `tick` here`` please.")
    assert soup.find("code").get_text() == "a `tick` here"


def test_lone_backtick_renders_as_text(render):
    _, soup = render("a ` b")
    assert "a ` b" in soup.get_text()
    assert soup.find("code") is None


def test_unbalanced_backticks_do_not_fail(render):
    for text in ["`", "``", "```"]:
        document, _ = render(text)
        assert isinstance(document.html, str)


def test_inline_code_span_after_text(render):
    _, soup = render("Run `ls`")
    code = soup.find("code")
    assert code["class"] == ["whitespace-break-spaces"]
    assert code.get_text() == "ls"


def test_inline_code_special_characters_escaped_once(render):
    _, soup = render("Try `a < b && echo ok`.")
    assert soup.find("code").get_text() == "a < b && echo ok"


def test_code_fence_body_has_no_trailing_newline(render):
    _, soup = render("```python\nx = 1\n```")
    assert soup.find("pre").find("code").get_text() == "x = 1"

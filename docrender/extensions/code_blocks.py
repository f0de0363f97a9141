# docrender/extensions/code_blocks.py
"""
A Markdown extension that renders code with Pygments highlighting.

Fenced blocks:

    ```python app/main.py
    print("hi")
    ```

- The info string is split into a language tag and an optional filename.
- The block gets a header bar (window dots, filename, language name) followed
  by the highlighted code. Unknown languages are highlighted as plain text.
- ``mermaid`` fences are not highlighted: the diagram source is emitted as the
  text of a ``<div class="mermaid">`` for client-side rendering.

Inline code spans are always highlighted with the shell grammar.
"""

from __future__ import annotations

import logging
import re
from html import escape, unescape
from textwrap import dedent

from markdown.extensions import Extension
from markdown.inlinepatterns import BACKTICK_RE, BacktickInlineProcessor
from markdown.preprocessors import Preprocessor

from ..highlighting import INLINE_LANGUAGE, highlight, highlight_inline
from ..models import CodeFence

logger = logging.getLogger(__name__)

MERMAID = "mermaid"

WINDOW_DOTS = (
    '<div class="size-[12px] bg-red-600 rounded-full"></div> '
    '<div class="size-[12px] bg-yellow-600 rounded-full"></div> '
    '<div class="size-[12px] bg-green-600 rounded-full"></div>'
)


def render_code_header(fence: CodeFence) -> str:
    filename = escape(fence.filename) if fence.filename else ""
    language = escape(fence.language) if fence.language else ""
    return (
        '<div class="flex justify-between items-center code-header">'
        f'<div class="filename flex items-center gap-1">{WINDOW_DOTS}{filename}</div>'
        f'<div class="langname">{language}</div>'
        "</div>"
    )


def render_mermaid(fence: CodeFence, index: int) -> str:
    return f'<div class="mermaid" id="mermaid-{index}">{escape(fence.source, quote=False)}</div>'


def render_code_fence(fence: CodeFence) -> str:
    result = highlight(fence.source, fence.language)
    body = result.html
    if body.endswith("\n") and not fence.source.endswith("\n"):
        body = body[:-1]
    return (
        f"<pre>{render_code_header(fence)}"
        f'<code class="hljs {escape(result.language)}">{body}</code></pre>'
    )


class FencedCodePreprocessor(Preprocessor):
    FENCED_BLOCK_RE = re.compile(
        dedent(
            r"""
            (?P<fence>^(?:~{3,}|`{3,}))[ ]*   # opening fence
            (?P<info>[^`\n]*)\n               # info string: language and filename
            (?P<code>.*?)(?<=\n)              # code
            (?P=fence)[ ]*$                   # closing fence
            """
        ),
        re.MULTILINE | re.DOTALL | re.VERBOSE,
    )

    def __init__(self, md, extension: "CodeBlockExtension"):
        super().__init__(md)
        self.extension = extension

    def run(self, lines):
        text = "\n".join(lines)
        while True:
            m = self.FENCED_BLOCK_RE.search(text)
            if not m:
                break

            source = m.group("code")
            if source.endswith("\n"):
                source = source[:-1]
            fence = CodeFence.from_info(m.group("info"), source)

            if fence.language and fence.language.lower() == MERMAID:
                html = render_mermaid(fence, self.extension.next_diagram_index())
            else:
                html = render_code_fence(fence)

            placeholder = self.md.htmlStash.store(html)
            text = f"{text[:m.start()]}\n\n{placeholder}\n\n{text[m.end():]}"
        return text.split("\n")


class ShellCodeSpanProcessor(BacktickInlineProcessor):
    """Backtick code spans rendered as highlighted shell snippets."""

    def __init__(self, pattern, md, language: str = INLINE_LANGUAGE):
        super().__init__(pattern)
        self.md = md
        self.language = language

    def handleMatch(self, m, data):
        el, start, end = super().handleMatch(m, data)
        if getattr(el, "tag", None) != self.tag:
            return el, start, end

        # The base processor has already escaped the span text.
        highlighted = highlight_inline(unescape(el.text or ""), self.language)
        html = f'<code class="whitespace-break-spaces">{highlighted}</code>'
        return self.md.htmlStash.store(html), start, end


class CodeBlockExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {
            "inline_language": [INLINE_LANGUAGE, "Grammar used for inline code spans"],
        }
        super().__init__(**kwargs)
        self._diagram_count = 0

    def next_diagram_index(self) -> int:
        index = self._diagram_count
        self._diagram_count += 1
        return index

    def extendMarkdown(self, md):
        # Runs before raw HTML blocks are stashed so markup inside fences stays literal.
        md.preprocessors.register(
            FencedCodePreprocessor(md, self), "fenced_code_block", priority=25
        )
        md.inlinePatterns.register(
            ShellCodeSpanProcessor(BACKTICK_RE, md, self.getConfig("inline_language")),
            "backtick",
            priority=190,
        )


def makeExtension(**kwargs):
    return CodeBlockExtension(**kwargs)

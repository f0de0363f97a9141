# docrender/__init__.py

from .config import DEFAULT_OPTIONS, RenderOptions
from .highlighting import highlight, highlight_stylesheet
from .models import CalloutKind, CodeFence, Heading, RenderedDocument, TocNode
from .renderer import render_markdown
from .slugify import slugify
from .toc import build_toc_tree, number_headings

__all__ = [
    "DEFAULT_OPTIONS",
    "CalloutKind",
    "CodeFence",
    "Heading",
    "RenderOptions",
    "RenderedDocument",
    "TocNode",
    "build_toc_tree",
    "highlight",
    "highlight_stylesheet",
    "number_headings",
    "render_markdown",
    "slugify",
]

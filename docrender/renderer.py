# docrender/renderer.py

import logging
from typing import Optional

import markdown

from .config import DEFAULT_OPTIONS, RenderOptions, get_markdown_config
from .models import RenderedDocument
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def render_markdown(
    text: str,
    options: Optional[RenderOptions] = None,
    context: Optional[dict] = None,
) -> RenderedDocument:
    """
    Main rendering function with pre/post processing pipeline using Python-Markdown

    Args:
        text: Markdown body (frontmatter already stripped by the caller)
        options: Rendering options; defaults to DEFAULT_OPTIONS
        context: Optional dict for processors that need additional data

    Returns:
        RenderedDocument with the HTML fragment and the ordered heading list
    """
    if not isinstance(text, str):
        raise TypeError(f"render_markdown expects str, got {type(text).__name__}")

    options = options or DEFAULT_OPTIONS
    context = dict(context or {})
    context["options"] = options

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    # Markdown conversion; a fresh instance per call keeps renders independent
    md = markdown.Markdown(**get_markdown_config(options))
    html = md.convert(text)

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    headings = tuple(context.get("headings", ()))
    logger.debug("Rendered document: %d chars of HTML, %d headings", len(html), len(headings))
    return RenderedDocument(html=html, headings=headings)

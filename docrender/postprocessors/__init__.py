# docrender/postprocessors/__init__.py

from .heading_ids import assign_heading_ids
from .iframe_enhancer import iframe_enhancer
from .image_enhancer import image_enhancer
from .paragraph_enhancer import paragraph_enhancer
from .sanitizer import sanitize_html
from .table_enhancer import table_enhancer
from .utils import clear_shared_soup

POSTPROCESSORS = [
    sanitize_html,
    assign_heading_ids,  # Unique heading ids + ToC extraction
    image_enhancer,  # Presentation classes on images
    paragraph_enhancer,  # Keep line breaks in top-level paragraphs
    iframe_enhancer,  # Sizing classes on embeds
    table_enhancer,  # Scroll wrapper around tables
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    try:
        for processor in POSTPROCESSORS:
            html = processor(html, context)
    finally:
        clear_shared_soup(context)
    return html

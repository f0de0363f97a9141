# docrender/postprocessors/sanitizer.py

import logging
from functools import lru_cache
from html import escape

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = frozenset(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "wbr",
            "div",
            "span",
            "section",
            "mark",
            "ins",
            "del",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            # media
            "img",
            "figure",
            "figcaption",
            "iframe",
            # svg callout icons
            "svg",
            "path",
            # links
            "a",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "aria-hidden", "aria-label"],
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height", "loading", "decoding"],
        "iframe": ["src", "width", "height", "allow", "allowfullscreen", "frameborder", "title", "loading"],
        "th": ["colspan", "rowspan", "scope", "align"],
        "td": ["colspan", "rowspan", "align"],
        "ol": ["start", "type", "class"],
        "blockquote": ["class", "cite"],
        # svg attributes for callout icons
        "svg": ["xmlns", "viewBox", "viewbox", "width", "height", "role", "aria-hidden", "focusable"],
        "path": ["d", "fill", "stroke", "stroke-width"],
    }

    allowed_protocols = frozenset({"http", "https", "mailto", "tel"})

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and runs before any other HTML modifications.
    Disallowed tags are escaped rather than dropped so their text stays visible.
    """
    options = context.get("options")
    if options is not None and not options.sanitize:
        logger.debug("Sanitization disabled by render options")
        return html

    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        # Never hand back unsanitized markup; show the document as text instead.
        return f"<pre>{escape(html)}</pre>"

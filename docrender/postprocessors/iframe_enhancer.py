# docrender/postprocessors/iframe_enhancer.py

from .utils import add_classes, get_shared_soup, soup_to_html

IFRAME_CLASSES = ["mk-iframe", "w-full", "aspect-video"]


def iframe_enhancer(html: str, context: dict) -> str:
    """Size embedded iframes (videos, sandboxes) to the content column."""
    soup = get_shared_soup(html, context)
    for iframe in soup.find_all("iframe"):
        add_classes(iframe, IFRAME_CLASSES)
    return soup_to_html(context, soup)

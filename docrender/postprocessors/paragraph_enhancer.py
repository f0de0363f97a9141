# docrender/postprocessors/paragraph_enhancer.py

from .utils import add_classes, get_shared_soup, soup_to_html

PARAGRAPH_CLASSES = ["whitespace-pre-wrap"]


def paragraph_enhancer(html: str, context: dict) -> str:
    """
    Preserve author line breaks in top-level paragraphs.

    Only paragraphs that are direct children of the fragment are touched;
    paragraphs inside lists, blockquotes or tables keep their own layout.
    """
    soup = get_shared_soup(html, context)
    for p in soup.find_all("p", recursive=False):
        add_classes(p, PARAGRAPH_CLASSES)
    return soup_to_html(context, soup)

# docrender/postprocessors/table_enhancer.py
"""
Postprocessor that makes wide tables scroll horizontally.

Output:
    <div class="overflow-x-auto marked-table">
        <table>...</table>
    </div>

Tables that already sit in such a wrapper are left as they are, so running
the postprocessor twice does not nest wrappers.
"""

from bs4 import BeautifulSoup, Tag

from .utils import get_shared_soup, soup_to_html

WRAPPER_CLASSES = ["overflow-x-auto", "marked-table"]


def _is_wrapped(table: Tag) -> bool:
    parent = table.parent
    if parent is None or parent.name != "div":
        return False
    parent_classes = parent.get("class", [])
    if isinstance(parent_classes, str):
        parent_classes = parent_classes.split()
    return "marked-table" in parent_classes


def _wrap_table(soup: BeautifulSoup, table: Tag) -> Tag:
    wrapper = soup.new_tag("div")
    wrapper["class"] = list(WRAPPER_CLASSES)
    return table.wrap(wrapper)


def table_enhancer(html: str, context: dict) -> str:
    """
    Wrap every table in a horizontally scrollable container.

    Args:
        html: HTML string to process
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        Processed HTML with wrapped tables
    """
    soup = get_shared_soup(html, context)

    for table in soup.find_all("table"):
        if not _is_wrapped(table):
            _wrap_table(soup, table)

    return soup_to_html(context, soup)

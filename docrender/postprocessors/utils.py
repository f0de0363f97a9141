"""Utilities to support efficient BeautifulSoup usage in postprocessors."""

from __future__ import annotations

from typing import Iterable

from bs4 import BeautifulSoup, Tag

_SHARED_SOUP_KEY = "__shared_soup"
_SHARED_SOURCE_KEY = "__shared_soup_source"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return a shared BeautifulSoup instance for the given HTML.

    Most postprocessors mutate the rendered HTML in place, so the parsed tree
    is cached in the rendering context and reused until the source HTML string
    changes between postprocessors (e.g. after sanitization).
    """
    soup = context.get(_SHARED_SOUP_KEY)
    source = context.get(_SHARED_SOURCE_KEY)
    if soup is None or source != html:
        soup = BeautifulSoup(html, "html.parser")
        context[_SHARED_SOUP_KEY] = soup
        context[_SHARED_SOURCE_KEY] = html
    return soup


def soup_to_html(context: dict, soup: BeautifulSoup | None = None) -> str:
    """Serialize the shared tree and mark that string as its current source.

    The next postprocessor receives exactly this string, so it gets the
    cached tree back instead of parsing again.
    """
    soup = soup if soup is not None else context.get(_SHARED_SOUP_KEY)
    if soup is None:
        return ""
    html = str(soup)
    context.update({_SHARED_SOUP_KEY: soup, _SHARED_SOURCE_KEY: html})
    return html


def clear_shared_soup(context: dict) -> None:
    """Drop the cached tree once a render is finished."""
    for key in (_SHARED_SOUP_KEY, _SHARED_SOURCE_KEY):
        context.pop(key, None)


def add_classes(element: Tag, classes: Iterable[str]) -> None:
    """Merge ``classes`` into the element's class list, keeping order and uniqueness."""
    existing = element.get("class", [])
    if isinstance(existing, str):
        existing = existing.split()
    element["class"] = list(dict.fromkeys(list(existing) + list(classes)))

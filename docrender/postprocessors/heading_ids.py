# docrender/postprocessors/heading_ids.py
"""
Postprocessor that assigns anchor ids to headings and collects the ToC.

This postprocessor:
- Selects h1-h4 in document order (h5/h6 are left alone and never listed)
- Builds an id from the heading text: prefix + slug, or prefix +
  "heading-<index>" when the text has no usable characters
- Disambiguates repeats with a per-id counter: "toc-title", "toc-title-1",
  "toc-title-2", ... and never reuses an id already present in the document
- Stores the ordered list of Heading values in context["headings"]

Ids are assigned over the whole rendered document, including headings that
came from raw HTML inside callouts, so the counter is shared by every selected
heading regardless of level.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_OPTIONS
from ..models import Heading
from ..slugify import slugify
from ..toc import number_headings
from .utils import get_shared_soup, soup_to_html

logger = logging.getLogger(__name__)

MAX_TOC_LEVEL = 4


def _unique_id(base: str, counts: dict[str, int], taken: set[str]) -> str:
    if base not in counts and base not in taken:
        counts[base] = 0
        return base

    count = counts.get(base, 0)
    while True:
        count += 1
        candidate = f"{base}-{count}"
        if candidate not in taken:
            counts[base] = count
            return candidate


def assign_heading_ids(html: str, context: dict) -> str:
    """
    Set a unique id on every ToC heading and record the headings in order.

    Args:
        html: HTML string to process
        context: Context dictionary; reads "options", writes "headings"

    Returns:
        HTML with heading ids set
    """
    options = context.get("options") or DEFAULT_OPTIONS
    soup = get_shared_soup(html, context)

    tag_names = [f"h{level}" for level in sorted(set(options.toc_levels)) if 1 <= level <= MAX_TOC_LEVEL]
    elements = soup.find_all(tag_names) if tag_names else []

    # Ids carried by anything other than the headings we are about to rename.
    selected = {id(element) for element in elements}
    taken = {
        element["id"]
        for element in soup.find_all(id=True)
        if id(element) not in selected
    }
    counts: dict[str, int] = {}
    headings: list[Heading] = []

    for index, element in enumerate(elements):
        level = int(element.name[1])
        title = element.get_text().strip()

        candidate = slugify(title)
        if not candidate:
            logger.debug("Heading %d has no slug characters, using positional id", index)
            candidate = f"heading-{index}"

        identifier = _unique_id(f"{options.heading_id_prefix}{candidate}", counts, taken)
        taken.add(identifier)

        element["id"] = identifier
        headings.append(Heading(id=identifier, title=title, level=level))

    if options.number_headings:
        headings = number_headings(headings)

    context["headings"] = headings
    return soup_to_html(context, soup)

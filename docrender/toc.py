# docrender/toc.py

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from .models import Heading, TocNode


def build_toc_tree(headings: Iterable[Heading]) -> list[TocNode]:
    """
    Nest a flat, document-ordered heading list for sidebar rendering.

    Each heading becomes a child of the closest preceding heading with a
    smaller level. Skipped levels (an h4 right after an h2) simply nest one
    step deeper; the document order of the input is kept at every depth.
    """
    toc: list[TocNode] = []
    stack: list[TocNode] = []
    for heading in headings:
        node: TocNode = {
            "id": heading.id,
            "title": heading.title,
            "level": heading.level,
            "number": heading.number,
            "children": [],
        }

        while stack and stack[-1]["level"] >= heading.level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            toc.append(node)

        stack.append(node)

    return toc


def number_headings(headings: Sequence[Heading]) -> list[Heading]:
    """Return copies of ``headings`` carrying dotted outline numbers ("1", "1.2", ...)."""
    numbers: dict[str, str] = {}

    def visit(nodes: list[TocNode], prefix: str) -> None:
        for position, node in enumerate(nodes, start=1):
            number = f"{prefix}{position}"
            numbers[node["id"]] = number
            visit(node["children"], f"{number}.")

    visit(build_toc_tree(headings), "")
    return [replace(heading, number=numbers[heading.id]) for heading in headings]

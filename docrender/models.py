# docrender/models.py
"""Value types produced by a render call."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TypedDict


class CalloutKind(str, Enum):
    INFO = "info"
    WARN = "warn"
    TIP = "tip"
    DANGER = "danger"


@dataclass(frozen=True)
class CodeFence:
    language: Optional[str]
    filename: Optional[str]
    source: str

    @classmethod
    def from_info(cls, info: str, source: str) -> "CodeFence":
        """
        Build a fence from its info string.

        The info string is split on the first whitespace run: the first part is
        the language tag, the remainder (if any) is the displayed filename.
        """
        parts = info.strip().split(None, 1)
        language = parts[0] if parts else None
        filename = parts[1].strip() if len(parts) > 1 else None
        return cls(language=language, filename=filename or None, source=source)


@dataclass(frozen=True)
class Heading:
    id: str
    title: str
    level: int
    number: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "title": self.title, "level": self.level}
        if self.number is not None:
            data["number"] = self.number
        return data


@dataclass(frozen=True)
class RenderedDocument:
    html: str
    headings: tuple[Heading, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "html": self.html,
            "headings": [heading.to_dict() for heading in self.headings],
        }


class TocNode(TypedDict):
    id: str
    title: str
    level: int
    number: Optional[str]
    children: list["TocNode"]

# docrender/slugify.py

import re

# Anything that is not a word character, whitespace or hyphen; underscores are
# word characters but are not kept in anchors.
_DISALLOWED_RE = re.compile(r"[^\w\s-]|_")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-{2,}")


def slugify(text: str) -> str:
    """
    Turn heading text into a URL-safe anchor fragment.

    Letters (including CJK ideographs) and digits are kept, Latin letters are
    lowercased, whitespace runs become a single hyphen and leading/trailing
    hyphens are trimmed. May return an empty string; callers provide their own
    fallback in that case.
    """
    slug = _DISALLOWED_RE.sub("", text.lower()).strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")

# docrender/preprocessors/normalize.py
"""
Preprocessor that normalizes raw document text before parsing.

- Drops a leading byte order mark, which would otherwise hide a heading or
  callout on the first line.
- Converts Windows and old Mac line endings to ``\n`` so the callout and
  fence delimiters are matched line by line.
"""

_BOM = "\ufeff"


def normalize_source(text: str, context: dict) -> str:
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    return text.replace("\r\n", "\n").replace("\r", "\n")

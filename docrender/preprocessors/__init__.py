# docrender/preprocessors/__init__.py

from .normalize import normalize_source

PREPROCESSORS = [
    normalize_source,  # Must run first
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text

# docrender/config.py

from __future__ import annotations

from dataclasses import dataclass, field

from .extensions.callouts import CalloutExtension
from .extensions.code_blocks import CodeBlockExtension


@dataclass(frozen=True)
class RenderOptions:
    """
    Per-call rendering configuration.

    Options are passed into every render instead of being registered on a
    module-level Markdown instance, so concurrent renders never share state.
    """

    heading_id_prefix: str = "toc-"
    toc_levels: tuple[int, ...] = (1, 2, 3, 4)
    number_headings: bool = False
    sanitize: bool = True
    inline_code_language: str = "bash"
    extensions: tuple[str, ...] = field(default_factory=lambda: ("tables", "sane_lists"))


DEFAULT_OPTIONS = RenderOptions()


def get_markdown_config(options: RenderOptions = DEFAULT_OPTIONS) -> dict:
    """
    Configuration for the Python-Markdown instance used by one render.

    Base grammar extensions come from the options; the package's own callout
    and code extensions are always appended after them so that they take over
    the backtick and fenced-code syntax.
    """
    extension_configs = {}
    if "tables" in options.extensions:
        # Alignment as attributes; inline styles do not survive sanitization.
        extension_configs["tables"] = {"use_align_attribute": True}

    return {
        "extensions": [
            *options.extensions,
            CodeBlockExtension(inline_language=options.inline_code_language),
            CalloutExtension(),
        ],
        "extension_configs": extension_configs,
        "output_format": "html",
    }

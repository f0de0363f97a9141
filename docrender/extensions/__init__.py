# docrender/extensions/__init__.py

from .callouts import CalloutExtension
from .code_blocks import CodeBlockExtension

__all__ = ["CalloutExtension", "CodeBlockExtension"]

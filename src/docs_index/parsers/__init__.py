from .base import DocumentParser
from .markdown_parser import MarkdownParser

__all__ = [
    "DocumentParser",
    "MarkdownParser",
]

"""
Converter Module - Document Tree to Markdown

Mark composition, node rendering, and the subpages placeholder contract.
"""

from docmost_mcp.converter.marks import apply_marks
from docmost_mcp.converter.markdown import MarkdownConverter, convert
from docmost_mcp.converter.subpages import SUBPAGES_PLACEHOLDER, resolve_subpages

__all__ = [
    "apply_marks",
    "MarkdownConverter",
    "convert",
    "SUBPAGES_PLACEHOLDER",
    "resolve_subpages",
]

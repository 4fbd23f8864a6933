"""
Converter - Mark Composer

Inline decorations for text leaves, applied in stored order.
"""

from typing import Any, Callable, Dict, List, Optional


def _mark_attr(mark: Dict[str, Any], key: str, default: str = "") -> str:
    attrs = mark.get("attrs")
    if not isinstance(attrs, dict):
        return default
    value = attrs.get(key)
    return str(value) if value else default


def _link(text: str, mark: Dict[str, Any]) -> str:
    return f"[{text}]({_mark_attr(mark, 'href')})"


def _highlight(text: str, mark: Dict[str, Any]) -> str:
    color = _mark_attr(mark, "color", "yellow")
    return f'<mark style="background-color: {color}">{text}</mark>'


def _text_style(text: str, mark: Dict[str, Any]) -> str:
    color = _mark_attr(mark, "color")
    if not color:
        return text
    return f'<span style="color: {color}">{text}</span>'


MARK_WRAPPERS: Dict[str, Callable[[str, Dict[str, Any]], str]] = {
    "bold": lambda text, mark: f"**{text}**",
    "italic": lambda text, mark: f"*{text}*",
    "code": lambda text, mark: f"`{text}`",
    "strike": lambda text, mark: f"~~{text}~~",
    "underline": lambda text, mark: f"<u>{text}</u>",
    "subscript": lambda text, mark: f"<sub>{text}</sub>",
    "superscript": lambda text, mark: f"<sup>{text}</sup>",
    "highlight": _highlight,
    "link": _link,
    "textStyle": _text_style,
}


def apply_marks(text: str, marks: Optional[List[Dict[str, Any]]]) -> str:
    """
    Wrap text in its marks.
    
    Each mark wraps the result of the previous one, so the first mark
    ends up innermost and the last one outermost. Unknown marks are
    skipped.
    
    Args:
        text: Raw text of the leaf
        marks: Mark descriptors ({"type": ..., "attrs": {...}})
        
    Returns:
        Decorated text
    """
    if not isinstance(marks, list):
        return text
    
    for mark in marks:
        if not isinstance(mark, dict):
            continue
        mark_type = mark.get("type")
        if not isinstance(mark_type, str):
            continue
        wrap = MARK_WRAPPERS.get(mark_type)
        if wrap:
            text = wrap(text, mark)
    
    return text

"""
Converter - Document Tree to Markdown

Renders ProseMirror/TipTap JSON documents, as stored by Docmost, to Markdown.
Conversion is one-way and best effort: unknown node types render their
children, missing attributes fall back to defaults.
"""

from typing import Any, Callable, Dict, List

from docmost_mcp.converter.marks import apply_marks
from docmost_mcp.converter.subpages import SUBPAGES_PLACEHOLDER

DocumentNode = Dict[str, Any]

# Embeds that link to attrs.src: type -> (icon, label)
MEDIA_LINKS = {
    "video": ("🎥", "Video"),
    "youtube": ("📺", "YouTube Video"),
    "embed": ("🔗", "Embedded Content"),
}

# Embeds without a usable URL
MEDIA_LABELS = {
    "drawio": "📊 [Draw.io Diagram]",
    "excalidraw": "✏️ [Excalidraw Drawing]",
}


def _children(node: Any) -> List[Any]:
    if not isinstance(node, dict):
        return []
    content = node.get("content")
    return content if isinstance(content, list) else []


def _attrs(node: Any) -> Dict[str, Any]:
    if not isinstance(node, dict):
        return {}
    attrs = node.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def _attr_str(attrs: Dict[str, Any], key: str, default: str = "") -> str:
    value = attrs.get(key)
    return str(value) if value else default


def _heading_level(attrs: Dict[str, Any]) -> int:
    try:
        level = int(attrs.get("level") or 1)
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(1, min(level, 6))


def _prefix_lines(text: str, prefix: str) -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def _node_type(node: Any) -> str:
    if not isinstance(node, dict):
        return ""
    node_type = node.get("type")
    return node_type if isinstance(node_type, str) else ""


class MarkdownConverter:
    """Converts Docmost document trees to Markdown."""

    def __init__(self):
        self._renderers: Dict[str, Callable[[DocumentNode], str]] = {
            "doc": self._render_doc,
            "paragraph": self._render_paragraph,
            "heading": self._render_heading,
            "text": self._render_text,
            "codeBlock": self._render_code_block,
            "blockquote": self._render_blockquote,
            "horizontalRule": lambda node: "---",
            "hardBreak": lambda node: "\n",
            "image": self._render_image,
            "video": self._render_media_link,
            "youtube": self._render_media_link,
            "embed": self._render_media_link,
            "attachment": self._render_attachment,
            "drawio": self._render_media_label,
            "excalidraw": self._render_media_label,
            "bulletList": self._render_bullet_list,
            "orderedList": self._render_ordered_list,
            "listItem": lambda node: self._render_all(node, "\n"),
            "taskList": self._render_task_list,
            "taskItem": lambda node: self._render_task_item(node, "\n"),
            "table": lambda node: self._render_all(node, "\n"),
            "tableRow": self._render_table_row,
            "tableCell": lambda node: self._render_all(node, ""),
            "tableHeader": lambda node: self._render_all(node, ""),
            "callout": self._render_callout,
            "details": self._render_details,
            "detailsSummary": self._render_details_summary,
            "detailsContent": self._render_details_content,
            "mathInline": self._render_math_inline,
            "mathBlock": self._render_math_block,
            "mention": self._render_mention,
            "subpages": lambda node: SUBPAGES_PLACEHOLDER,
        }

    def convert(self, document: Any) -> str:
        """
        Convert a document root to Markdown.

        Args:
            document: Document tree (the `doc` node) decoded from JSON

        Returns:
            Markdown text with surrounding whitespace stripped, or an empty
            string when there is no content
        """
        if not _children(document):
            return ""
        return self.render(document).strip()

    def render(self, node: Any) -> str:
        """Render a single node, falling back to its children for unknown types."""
        if not isinstance(node, dict):
            return ""
        renderer = self._renderers.get(_node_type(node), self._render_fallback)
        return renderer(node)

    def _render_all(self, node: DocumentNode, separator: str) -> str:
        return separator.join(self.render(child) for child in _children(node))

    def _render_fallback(self, node: DocumentNode) -> str:
        return self._render_all(node, "")

    # Blocks

    def _render_doc(self, node: DocumentNode) -> str:
        return self._render_all(node, "\n\n")

    def _render_paragraph(self, node: DocumentNode) -> str:
        text = self._render_all(node, "")
        align = _attrs(node).get("textAlign")
        if align and align != "left":
            return f'<div align="{align}">{text}</div>'
        return text

    def _render_heading(self, node: DocumentNode) -> str:
        level = _heading_level(_attrs(node))
        return "#" * level + " " + self._render_all(node, "")

    def _render_text(self, node: DocumentNode) -> str:
        text = node.get("text")
        text = text if isinstance(text, str) else ""
        return apply_marks(text, node.get("marks"))

    def _render_code_block(self, node: DocumentNode) -> str:
        language = _attr_str(_attrs(node), "language")
        code = self._render_all(node, "")
        return f"```{language}\n{code}\n```"

    def _render_blockquote(self, node: DocumentNode) -> str:
        return _prefix_lines(self._render_all(node, "\n"), "> ")

    def _render_callout(self, node: DocumentNode) -> str:
        callout_type = _attr_str(_attrs(node), "type", "info").upper()
        body = self._render_all(node, "\n")
        return f"> **{callout_type}**\n" + _prefix_lines(body, "> ")

    def _render_math_inline(self, node: DocumentNode) -> str:
        return f"${_attr_str(_attrs(node), 'latex')}$"

    def _render_math_block(self, node: DocumentNode) -> str:
        return f"$$\n{_attr_str(_attrs(node), 'latex')}\n$$"

    def _render_mention(self, node: DocumentNode) -> str:
        attrs = _attrs(node)
        return "@" + (_attr_str(attrs, "label") or _attr_str(attrs, "id"))

    # Media

    def _render_image(self, node: DocumentNode) -> str:
        attrs = _attrs(node)
        image = f"![{_attr_str(attrs, 'alt')}]({_attr_str(attrs, 'src')})"
        caption = _attr_str(attrs, "caption")
        if caption:
            return f"{image}\n*{caption}*"
        return image

    def _render_media_link(self, node: DocumentNode) -> str:
        icon, label = MEDIA_LINKS[_node_type(node)]
        return f"{icon} [{label}]({_attr_str(_attrs(node), 'src')})"

    def _render_media_label(self, node: DocumentNode) -> str:
        return MEDIA_LABELS[_node_type(node)]

    def _render_attachment(self, node: DocumentNode) -> str:
        attrs = _attrs(node)
        name = _attr_str(attrs, "fileName", "attachment")
        return f"📎 [{name}]({_attr_str(attrs, 'src')})"

    # Lists

    def _render_list_item(self, item: Any, marker: str) -> str:
        lines = self._render_all(item, "\n").split("\n")
        first = f"{marker} {lines[0]}"
        return "\n".join([first] + [f"  {line}" for line in lines[1:]])

    def _render_bullet_list(self, node: DocumentNode) -> str:
        return "\n".join(
            self._render_list_item(item, "-") for item in _children(node)
        )

    def _render_ordered_list(self, node: DocumentNode) -> str:
        return "\n".join(
            self._render_list_item(item, f"{position}.")
            for position, item in enumerate(_children(node), start=1)
        )

    def _render_task_item(self, item: Any, separator: str) -> str:
        checkbox = "[x]" if _attrs(item).get("checked") else "[ ]"
        return f"- {checkbox} {self._render_all(item, separator)}"

    def _render_task_list(self, node: DocumentNode) -> str:
        # Task items are flattened onto a single line
        return "\n".join(
            self._render_task_item(item, "") for item in _children(node)
        )

    # Tables

    def _render_table_row(self, node: DocumentNode) -> str:
        return "| " + self._render_all(node, " | ") + " |"

    # Disclosure widgets

    def _render_details(self, node: DocumentNode) -> str:
        """
        Render a details block from its summary/content children.

        The opening tag comes from detailsSummary and the closing tag from
        detailsContent. A summary is expected before each content; when
        either half is missing the absent tag is added here so the block
        stays balanced.
        """
        parts = []
        awaiting_content = False

        for child in _children(node):
            child_type = _node_type(child)
            if child_type == "detailsSummary":
                if awaiting_content:
                    parts.append("</details>")
                awaiting_content = True
            elif child_type == "detailsContent":
                if not awaiting_content:
                    parts.append("<details>")
                awaiting_content = False
            parts.append(self.render(child))

        if awaiting_content:
            parts.append("</details>")

        return "\n".join(parts)

    def _render_details_summary(self, node: DocumentNode) -> str:
        summary = self._render_all(node, "")
        return f"<details>\n<summary>{summary}</summary>\n"

    def _render_details_content(self, node: DocumentNode) -> str:
        body = self._render_all(node, "\n")
        return f"{body}\n</details>"


_converter = MarkdownConverter()


def convert(document: Any) -> str:
    """
    Convert a Docmost document tree to Markdown.

    Never raises for malformed input; pathologically deep trees are the
    only exception (RecursionError).
    """
    return _converter.convert(document)

"""
Converter - Subpages Placeholder

The converter emits SUBPAGES_PLACEHOLDER for `subpages` nodes; the page
service swaps it for the child page list once that has been fetched.
"""

from typing import Any, Dict, List, Optional

SUBPAGES_PLACEHOLDER = "{{SUBPAGES}}"


def format_subpage_list(subpages: List[Dict[str, Any]]) -> str:
    """Render child pages as `- [title](page:id)` lines."""
    return "\n".join(
        f"- [{page.get('title', '')}](page:{page.get('id', '')})"
        for page in subpages
    )


def resolve_subpages(
    markdown: str,
    subpages: Optional[List[Dict[str, Any]]],
) -> str:
    """
    Replace the subpages placeholder in converted Markdown.
    
    Args:
        markdown: Output of the converter
        subpages: Child pages (dicts with id and title), may be empty
        
    Returns:
        Markdown with every placeholder replaced by a "Subpages" list,
        or removed when there are no child pages
    """
    if SUBPAGES_PLACEHOLDER not in markdown:
        return markdown
    
    if subpages:
        listing = "### Subpages\n" + format_subpage_list(subpages)
        return markdown.replace(SUBPAGES_PLACEHOLDER, listing)
    
    return markdown.replace(SUBPAGES_PLACEHOLDER, "")

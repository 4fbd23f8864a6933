"""
Services - Page Service

Page retrieval with Markdown conversion, plus page create/move/delete
orchestration.
"""

import asyncio
import logging
import httpx
from typing import Any, Dict, List, Optional

from docmost_mcp.config import get_settings
from docmost_mcp.client import DocmostClient
from docmost_mcp.converter import convert, resolve_subpages
from docmost_mcp.schemas import Page, PageRef, SearchResult

logger = logging.getLogger(__name__)


class PageService:
    """Fetches, converts and reorganizes pages."""

    def __init__(self, settings=None, client=None):
        self.settings = settings or get_settings()
        self.client = client or DocmostClient(self.settings)

    async def get_page(self, page_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a page with its content converted to Markdown.

        Child pages are always looked up so the agent sees the hierarchy;
        they also fill in any subpages placeholder left by the converter.

        Args:
            page_id: Page ID or slug ID

        Returns:
            Page dict with `content` (and `subpages` when there are any),
            or None if the page does not exist
        """
        data = await self.client.get_page_info(page_id)
        if not data:
            return None

        content = convert(data["content"]) if data.get("content") else ""

        subpages: List[Dict[str, Any]] = []
        try:
            subpages = await self.client.list_sidebar_pages(
                data.get("spaceId"), data.get("id", page_id)
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Failed to fetch subpages of {page_id}: {e}")

        content = resolve_subpages(content, subpages)

        return Page.from_api(data, content=content, subpages=subpages).to_dict()

    async def list_pages(self, space_id: Optional[str] = None) -> List[Dict[str, Any]]:
        pages = await self.client.list_pages(space_id)
        return [Page.from_api(p).to_dict() for p in pages]

    async def create_page(
        self,
        title: str,
        content: str,
        space_id: str,
        parent_page_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Create a page from Markdown and place it in the hierarchy.

        Flow:
        1. Check the parent exists (if given)
        2. Import the Markdown as a new page at the space root
        3. Move it under the parent
        4. Return the fresh page

        Raises:
            ValueError: If the parent page does not exist
        """
        if parent_page_id:
            parent = await self.client.get_page_info(parent_page_id)
            if not parent:
                raise ValueError(f"Parent page with ID {parent_page_id} not found.")

        created = await self.client.import_page(title, content, space_id)
        new_page_id = created["id"]

        if parent_page_id:
            await self.client.move_page(new_page_id, parent_page_id)

        logger.info(f"Created page {new_page_id} in space {space_id}")
        return await self.get_page(new_page_id)

    async def update_page(self, page_id: str, title: str) -> Dict[str, Any]:
        """Rename a page. Content edits go through Docmost's realtime editor."""
        await self.client.update_page_title(page_id, title)
        logger.info(f"Renamed page {page_id}")
        return {
            "success": True,
            "modified": True,
            "message": "Page updated successfully.",
            "pageId": page_id,
        }

    async def move_page(
        self,
        page_id: str,
        parent_page_id: Optional[str],
        position: Optional[str] = None,
    ) -> Dict[str, Any]:
        result = await self.client.move_page(page_id, parent_page_id, position)
        logger.info(f"Moved page {page_id} to parent {parent_page_id or 'root'}")
        return result

    async def delete_page(self, page_id: str) -> Dict[str, Any]:
        result = await self.client.delete_page(page_id)
        logger.info(f"Deleted page {page_id}")
        return result

    async def delete_pages(self, page_ids: List[str]) -> List[Dict[str, Any]]:
        """
        Delete several pages concurrently.

        Returns:
            One {"id", "success"[, "error"]} entry per page, in input order
        """
        async def delete_one(page_id: str) -> Dict[str, Any]:
            try:
                await self.client.delete_page(page_id)
                return {"id": page_id, "success": True}
            except (httpx.HTTPError, ValueError) as e:
                return {"id": page_id, "success": False, "error": str(e)}

        results = await asyncio.gather(*(delete_one(pid) for pid in page_ids))

        failed = [r["id"] for r in results if not r["success"]]
        if failed:
            logger.warning(f"Could not delete {len(failed)} of {len(page_ids)} pages: {failed}")

        return list(results)

    async def search(self, query: str, space_id: Optional[str] = None) -> List[Dict[str, Any]]:
        results = await self.client.search(query, space_id)
        return [SearchResult.from_api(r).to_dict() for r in results]

    async def get_trash(self, space_id: str) -> List[Dict[str, Any]]:
        pages = await self.client.get_trash(space_id)
        return [Page.from_api(p).to_dict() for p in pages]

    async def restore_page(self, page_id: str) -> Dict[str, Any]:
        result = await self.client.restore_page(page_id)
        logger.info(f"Restored page {page_id}")
        return result

    async def duplicate_page(
        self,
        page_id: str,
        space_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        data = await self.client.duplicate_page(page_id, space_id)
        return Page.from_api(data).to_dict()

    async def get_breadcrumbs(self, page_id: str) -> List[Dict[str, Any]]:
        """Path from the space root down to the page."""
        items = await self.client.get_breadcrumbs(page_id)
        if not isinstance(items, list):
            return []
        return [PageRef.model_validate(b).to_dict() for b in items]

"""
Client - Docmost API

Async access to Docmost's JSON API. Every endpoint is a POST; most
responses wrap their payload as {"data": ..., "success": ...}.
"""

import logging
import httpx
from typing import Any, Dict, List, Optional

from docmost_mcp.config import get_settings

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100

# Docmost rejects positions shorter than 5 characters; this one sorts last.
DEFAULT_POSITION = "a00000"


def _unwrap(body: Any) -> Any:
    """Return the `data` member of a wrapped response, or the body itself."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def _require_id(value: Optional[str], name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"Invalid {name}: must be a non-empty string.")
    return value


class DocmostClient:
    """Talks to the Docmost API with a pre-issued bearer token."""

    def __init__(
        self,
        settings=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.docmost.api_url.rstrip("/")
        self.headers = {
            "Authorization": f"Bearer {self.settings.docmost.api_token}",
        }
        self.timeout = self.settings.docmost.timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _post(self, endpoint: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        async with self._client() as client:
            response = await client.post(endpoint, json=payload or {})
            response.raise_for_status()
            return response.json()

    async def paginate_all(
        self,
        endpoint: str,
        base_payload: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Collect every item from a paged list endpoint.

        Args:
            endpoint: API path, e.g. "/spaces"
            base_payload: Fields sent with every page request
            limit: Items per request, clamped to 1-100 (default: from settings)

        Returns:
            Items from all pages, in API order
        """
        payload = dict(base_payload or {})
        page_size = max(1, min(MAX_PAGE_SIZE, limit or self.settings.docmost.page_size))

        items: List[Dict[str, Any]] = []
        page = 1
        has_next_page = True

        async with self._client() as client:
            while has_next_page:
                response = await client.post(
                    endpoint,
                    json={**payload, "limit": page_size, "page": page},
                )
                response.raise_for_status()
                body = response.json()

                # Items and meta sit under "data" or at the top level
                data = body.get("data") if isinstance(body.get("data"), dict) else body
                items.extend(data.get("items") or [])
                meta = data.get("meta") or {}
                has_next_page = bool(meta.get("hasNextPage"))
                page += 1

        logger.debug(f"Fetched {len(items)} items from {endpoint} in {page - 1} requests")
        return items

    async def get_workspace(self) -> Dict[str, Any]:
        return _unwrap(await self._post("/workspace/info"))

    async def get_spaces(self) -> List[Dict[str, Any]]:
        return await self.paginate_all("/spaces")

    async def get_groups(self) -> List[Dict[str, Any]]:
        return await self.paginate_all("/groups")

    async def list_pages(self, space_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Recently updated pages, newest first, optionally within one space."""
        payload = {"spaceId": space_id} if space_id else {}
        return await self.paginate_all("/pages/recent", payload)

    async def list_sidebar_pages(self, space_id: str, page_id: str) -> List[Dict[str, Any]]:
        """Direct children of a page (first sidebar page only)."""
        body = await self._post(
            "/pages/sidebar-pages",
            {"spaceId": space_id, "pageId": page_id, "page": 1},
        )
        data = _unwrap(body)
        if not isinstance(data, dict):
            return []
        return data.get("items") or []

    async def get_page_info(self, page_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch a page with its document tree.

        Args:
            page_id: Page ID or slug ID

        Returns:
            Raw page payload, or None if the page does not exist
        """
        _require_id(page_id, "page_id")
        try:
            body = await self._post("/pages/info", {"pageId": page_id})
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise
        return _unwrap(body)

    async def import_page(self, title: str, content: str, space_id: str) -> Dict[str, Any]:
        """
        Create a page from Markdown through the import endpoint.

        The create endpoint cannot set content, so the Markdown is uploaded
        as a file instead. The page lands at the space root.
        """
        _require_id(space_id, "space_id")
        files = {
            "file": (f"{title or 'import'}.md", content.encode("utf-8"), "text/markdown"),
        }
        async with self._client() as client:
            response = await client.post(
                "/pages/import",
                data={"spaceId": space_id},
                files=files,
            )
            response.raise_for_status()
            return _unwrap(response.json())

    async def update_page_title(self, page_id: str, title: str) -> Dict[str, Any]:
        _require_id(page_id, "page_id")
        return _unwrap(await self._post("/pages/update", {"pageId": page_id, "title": title}))

    async def search(self, query: str, space_id: Optional[str] = None) -> List[Dict[str, Any]]:
        payload: Dict[str, Any] = {"query": query}
        if space_id:
            payload["spaceId"] = space_id
        results = _unwrap(await self._post("/search", payload)) or []
        if isinstance(results, dict):
            results = results.get("items") or []
        return results

    async def move_page(
        self,
        page_id: str,
        parent_page_id: Optional[str],
        position: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Move a page under a new parent, or to the space root when
        parent_page_id is None.
        """
        _require_id(page_id, "page_id")
        if position is not None and not 5 <= len(position) <= 12:
            raise ValueError(f"Invalid position: {position!r}. Must be 5-12 characters.")

        return await self._post("/pages/move", {
            "pageId": page_id,
            "parentPageId": parent_page_id,
            "position": position or DEFAULT_POSITION,
        })

    async def delete_page(self, page_id: str) -> Dict[str, Any]:
        _require_id(page_id, "page_id")
        return await self._post("/pages/delete", {"pageId": page_id})

    async def get_page_history(
        self,
        page_id: str,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        """One page of version history; returns {"items": [...], "cursor": ...}."""
        _require_id(page_id, "page_id")
        payload = {"pageId": page_id}
        if cursor:
            payload["cursor"] = cursor
        return _unwrap(await self._post("/pages/history", payload)) or {}

    async def get_history_info(self, history_id: str) -> Dict[str, Any]:
        _require_id(history_id, "history_id")
        return _unwrap(await self._post("/pages/history/info", {"historyId": history_id}))

    async def restore_page(self, page_id: str) -> Dict[str, Any]:
        _require_id(page_id, "page_id")
        return await self._post("/pages/restore", {"pageId": page_id})

    async def get_trash(self, space_id: str) -> List[Dict[str, Any]]:
        _require_id(space_id, "space_id")
        return await self.paginate_all("/pages/trash", {"spaceId": space_id})

    async def duplicate_page(
        self,
        page_id: str,
        space_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        _require_id(page_id, "page_id")
        payload = {"pageId": page_id}
        if space_id:
            payload["spaceId"] = space_id
        return _unwrap(await self._post("/pages/duplicate", payload))

    async def get_breadcrumbs(self, page_id: str) -> List[Dict[str, Any]]:
        _require_id(page_id, "page_id")
        return _unwrap(await self._post("/pages/breadcrumbs", {"pageId": page_id})) or []

"""
Unit Tests for the Docmost API Client

HTTP is served by httpx.MockTransport.
"""

import json

import httpx
import pytest

from docmost_mcp.client import DocmostClient, DEFAULT_POSITION


class Recorder:
    """Mock transport handler recording requests and replaying responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.responses.pop(0)
        return httpx.Response(status, json=body)

    def payload(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)


def make_client(settings, recorder: Recorder) -> DocmostClient:
    return DocmostClient(settings, transport=httpx.MockTransport(recorder))


class TestPagination:
    """Tests for paginate_all."""

    @pytest.mark.asyncio
    async def test_follows_has_next_page(self, settings):
        recorder = Recorder(
            (200, {"data": {"items": [{"id": "1"}, {"id": "2"}], "meta": {"hasNextPage": True}}}),
            (200, {"data": {"items": [{"id": "3"}], "meta": {"hasNextPage": False}}}),
        )
        client = make_client(settings, recorder)

        items = await client.paginate_all("/spaces", {"spaceId": "s1"}, limit=500)

        assert [i["id"] for i in items] == ["1", "2", "3"]
        assert recorder.payload(0) == {"spaceId": "s1", "limit": 100, "page": 1}
        assert recorder.payload(1)["page"] == 2

    @pytest.mark.asyncio
    async def test_top_level_items(self, settings):
        recorder = Recorder((200, {"items": [{"id": "1"}], "meta": {}}))
        client = make_client(settings, recorder)

        items = await client.paginate_all("/groups", limit=0)

        assert items == [{"id": "1"}]
        assert recorder.payload()["limit"] == 100

    @pytest.mark.asyncio
    async def test_limit_clamped_to_one(self, settings):
        recorder = Recorder((200, {"data": {"items": []}}))
        client = make_client(settings, recorder)

        await client.paginate_all("/groups", limit=-5)

        assert recorder.payload()["limit"] == 1


class TestPages:
    """Tests for page endpoints."""

    @pytest.mark.asyncio
    async def test_get_page_info(self, settings):
        recorder = Recorder((200, {"data": {"id": "p1", "title": "Home"}, "success": True}))
        client = make_client(settings, recorder)

        page = await client.get_page_info("p1")

        request = recorder.requests[0]
        assert page == {"id": "p1", "title": "Home"}
        assert request.url.path == "/api/pages/info"
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert recorder.payload() == {"pageId": "p1"}

    @pytest.mark.asyncio
    async def test_get_page_info_not_found(self, settings):
        client = make_client(settings, Recorder((404, {"message": "Not found"})))

        assert await client.get_page_info("missing") is None

    @pytest.mark.asyncio
    async def test_get_page_info_server_error(self, settings):
        client = make_client(settings, Recorder((500, {"message": "boom"})))

        with pytest.raises(httpx.HTTPStatusError):
            await client.get_page_info("p1")

    @pytest.mark.asyncio
    async def test_empty_page_id_rejected(self, settings):
        recorder = Recorder()
        client = make_client(settings, recorder)

        with pytest.raises(ValueError):
            await client.get_page_info("  ")

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_import_page_uploads_markdown(self, settings):
        recorder = Recorder((200, {"data": {"id": "new"}}))
        client = make_client(settings, recorder)

        created = await client.import_page("Notes", "# Notes", "space-1")

        request = recorder.requests[0]
        assert created == {"id": "new"}
        assert request.url.path == "/api/pages/import"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'filename="Notes.md"' in request.content
        assert b"# Notes" in request.content

    @pytest.mark.asyncio
    async def test_move_page_defaults(self, settings):
        recorder = Recorder((200, {"success": True}))
        client = make_client(settings, recorder)

        await client.move_page("p1", None)

        assert recorder.payload() == {
            "pageId": "p1",
            "parentPageId": None,
            "position": DEFAULT_POSITION,
        }

    @pytest.mark.asyncio
    async def test_move_page_rejects_short_position(self, settings):
        client = make_client(settings, Recorder())

        with pytest.raises(ValueError):
            await client.move_page("p1", "parent", position="a0")

    @pytest.mark.asyncio
    async def test_sidebar_pages(self, settings):
        recorder = Recorder((200, {"data": {"items": [{"id": "c1", "title": "Child"}]}}))
        client = make_client(settings, recorder)

        children = await client.list_sidebar_pages("s1", "p1")

        assert children == [{"id": "c1", "title": "Child"}]
        assert recorder.payload() == {"spaceId": "s1", "pageId": "p1", "page": 1}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"data": None}, {"data": []}, {"data": "x"}, []])
    async def test_sidebar_pages_unexpected_shape(self, settings, body):
        client = make_client(settings, Recorder((200, body)))

        assert await client.list_sidebar_pages("s1", "p1") == []

    @pytest.mark.asyncio
    async def test_search_returns_list(self, settings):
        recorder = Recorder((200, {"data": [{"id": "p1"}], "success": True}))
        client = make_client(settings, recorder)

        results = await client.search("deploy")

        assert results == [{"id": "p1"}]
        assert recorder.payload() == {"query": "deploy"}

    @pytest.mark.asyncio
    async def test_history_cursor(self, settings):
        recorder = Recorder((200, {"data": {"items": [], "cursor": None}}))
        client = make_client(settings, recorder)

        await client.get_page_history("p1", cursor="next-1")

        assert recorder.payload() == {"pageId": "p1", "cursor": "next-1"}

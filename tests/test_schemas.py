"""
Unit Tests for Response Schemas
"""

from docmost_mcp.schemas import (
    Group,
    HistoryDetail,
    HistoryEntry,
    Page,
    PageRef,
    SearchResult,
    Space,
    Workspace,
)


RAW_PAGE = {
    "id": "page-1",
    "slugId": "abc123",
    "title": "Runbook",
    "parentPageId": None,
    "spaceId": "space-1",
    "isLocked": False,
    "createdAt": "2024-05-01T10:00:00.000Z",
    "updatedAt": "2024-05-02T10:00:00.000Z",
    "deletedAt": None,
    "content": {"type": "doc", "content": []},
    "creator": {"id": "u1", "name": "Alice"},
}


class TestPage:
    """Tests for the Page model."""
    
    def test_keeps_only_page_fields(self):
        result = Page.from_api(RAW_PAGE).to_dict()
        
        assert set(result) == {
            "id", "title", "parentPageId", "spaceId", "isLocked",
            "createdAt", "updatedAt", "deletedAt",
        }
        assert result["createdAt"].startswith("2024-05-01T10:00:00")
        assert result["deletedAt"] is None
    
    def test_includes_converted_content(self):
        result = Page.from_api(RAW_PAGE, content="").to_dict()
        
        assert result["content"] == ""
    
    def test_subpages_only_when_present(self):
        without = Page.from_api(RAW_PAGE, content="x", subpages=[]).to_dict()
        with_children = Page.from_api(
            RAW_PAGE,
            subpages=[{"id": "c1", "title": "Child", "position": "a0"}],
        ).to_dict()
        
        assert "subpages" not in without
        assert with_children["subpages"] == [{"id": "c1", "title": "Child"}]


class TestSearchResult:
    """Tests for the SearchResult model."""
    
    def test_flattens_space(self):
        raw = {
            "id": "p1",
            "title": "Deploy",
            "rank": "0.42",
            "highlight": "how to <b>deploy</b>",
            "space": {"id": "s1", "name": "Engineering", "slug": "eng"},
        }
        
        result = SearchResult.from_api(raw).to_dict()
        
        assert result["spaceId"] == "s1"
        assert result["spaceName"] == "Engineering"
        assert result["rank"] == 0.42
        assert "space" not in result
    
    def test_missing_space(self):
        result = SearchResult.from_api({"id": "p1"}).to_dict()
        
        assert result["spaceId"] is None


class TestHistory:
    """Tests for history models."""
    
    def test_entry_names(self):
        raw = {
            "id": "h1",
            "pageId": "p1",
            "title": "Runbook",
            "version": 3,
            "createdAt": "2024-05-01T10:00:00Z",
            "lastUpdatedBy": {"id": "u1", "name": "Alice"},
            "lastUpdatedById": "u1",
            "contributors": [{"id": "u1", "name": "Alice"}, {"id": "u2", "name": "Bob"}],
        }
        
        result = HistoryEntry.from_api(raw).to_dict()
        
        assert result["lastUpdatedBy"] == "Alice"
        assert result["contributors"] == ["Alice", "Bob"]
        assert result["version"] == 3
    
    def test_entry_falls_back_to_user_id(self):
        result = HistoryEntry.from_api({"id": "h1", "lastUpdatedById": "u9"}).to_dict()
        
        assert result["lastUpdatedBy"] == "u9"
        assert result["contributors"] == []
    
    def test_detail_content(self):
        raw = {"id": "h1", "content": {"type": "doc"}}
        
        assert HistoryDetail.from_api(raw, content="# Old").to_dict()["content"] == "# Old"
        assert "content" not in HistoryDetail.from_api(raw).to_dict()


class TestDirectoryModels:
    """Tests for workspace, space, group and breadcrumb models."""
    
    def test_extra_fields_dropped(self):
        workspace = Workspace.model_validate({
            "id": "w1",
            "name": "Acme",
            "defaultSpaceId": "s1",
            "hostname": "acme",
        }).to_dict()
        
        assert workspace["defaultSpaceId"] == "s1"
        assert "hostname" not in workspace
    
    def test_space_and_group(self):
        space = Space.model_validate({"id": "s1", "slug": "eng", "visibility": "open"}).to_dict()
        group = Group.model_validate({"id": "g1", "workspaceId": "w1", "memberCount": 3}).to_dict()
        
        assert space["slug"] == "eng"
        assert group["workspaceId"] == "w1"
        assert "memberCount" not in group
    
    def test_page_ref(self):
        ref = PageRef.model_validate({"id": "p1", "title": "Root", "icon": "x"}).to_dict()
        
        assert ref == {"id": "p1", "title": "Root"}

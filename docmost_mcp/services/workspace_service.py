"""
Services - Workspace Service

Workspace, space and group listings with caching.
"""

from typing import Any, Dict, List

from docmost_mcp.config import get_settings
from docmost_mcp.client import DocmostClient
from docmost_mcp.schemas import Workspace, Space, Group
from docmost_mcp.services.cache_service import shared_cache


class WorkspaceService:
    """Lists the workspace directory: workspace info, spaces, groups."""
    
    def __init__(self, settings=None, client=None, cache=None):
        self.settings = settings or get_settings()
        self.client = client or DocmostClient(self.settings)
        self.cache = cache or shared_cache()
    
    async def get_workspace(self) -> Dict[str, Any]:
        cached = self.cache.get("workspace:info")
        if cached is not None:
            return cached
        
        data = await self.client.get_workspace()
        result = Workspace.model_validate(data).to_dict()
        self.cache.set("workspace:info", result)
        return result
    
    async def list_spaces(self) -> List[Dict[str, Any]]:
        cached = self.cache.get("spaces:all")
        if cached is not None:
            return cached
        
        spaces = await self.client.get_spaces()
        result = [Space.model_validate(s).to_dict() for s in spaces]
        self.cache.set("spaces:all", result)
        return result
    
    async def list_groups(self) -> List[Dict[str, Any]]:
        cached = self.cache.get("groups:all")
        if cached is not None:
            return cached
        
        groups = await self.client.get_groups()
        result = [Group.model_validate(g).to_dict() for g in groups]
        self.cache.set("groups:all", result)
        return result

"""
Schemas - Workspace Models

Workspace, space and group records trimmed to what an agent needs.
"""

from pydantic import Field
from typing import Optional
from datetime import datetime

from docmost_mcp.schemas.base import DocmostModel


class Workspace(DocmostModel):
    """Docmost workspace."""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    default_space_id: Optional[str] = Field(None, alias="defaultSpaceId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")


class Space(DocmostModel):
    """Docmost space."""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    slug: Optional[str] = None
    visibility: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")


class Group(DocmostModel):
    """Docmost user group."""
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    workspace_id: Optional[str] = Field(None, alias="workspaceId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    deleted_at: Optional[datetime] = Field(None, alias="deletedAt")

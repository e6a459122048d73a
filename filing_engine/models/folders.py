"""Pydantic models for folder placement and folder bootstrap."""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

Level = Literal["client", "project"]
ClientType = Literal["borrower", "lender"]


class FolderResolution(BaseModel):
    """Where a document with a given category should be filed."""

    level: Level = Field(description="Client or project scope")
    folder_type: str = Field(description="Folder key")
    reason: str = Field(description="Which rule produced the placement")


class FolderTemplateEntry(BaseModel):
    """One folder in a starter template."""

    name: str
    folder_key: str
    order: int = Field(ge=1)
    parent_key: Optional[str] = None
    description: str = ""


class FolderRecord(BaseModel):
    """A folder the caller should create for a client or project."""

    owner_id: str
    level: Level
    folder_key: str
    name: str
    parent_folder_key: Optional[str] = None


class FolderBootstrapPlan(BaseModel):
    """Result of planning the starter folders for a new owner."""

    created: bool = Field(description="False when the owner already has folders")
    folders_count: int = Field(ge=0)
    folders: List[FolderRecord] = Field(default_factory=list)

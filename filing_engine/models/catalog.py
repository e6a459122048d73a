"""Pydantic models for the static classification catalog.

Catalog rows are frozen: the tables are built once at import time and are
read-only for the lifetime of the process.
"""

from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class DocumentTypePattern(BaseModel):
    """Filename pattern: keyword triggers for one canonical document type."""

    model_config = ConfigDict(frozen=True)

    keywords: Tuple[str, ...] = Field(description="Lowercase substring triggers, in priority order")
    file_type: str = Field(description="Canonical document type")
    category: str = Field(description="Document category")
    folder: str = Field(description="Target folder key")
    level: Optional[Literal["client", "project"]] = Field(
        default=None,
        description="Folder level for custom types; catalogued types use the type map"
    )
    exclude_if: Tuple[str, ...] = Field(
        default=(),
        description="Substrings that veto this pattern (e.g. 'template', 'guide')"
    )


class ContentDetectionRule(BaseModel):
    """Weighted phrase rule used by the content classifier."""

    model_config = ConfigDict(frozen=True)

    keywords: Tuple[str, ...]
    file_type: str
    weight: float = Field(gt=0)


class DocumentTypeMapping(BaseModel):
    """Authoritative filing location for a canonical document type."""

    model_config = ConfigDict(frozen=True)

    file_type: str
    category: str
    folder: str
    level: Literal["client", "project"]
    description: str = ""
    keywords: Tuple[str, ...] = ()


class LearnedKeyword(BaseModel):
    """Keyword picked up from filing corrections."""

    keyword: str
    count: int = Field(default=1, ge=0)


class FileTypeDefinition(BaseModel):
    """User-defined document type that extends the built-in catalog."""

    file_type: str = Field(min_length=1, description="Canonical document type")
    category: str = Field(description="Document category")
    keywords: List[str] = Field(default_factory=list)
    filename_patterns: List[str] = Field(default_factory=list)
    learned_keywords: List[LearnedKeyword] = Field(default_factory=list)
    exclude_patterns: List[str] = Field(default_factory=list)
    target_folder_key: Optional[str] = None
    target_level: Optional[Literal["client", "project"]] = None
    is_active: bool = True

"""Pydantic models for document classification results.

Used by the filename and content classifiers and by the filing cascade to
report which canonical document type a file is, where it should be filed,
and how confident the decision is.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from filing_engine.models.checklist import FilenameMatchResult

Level = Literal["client", "project"]


class ClassificationHint(BaseModel):
    """Filename-based document type hint."""

    file_type: str = Field(description="Canonical document type")
    category: str = Field(description="Document category")
    folder: str = Field(description="Target folder key")
    level: Optional[Level] = Field(default=None, description="Folder level named by the pattern, if any")
    confidence: float = Field(
        ge=0.0, le=1.0,
        description="Classification confidence (0.0 to 1.0)"
    )
    reason: str = Field(default="", description="Which filename keyword fired")


class ClassificationDecision(BaseModel):
    """Result of classifying a document from its summary and keywords."""

    file_type: str = Field(description="Canonical document type")
    category: str = Field(description="Document category")
    suggested_folder: str = Field(description="Target folder key")
    target_level: Level = Field(description="Whether the folder is client or project scoped")
    confidence: float = Field(
        ge=0.0, le=1.0,
        description="Classification confidence (0.0 to 1.0)"
    )
    checklist_matches: List[str] = Field(
        default_factory=list,
        description="Checklist requirement IDs this type typically satisfies"
    )


class FilingDecision(BaseModel):
    """Combined output of the filing cascade."""

    file_type: str = Field(description="Canonical document type")
    category: str = Field(description="Document category")
    suggested_folder: str = Field(description="Final folder key after placement policy")
    target_level: Level = Field(description="Final folder level after placement policy")
    confidence: float = Field(ge=0.0, le=1.0, description="Classification confidence")
    method: Literal["filename", "content_keywords", "gemini", "fallback"] = Field(
        description="Which classification layer produced the result"
    )
    placement_reason: str = Field(description="Why the folder was chosen")
    checklist_matches: List[str] = Field(
        default_factory=list,
        description="Checklist requirement IDs the document satisfies"
    )
    filename_matches: List[FilenameMatchResult] = Field(
        default_factory=list,
        description="Ranked filename matches against the supplied checklist"
    )
    needs_review: bool = Field(
        default=False,
        description="True when confidence is low or the placement was demoted"
    )
    reason: Optional[str] = Field(default=None, description="Classifier explanation, when available")

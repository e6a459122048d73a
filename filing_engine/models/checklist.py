"""Pydantic models for checklist requirements and filename match scores."""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

MatchTier = Literal["name", "document_type", "alias", "keywords"]


class ChecklistRequirement(BaseModel):
    """An expected document tracked against a client or project."""

    id: str = Field(description="Requirement ID")
    name: str = Field(description="Requirement display name")
    category: str = Field(default="", description="Requirement category")
    matching_document_types: List[str] = Field(
        default_factory=list,
        description="Document type aliases that satisfy this requirement"
    )


class FilenameMatchResult(BaseModel):
    """Score of a filename against a single checklist requirement."""

    requirement_id: str = Field(description="Requirement ID")
    score: float = Field(ge=0.0, le=1.0, description="Match score (0.0 to 1.0)")
    reason: str = Field(description="Human-readable justification")
    tier: MatchTier = Field(description="Which heuristic produced the score")


class EnrichedChecklistItem(BaseModel):
    """A checklist requirement annotated with its filename match."""

    requirement: ChecklistRequirement
    filename_match_score: Optional[float] = None
    filename_match_reason: Optional[str] = None

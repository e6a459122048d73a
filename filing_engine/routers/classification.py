"""
Classification API endpoints.

Filename and content classification, the full filing cascade, checklist
matching and the document type catalog.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from filing_engine.config import get_settings
from filing_engine.middleware.rate_limit import RATE_LIMITS, get_limiter
from filing_engine.models.catalog import FileTypeDefinition
from filing_engine.models.checklist import ChecklistRequirement
from filing_engine.services.checklist_matcher import match_checklist
from filing_engine.services.document_classifier import classify_content, classify_filename, file_document
from filing_engine.services.gemini_client import get_fallback_client
from filing_engine.services.pattern_registry import build_pattern_catalog
from filing_engine.services.patterns import FILENAME_PATTERNS
from filing_engine.services.type_mapping import (
    DOCUMENT_TYPE_MAPPINGS,
    get_all_categories,
    get_folder_for_category,
    get_types_for_category,
)

router = APIRouter(prefix="/api", tags=["classification"])
limiter = get_limiter()


class FilenameClassifyRequest(BaseModel):
    """Request model for filename classification."""
    file_name: str = Field(..., description="Original filename of the upload")
    custom_types: List[FileTypeDefinition] = Field(
        default_factory=list,
        description="User-defined document types checked before the built-in catalog"
    )


class ContentClassifyRequest(BaseModel):
    """Request model for content classification."""
    summary: str = Field(default="", description="Extracted text summary")
    keywords: List[str] = Field(default_factory=list, description="Extracted keywords")


class FilingRequest(BaseModel):
    """Request model for the full filing cascade."""
    file_name: str = Field(..., description="Original filename of the upload")
    summary: Optional[str] = Field(None, description="Extracted text summary")
    keywords: List[str] = Field(default_factory=list, description="Extracted keywords")
    has_project_context: bool = Field(True, description="Whether a project is selected")
    checklist_items: List[ChecklistRequirement] = Field(default_factory=list)
    custom_types: List[FileTypeDefinition] = Field(default_factory=list)


class ChecklistMatchRequest(BaseModel):
    """Request model for checklist matching."""
    file_name: str = Field(..., description="Original filename of the upload")
    items: List[ChecklistRequirement] = Field(default_factory=list)


def _json(content: Any, headers: Optional[Dict[str, str]] = None) -> Response:
    return JSONResponse(content=content, status_code=status.HTTP_200_OK, headers=headers)


def _classification_headers(file_type: str, method: str, confidence: float) -> Dict[str, str]:
    return {
        "X-File-Type": file_type.encode("ascii", "replace").decode("ascii"),
        "X-Classification-Method": method,
        "X-Confidence": f"{confidence:.2f}",
    }


@router.post("/classify/filename", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["classify"])  # type: ignore[untyped-decorator]
async def classify_by_filename(request: Request, body: FilenameClassifyRequest) -> Response:
    """
    Classify a document from its filename alone.

    Returns:
        200: Type hint, or null when no pattern matches
    """
    patterns = build_pattern_catalog(body.custom_types) if body.custom_types else FILENAME_PATTERNS
    hint = classify_filename(body.file_name, patterns)
    if hint is None:
        return _json(None)
    return _json(hint.model_dump(), _classification_headers(hint.file_type, "filename", hint.confidence))


@router.post("/classify/content", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["classify"])  # type: ignore[untyped-decorator]
async def classify_by_content(request: Request, body: ContentClassifyRequest) -> Response:
    """
    Classify a document from its extracted summary and keywords.

    Returns:
        200: Classification decision, or null when no rule matches
    """
    decision = classify_content(body.summary, body.keywords)
    if decision is None:
        return _json(None)
    return _json(
        decision.model_dump(),
        _classification_headers(decision.file_type, "content_keywords", decision.confidence),
    )


@router.post("/classify", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["classify"])  # type: ignore[untyped-decorator]
async def classify_and_file(request: Request, body: FilingRequest) -> Response:
    """
    Run the full filing cascade: filename, content rules, optional Gemini, fallback.

    Returns:
        200: FilingDecision
        400: Blank filename
    """
    if not body.file_name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="file_name must not be empty"
        )

    settings = get_settings()
    patterns = build_pattern_catalog(body.custom_types) if body.custom_types else FILENAME_PATTERNS

    decision = file_document(
        body.file_name,
        summary=body.summary,
        keywords=body.keywords,
        has_project_context=body.has_project_context,
        checklist_items=body.checklist_items,
        gemini_client=get_fallback_client(settings),
        settings=settings,
        patterns=patterns,
    )
    return _json(
        decision.model_dump(),
        _classification_headers(decision.file_type, decision.method, decision.confidence),
    )


@router.post("/checklist/match", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["classify"])  # type: ignore[untyped-decorator]
async def match_filename_to_checklist(request: Request, body: ChecklistMatchRequest) -> Response:
    """
    Score a filename against checklist requirements.

    Returns:
        200: Matches with score > 0, highest first
    """
    matches = match_checklist(body.file_name, body.items)
    return _json([m.model_dump() for m in matches])


@router.get("/document-types", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["catalog"])  # type: ignore[untyped-decorator]
async def list_document_types(request: Request, category: Optional[str] = None) -> Response:
    """
    List canonical document types with their category and folder.

    Args:
        category: Optional case-insensitive category filter
    """
    rows = get_types_for_category(category) if category else DOCUMENT_TYPE_MAPPINGS
    return _json([m.model_dump(mode="json") for m in rows])


@router.get("/categories", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["catalog"])  # type: ignore[untyped-decorator]
async def list_categories(request: Request) -> Response:
    """
    List document categories with their default folder and level.
    """
    return _json([
        {"category": name, **get_folder_for_category(name)}
        for name in get_all_categories()
    ])

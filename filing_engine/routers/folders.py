"""
Folder API endpoints.

Folder placement for a category, starter templates and bootstrap planning.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from filing_engine.middleware.rate_limit import RATE_LIMITS, get_limiter
from filing_engine.models.folders import ClientType, Level
from filing_engine.services.folder_resolver import resolve_folder
from filing_engine.services.folder_templates import get_folder_template, plan_folder_bootstrap

router = APIRouter(prefix="/api/folders", tags=["folders"])
limiter = get_limiter()


class ResolveFolderRequest(BaseModel):
    """Request model for folder resolution."""
    category: str = Field(..., description="Free-text category or canonical document type")
    has_project_context: bool = Field(True, description="Whether a project is selected")


class BootstrapRequest(BaseModel):
    """Request model for folder bootstrap planning."""
    owner_id: str = Field(..., description="Client or project ID")
    level: Level = Field(..., description="client or project")
    client_type: ClientType = Field("borrower", description="borrower or lender")
    existing_folders: List[str] = Field(default_factory=list, description="Folder keys that already exist")


@router.post("/resolve", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["folders"])  # type: ignore[untyped-decorator]
async def resolve_category_folder(request: Request, body: ResolveFolderRequest) -> Response:
    """
    Map a category to its folder, demoting project folders when no project is selected.
    """
    resolution = resolve_folder(body.category, body.has_project_context)
    return JSONResponse(content=resolution.model_dump(), status_code=status.HTTP_200_OK)


@router.get("/templates", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["catalog"])  # type: ignore[untyped-decorator]
async def list_folder_template(request: Request, client_type: str = "borrower", level: str = "client") -> Response:
    """
    Starter folders for a client type and level.

    Returns:
        200: Template entries in display order
        400: Unknown client type or level
    """
    try:
        entries = get_folder_template(client_type, level)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return JSONResponse(content=[e.model_dump() for e in entries], status_code=status.HTTP_200_OK)


@router.post("/bootstrap", status_code=status.HTTP_200_OK)
@limiter.limit(RATE_LIMITS["folders"])  # type: ignore[untyped-decorator]
async def bootstrap_folders(request: Request, body: BootstrapRequest) -> Response:
    """
    Plan the starter folders for a new client or project.

    Returns:
        200: Plan (created=false when folders already exist)
        400: Blank owner id
    """
    try:
        plan = plan_folder_bootstrap(
            body.owner_id,
            body.level,
            body.existing_folders,
            client_type=body.client_type,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return JSONResponse(content=plan.model_dump(), status_code=status.HTTP_200_OK)

"""FastAPI application for the document filing service."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded  # type: ignore[import-not-found]

from filing_engine.config import get_settings
from filing_engine.middleware.logging import RequestLoggingMiddleware, configure_logging
from filing_engine.middleware.rate_limit import (
    get_limiter,
    rate_limit_exceeded_handler,
)
from filing_engine.middleware.request_id import RequestIDMiddleware
from filing_engine.routers import classification, folders
from filing_engine.services.patterns import CONTENT_DETECTION_RULES, FILENAME_PATTERNS
from filing_engine.services.type_mapping import DOCUMENT_TYPE_MAPPINGS

VERSION = "1.0.0"
COMMIT_HASH = "development"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate configuration on startup."""
    try:
        settings = get_settings()
    except Exception as e:
        logger.error(f"Startup validation failed: {e}")
        raise

    configure_logging(settings.log_level_value)
    logger.info(f"Starting Document Filing API v{VERSION}")
    logger.info(f"LLM fallback: {settings.enable_llm_fallback} (model: {settings.model_name})")
    logger.info(
        f"Catalog: {len(FILENAME_PATTERNS)} filename patterns, "
        f"{len(CONTENT_DETECTION_RULES)} content rules, {len(DOCUMENT_TYPE_MAPPINGS)} document types"
    )

    yield

    logger.info("Shutting down Document Filing API")


app = FastAPI(
    title="Document Filing API",
    description="Rule-based document classification, folder placement and checklist matching",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Rate limiter on app state (required by slowapi)
limiter = get_limiter()
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Last added runs first: request ID is assigned before the logging middleware reads it.
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Health check: the rule catalog is loaded and settings are valid.

    The Gemini fallback is reported but never called here.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "catalog": f"{len(FILENAME_PATTERNS)} patterns",
            "llm_fallback": "enabled" if settings.enable_llm_fallback else "disabled",
        },
    }


@app.get("/version")
async def version_info() -> Dict[str, str]:
    """Version number and commit hash."""
    return {
        "version": VERSION,
        "commit_hash": COMMIT_HASH,
    }


app.include_router(classification.router)
app.include_router(folders.router)

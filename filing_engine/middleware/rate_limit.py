"""Rate limiting using slowapi, keyed on the client IP."""

import json

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from filing_engine.config import get_settings


def get_client_ip(request: Request) -> str:
    """
    Get the client IP address from the request.

    X-Forwarded-For is only honoured when the direct peer is one of the
    configured trusted proxies.
    """
    direct_ip: str = get_remote_address(request)

    trusted = get_settings().trusted_proxy_list
    if not trusted:
        return direct_ip

    if direct_ip in trusted:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

    return direct_ip


# In-memory storage; one process per deployment. slowapi adds the
# X-RateLimit-* headers to every limited response.
limiter = Limiter(key_func=get_client_ip, default_limits=["300/minute"], headers_enabled=True)


RATE_LIMITS = {
    "classify": "120/minute",   # POST /api/classify* and /api/checklist/match
    "folders": "60/minute",     # POST /api/folders/*
    "catalog": "300/minute",    # GET catalog and template listings
}


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """
    Return 429 with Retry-After, X-RateLimit-Limit and X-RateLimit-Remaining headers.
    """
    retry_after = getattr(exc, "retry_after", 60)

    error_body = {
        "detail": "Rate limit exceeded",
        "message": f"Too many requests. Please retry after {retry_after} seconds.",
        "retry_after": retry_after,
    }

    response = Response(
        content=json.dumps(error_body),
        status_code=429,
        media_type="application/json",
    )
    response.headers["Retry-After"] = str(retry_after)
    response.headers["X-RateLimit-Remaining"] = "0"

    if getattr(exc, "detail", None):
        response.headers["X-RateLimit-Limit"] = str(exc.detail)

    return response


def get_limiter() -> Limiter:
    """Module-level limiter used by route decorators."""
    return limiter

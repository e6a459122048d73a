"""Logging middleware for request tracking and structured logging."""

import json
import logging
import sys
import time
import uuid
from typing import Any, Awaitable, Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

# Response header -> log field. Set by the classification routes.
CLASSIFICATION_HEADERS = {
    "X-File-Type": "file_type",
    "X-Classification-Method": "classification_method",
}


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stdout as bare messages; the middleware formats JSON itself."""
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs one structured JSON line per request.

    Logs include:
    - Request ID (UUID)
    - HTTP method and path
    - Status code and processing time
    - Client IP
    - Classification outcome (file_type, classification_method, confidence)

    Does NOT log request/response bodies: summaries may contain client data.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        log_data: Dict[str, Any] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "user_ip": request.client.host if request.client else "unknown",
        }

        try:
            response = await call_next(request)
        except Exception as e:
            processing_time_ms = (time.time() - start_time) * 1000
            error_log = {
                **log_data,
                "status_code": 500,
                "processing_time_ms": round(processing_time_ms, 2),
                "error": str(e),
                "error_type": type(e).__name__,
                "message": f"Request failed: {request.method} {request.url.path}",
            }
            logger.error(json.dumps(error_log), exc_info=True)
            raise

        processing_time_ms = (time.time() - start_time) * 1000
        log_data.update({
            "status_code": response.status_code,
            "processing_time_ms": round(processing_time_ms, 2),
        })
        log_data.update(extract_classification_fields(response))

        logger.info(json.dumps(log_data))

        response.headers["X-Request-ID"] = request_id
        return response


def extract_classification_fields(response: Response) -> Dict[str, Any]:
    """Read the classification headers a route attached to its response."""
    fields: Dict[str, Any] = {}
    for header, field in CLASSIFICATION_HEADERS.items():
        if header in response.headers:
            fields[field] = response.headers[header]

    if "X-Confidence" in response.headers:
        try:
            fields["confidence"] = float(response.headers["X-Confidence"])
        except ValueError:
            logger.debug(f"Ignoring malformed X-Confidence header: {response.headers['X-Confidence']!r}")

    return fields

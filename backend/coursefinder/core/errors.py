"""Error taxonomy and the JSON error body shared by every endpoint.

Body format: {error, code, details?}
"""

import logging
import traceback
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from ..models.status import ApiError

logger = logging.getLogger(__name__)


class CourseFinderError(Exception):
    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(CourseFinderError):
    """Malformed or out-of-range request input."""

    code = "INVALID_PARAMS"
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(CourseFinderError):
    code = "NOT_FOUND"
    status_code = 404


class StoreError(CourseFinderError):
    """The Course Store (Supabase) failed; never retried at this layer."""

    code = "DATABASE_ERROR"
    status_code = 503

    def __init__(self, message: str):
        super().__init__("Database operation failed", details=message)


class InternalError(CourseFinderError):
    code = "INTERNAL_ERROR"
    status_code = 500


def error_response(code: str, message: str, status_code: int, details: Optional[str] = None) -> JSONResponse:
    body = ApiError(error=message, code=code, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def course_finder_error_handler(request: Request, exc: CourseFinderError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error("Database error on %s: %s", request.url.path, exc.details)
    return error_response(exc.code, exc.message, exc.status_code, exc.details)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Never return stack traces to clients; log them server-side."""
    logger.error(
        "Unhandled error: %s path=%s\n%s",
        str(exc),
        request.url.path,
        traceback.format_exc(),
    )
    return error_response(InternalError.code, "Internal server error", InternalError.status_code)

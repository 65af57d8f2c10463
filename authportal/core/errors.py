# File: authportal/core/errors.py

"""
Server-side error types and the handler that renders them.

Every error leaves the process healthy; the client only ever sees
``{"error": <message>}`` with the matching status code.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.requests import Request

from authportal.schemas.auth import ErrorResponse

logger = logging.getLogger(__name__)


class AuthPortalError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldsError(AuthPortalError):
    """Raised when a required credential field is absent or empty."""
    status_code = status.HTTP_400_BAD_REQUEST


async def auth_portal_error_handler(request: Request, exc: AuthPortalError) -> JSONResponse:
    log_level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(log_level, "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )

"""
Global exception handlers.

BastionError kinds map to HTTP statuses in one table. Anything else is a
500 with a generic body; internal details stay in the log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared.exceptions import BastionError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_IDENTITY: status.HTTP_409_CONFLICT,
    ErrorKind.EMAIL_IN_USE: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SELF_DELETION: status.HTTP_403_FORBIDDEN,
    ErrorKind.INSUFFICIENT_PERMISSIONS: status.HTTP_403_FORBIDDEN,
    ErrorKind.UNAUTHORIZED_UPDATE: status.HTTP_403_FORBIDDEN,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


def status_for(kind: ErrorKind) -> int:
    return STATUS_BY_KIND[kind]


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(BastionError)
    async def bastion_error_handler(request: Request, exc: BastionError):
        status_code = status_for(exc.kind)
        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        logger.debug("%s on %s", exc.code, request.url.path)
        return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "details": {},
            },
        )

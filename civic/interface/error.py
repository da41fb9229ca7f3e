"""Interface layer error handling.

Maps domain errors raised by the use cases onto HTTP responses.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from civic.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)

ERROR_STATUS: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def status_for(error: DomainError) -> int:
    for error_type, status_code in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"detail": message}``."""
    status_code = status_for(exc)
    logfire.info(
        "Domain error",
        error_type=type(exc).__name__,
        status_code=status_code,
        path=request.url.path,
        detail=str(exc),
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)

"""Exception handlers translating errors into ``{"error": message}`` responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import InspectionError, MalformedModelOutputError, get_user_message

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def register_error_handlers(application: FastAPI) -> None:
    @application.exception_handler(InspectionError)
    async def handle_inspection_error(request: Request, exc: InspectionError) -> JSONResponse:
        if isinstance(exc, MalformedModelOutputError):
            # Raw text stays in the gateway log; only the safe message goes out
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        elif exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        else:
            logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.user_message})

    @application.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @application.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)},
        )

    @application.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": get_user_message(exc)},
        )

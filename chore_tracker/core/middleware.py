from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
import logging
from typing import Sequence, Any

from chore_tracker.schemas.result import Error, Result, ErrorCategory
from chore_tracker.core.exception import CustomException
from chore_tracker.storage import NotFoundError

logger = logging.getLogger(__name__)


async def custom_exception_handler(request: Request, ex: CustomException) -> JSONResponse:
    """Handle custom application exceptions"""
    error = Error(message=ex.detail, status_code=ex.status_code, category=ex.category)
    return create_error_response(error, headers=ex.headers)


async def validation_error_handler(
    request: Request, ex: ValidationError | RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors as invalid input"""
    error = Error(
        message=format_validation_error(ex.errors()),
        status_code=400,
        category=ErrorCategory.VALIDATION,
    )
    return create_error_response(error)


async def http_exception_handler(
    request: Request, ex: StarletteHTTPException
) -> JSONResponse:
    """Handle FastAPI/Starlette HTTP exceptions (missing routes, missing bearer token...)"""
    error = Error(
        message=ex.detail if isinstance(ex.detail, str) else str(ex.detail),
        status_code=ex.status_code,
        category=infer_category_from_status(ex.status_code),
    )
    return create_error_response(error, headers=getattr(ex, "headers", None))


async def not_found_error_handler(request: Request, ex: NotFoundError) -> JSONResponse:
    """Storage lookups that fail mid-operation become a generic 404"""
    logger.debug("%s %s: %s %s not found", request.method, request.url.path, ex.entity, ex.entity_id)
    error = Error(message="Not found", status_code=404, category=ErrorCategory.NOT_FOUND)
    return create_error_response(error)


EXCEPTION_HANDLERS = {
    CustomException: custom_exception_handler,
    RequestValidationError: validation_error_handler,
    ValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    NotFoundError: not_found_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the typed handlers on the app.

    FastAPI resolves HTTPException and RequestValidationError inside its own
    exception middleware, so they never reach ExceptionHandlingMiddleware.
    """
    for exc_type, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_type, handler)


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """
    Last-resort handler: anything the typed handlers did not claim becomes a
    standardized 500 Result.
    """

    def __init__(self, app, log_internal_errors: bool = True):
        super().__init__(app)
        self.log_internal_errors = log_internal_errors

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as ex:
            return await self._handle_unhandled_exception(ex, request)

    async def _handle_unhandled_exception(
        self, ex: Exception, request: Request
    ) -> JSONResponse:
        """Handle unexpected exceptions"""
        if self.log_internal_errors:
            logger.error(
                f"Unhandled exception on {request.method} {request.url.path}",
                exc_info=ex,
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "client": request.client.host if request.client else None,
                },
            )

        # Don't expose internal error details
        error = Error(
            message="An unexpected error occurred. Please try again later.",
            status_code=500,
            category=ErrorCategory.INTERNAL,
        )
        return create_error_response(error)


def create_error_response(error: Error, headers: dict | None = None) -> JSONResponse:
    """Create standardized JSON error response"""
    return JSONResponse(
        status_code=error.status_code,
        content=Result.failure(error).model_dump(),
        headers=headers,
    )


def format_validation_error(errors: Sequence[Any]) -> str:
    """Format validation errors into human-readable message"""
    messages = []
    for error in errors:
        loc = " -> ".join(str(loc) for loc in error.get("loc", []))
        msg = error.get("msg", "Unknown error")
        error_type = error.get("type", "unknown")

        messages.append(f"Error in {loc}: {msg} (type: {error_type})")

    return "; ".join(messages) if messages else "Validation failed"


def infer_category_from_status(status_code: int) -> ErrorCategory:
    """Infer error category from HTTP status code"""
    status_category_map = {
        401: ErrorCategory.AUTHENTICATION,
        403: ErrorCategory.AUTHORIZATION,
        404: ErrorCategory.NOT_FOUND,
        409: ErrorCategory.RESOURCE_CONFLICT,
        422: ErrorCategory.VALIDATION,
    }
    if status_code in status_category_map:
        return status_category_map[status_code]
    elif 400 <= status_code < 500:
        return ErrorCategory.BAD_REQUEST
    elif status_code >= 500:
        return ErrorCategory.INTERNAL
    else:
        return ErrorCategory.CUSTOM

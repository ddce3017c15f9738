"""Error Handlers — global exception handlers for the customer inquiry API.

Invariants:
    - InquiryError → caller-safe {message, error} with the error's http_status
    - RequestValidationError (malformed body) → 400 VALIDATION_ERROR
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - Every failure body has exactly the keys `message` and `error`

Design Decisions:
    - Three-layer handler: domain (InquiryError), validation (Pydantic), catch-all (Exception)
    - Inquiry outcomes are rendered by the route; these handlers only cover failures
      that happen outside the pipeline (body parsing, wiring bugs)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from customer_inquiry.core.errors import (
    INVALID_REQUEST, UNEXPECTED_ERROR, ErrorCode, InquiryError, error_payload,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_inquiry_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_inquiry_error_handler(app: FastAPI) -> None:
    """Register infrastructure error handler."""

    @app.exception_handler(InquiryError)
    async def inquiry_error_handler(request: Request, exc: InquiryError):
        """Handle errors raised outside the inquiry pipeline's own fault capture."""
        logger.error(
            f"InquiryError: {exc.message}",
            extra={"error_code": exc.code.value, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload(ErrorCode.VALIDATION_ERROR, INVALID_REQUEST),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_payload(ErrorCode.INTERNAL_ERROR, UNEXPECTED_ERROR),
        )

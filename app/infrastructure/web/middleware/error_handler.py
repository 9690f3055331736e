"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status
import json

from app.config import settings
from app.domain.models.base import ValidationError, PersistenceError

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        # Log the full exception with traceback
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        status_code, error_response = self.format_error_response(exc)

        # In development, add more debug information
        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=status_code,
            content=error_response
        )

    def format_error_response(self, exc: Exception):
        """
        Format exception into a status code and the standard envelope.
        """
        # Default error response
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_response: Dict[str, Any] = {
            "success": False,
            "message": "An unexpected error occurred",
        }

        # Handle specific exception types
        if isinstance(exc, ValidationError):
            status_code = status.HTTP_400_BAD_REQUEST
            error_response.update({
                "message": "Validation error",
                "errors": exc.errors,
            })
        elif isinstance(exc, json.JSONDecodeError):
            status_code = status.HTTP_400_BAD_REQUEST
            error_response.update({
                "message": "Validation error",
                "errors": [{"field": "body", "message": "The request body contains invalid JSON"}],
            })
        elif isinstance(exc, PersistenceError):
            error_response["message"] = "Failed to store submission. Please try again."
        elif isinstance(exc, TimeoutError):
            status_code = status.HTTP_408_REQUEST_TIMEOUT
            error_response["message"] = "The request took too long to process"

        return status_code, error_response

"""
Response envelopes shared by the submission routers.
"""

from typing import Any, Dict, List

from fastapi import status
from fastapi.responses import JSONResponse

from app.application.use_cases.base_use_case import UseCaseResult


def validation_error_response(errors: List[Dict[str, Any]]) -> JSONResponse:
    """400 envelope listing every failed field."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation error",
            "errors": errors,
        }
    )


def failure_response(message: str) -> JSONResponse:
    """Generic 500 envelope; internal details stay in the logs."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": message}
    )


def created_response(result: UseCaseResult, success_message: str, failure_message: str) -> JSONResponse:
    """Map a create use case result onto the 201/400/500 envelopes."""
    if result.success:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={
                "success": True,
                "data": result.data.model_dump(mode="json"),
                "message": success_message,
            }
        )

    if result.is_validation_error:
        return validation_error_response(result.errors or [])

    return failure_response(failure_message)


def list_response(result: UseCaseResult, failure_message: str) -> JSONResponse:
    """Map a list use case result onto the 200/500 envelopes."""
    if not result.success:
        return failure_response(failure_message)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "success": True,
            "data": [item.model_dump(mode="json") for item in result.data],
        }
    )

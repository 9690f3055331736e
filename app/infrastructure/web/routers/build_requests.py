"""
Custom build request router.
"""

from typing import Annotated, Any, Dict
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from app.application.dto.submission_dto import BuildRequestResponseDTO
from app.application.use_cases.submission_use_cases import (
    SubmitBuildRequestUseCase,
    ListSubmissionsUseCase
)
from app.infrastructure.db.database import get_db
from app.infrastructure.email import NotificationDispatcher, get_notification_dispatcher
from app.infrastructure.repositories.submission_repository import SQLAlchemyBuildRequestRepository
from app.infrastructure.web.responses import created_response, list_response


router = APIRouter()


def get_build_request_repository(session=Depends(get_db)):
    """Dependency to get build request repository."""
    return SQLAlchemyBuildRequestRepository(session)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_build_request(
    repository: Annotated[SQLAlchemyBuildRequestRepository, Depends(get_build_request_repository)],
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
    payload: Dict[str, Any] = Body(...)
) -> JSONResponse:
    """
    Request a custom build.

    - **budget**: Budget, zero or more
    - **bedrooms**, **bathrooms**: At least 1 each
    - **location**, **property_type**, **timeline**: Required
    - **special_requirements**: Optional
    """
    use_case = SubmitBuildRequestUseCase(repository, dispatcher)
    result = await use_case.execute(payload)
    return created_response(
        result,
        success_message="Build request submitted successfully!",
        failure_message="Failed to submit build request. Please try again."
    )


@router.get("")
async def list_build_requests(
    repository: Annotated[SQLAlchemyBuildRequestRepository, Depends(get_build_request_repository)]
) -> JSONResponse:
    """List every build request, newest first."""
    use_case = ListSubmissionsUseCase(repository, BuildRequestResponseDTO)
    result = await use_case.execute(None)
    return list_response(result, failure_message="Failed to fetch build requests")

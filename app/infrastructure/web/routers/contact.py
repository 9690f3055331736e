"""
Contact form router.
"""

from typing import Annotated, Any, Dict
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from app.application.dto.submission_dto import ContactMessageResponseDTO
from app.application.use_cases.submission_use_cases import (
    SubmitContactMessageUseCase,
    ListSubmissionsUseCase
)
from app.infrastructure.db.database import get_db
from app.infrastructure.email import NotificationDispatcher, get_notification_dispatcher
from app.infrastructure.repositories.submission_repository import SQLAlchemyContactMessageRepository
from app.infrastructure.web.responses import created_response, list_response


router = APIRouter()


def get_contact_message_repository(session=Depends(get_db)):
    """Dependency to get contact message repository."""
    return SQLAlchemyContactMessageRepository(session)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_contact_message(
    repository: Annotated[SQLAlchemyContactMessageRepository, Depends(get_contact_message_repository)],
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
    payload: Dict[str, Any] = Body(...)
) -> JSONResponse:
    """Send a message through the contact form."""
    use_case = SubmitContactMessageUseCase(repository, dispatcher)
    result = await use_case.execute(payload)
    return created_response(
        result,
        success_message="Message sent successfully!",
        failure_message="Failed to send message. Please try again."
    )


@router.get("")
async def list_contact_messages(
    repository: Annotated[SQLAlchemyContactMessageRepository, Depends(get_contact_message_repository)]
) -> JSONResponse:
    """List every contact message, newest first."""
    use_case = ListSubmissionsUseCase(repository, ContactMessageResponseDTO)
    result = await use_case.execute(None)
    return list_response(result, failure_message="Failed to fetch contact messages")

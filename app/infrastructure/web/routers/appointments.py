"""
Appointment booking router.
Handles the appointment form and the list of booked appointments.
"""

from typing import Annotated, Any, Dict
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from app.application.dto.submission_dto import AppointmentResponseDTO
from app.application.use_cases.submission_use_cases import (
    SubmitAppointmentUseCase,
    ListSubmissionsUseCase
)
from app.infrastructure.db.database import get_db
from app.infrastructure.email import NotificationDispatcher, get_notification_dispatcher
from app.infrastructure.repositories.submission_repository import SQLAlchemyAppointmentRepository
from app.infrastructure.web.responses import created_response, list_response


router = APIRouter()


def get_appointment_repository(session=Depends(get_db)):
    """Dependency to get appointment repository."""
    return SQLAlchemyAppointmentRepository(session)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_appointment(
    repository: Annotated[SQLAlchemyAppointmentRepository, Depends(get_appointment_repository)],
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
    payload: Dict[str, Any] = Body(...)
) -> JSONResponse:
    """
    Book a property viewing.

    - **name**, **email**, **phone**: Contact details (required)
    - **preferred_date**, **preferred_time**: Requested slot (required)
    - **message**: Optional note
    - **property_interest**: Optional property the visitor is interested in
    """
    use_case = SubmitAppointmentUseCase(repository, dispatcher)
    result = await use_case.execute(payload)
    return created_response(
        result,
        success_message="Appointment booked successfully!",
        failure_message="Failed to book appointment. Please try again."
    )


@router.get("")
async def list_appointments(
    repository: Annotated[SQLAlchemyAppointmentRepository, Depends(get_appointment_repository)]
) -> JSONResponse:
    """List every appointment, newest first."""
    use_case = ListSubmissionsUseCase(repository, AppointmentResponseDTO)
    result = await use_case.execute(None)
    return list_response(result, failure_message="Failed to fetch appointments")

"""
Submission use cases for the application layer.
Validate, store and announce lead-capture form submissions.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import ValidationError as PydanticValidationError

from app.application.use_cases.base_use_case import CreateUseCase, ListUseCase
from app.application.dto.base_dto import field_errors, to_domain_dict
from app.application.dto.submission_dto import (
    SubmissionRequestDTO, SubmissionResponseDTO,
    CreateAppointmentRequestDTO, AppointmentResponseDTO,
    CreateBuildRequestRequestDTO, BuildRequestResponseDTO,
    CreateContactMessageRequestDTO, ContactMessageResponseDTO
)
from app.domain.models.base import ValidationError
from app.domain.models.notification import NotificationKind, NotificationResult
from app.domain.models.submission import Submission, Appointment, BuildRequest, ContactMessage
from app.domain.repositories.submission_repository import SubmissionRepository


logger = logging.getLogger(__name__)


class SubmitFormUseCase(CreateUseCase[Dict[str, Any], SubmissionResponseDTO]):
    """
    Handles one form submission.

    The payload is validated, stored with its default status, then announced
    to the administrators. Whatever the notification outcome, a stored
    submission is returned as a success.
    """

    kind: NotificationKind
    request_dto: Type[SubmissionRequestDTO]
    response_dto: Type[SubmissionResponseDTO]
    entity_class: Type[Submission]

    def __init__(self, repository: SubmissionRepository, dispatcher):
        super().__init__()
        self.repository = repository
        self.dispatcher = dispatcher
        self.notification_result: Optional[NotificationResult] = None

    async def _validate_request(self, request: Dict[str, Any]) -> SubmissionRequestDTO:
        if not isinstance(request, dict):
            raise ValidationError(
                "Validation error",
                errors=[{"field": "body", "message": "Request body must be a JSON object"}]
            )
        try:
            return self.request_dto.model_validate(request)
        except PydanticValidationError as e:
            raise ValidationError("Validation error", errors=field_errors(e)) from e

    async def _execute_command_logic(self, request: SubmissionRequestDTO) -> SubmissionResponseDTO:
        submission = self.entity_class(**to_domain_dict(request))
        submission.validate()

        saved = await asyncio.to_thread(self.repository.create, submission)
        logger.info(f"{self.kind.value} submission stored with id {saved.id}")

        self.notification_result = await self._notify(request)

        return self.response_dto(**saved.to_dict())

    async def _notify(self, request: SubmissionRequestDTO) -> Optional[NotificationResult]:
        try:
            return await self.dispatcher.notify(
                self.kind,
                request.model_dump(),
                reply_to=request.email,
            )
        except Exception as e:
            logger.error(f"{self.kind.value} notification raised, submission kept: {str(e)}")
            return NotificationResult.failed(str(e))


class SubmitAppointmentUseCase(SubmitFormUseCase):
    """Use case for booking an appointment."""

    kind = NotificationKind.APPOINTMENT
    request_dto = CreateAppointmentRequestDTO
    response_dto = AppointmentResponseDTO
    entity_class = Appointment


class SubmitBuildRequestUseCase(SubmitFormUseCase):
    """Use case for submitting a custom build request."""

    kind = NotificationKind.BUILD
    request_dto = CreateBuildRequestRequestDTO
    response_dto = BuildRequestResponseDTO
    entity_class = BuildRequest


class SubmitContactMessageUseCase(SubmitFormUseCase):
    """Use case for sending a contact message."""

    kind = NotificationKind.CONTACT
    request_dto = CreateContactMessageRequestDTO
    response_dto = ContactMessageResponseDTO
    entity_class = ContactMessage


class ListSubmissionsUseCase(ListUseCase[None, List[SubmissionResponseDTO]]):
    """Use case for listing every submission of one kind, newest first."""

    def __init__(self, repository: SubmissionRepository, response_dto: Type[SubmissionResponseDTO]):
        super().__init__()
        self.repository = repository
        self.response_dto = response_dto

    async def _execute_business_logic(self, request: None) -> List[SubmissionResponseDTO]:
        submissions = await asyncio.to_thread(self.repository.list_all)
        return [self.response_dto(**submission.to_dict()) for submission in submissions]

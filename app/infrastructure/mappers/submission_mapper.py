"""
Submission mappers for converting between domain entities and database models.
"""

from app.domain.models.submission import (
    Appointment, AppointmentStatus,
    BuildRequest, BuildRequestStatus,
    ContactMessage, ContactMessageStatus,
)
from app.infrastructure.db.models import (
    AppointmentModel, BuildRequestModel, ContactMessageModel
)


class SubmissionMapper:
    """Shared helpers for submission mappers."""

    def _with_identity(self, model, entity):
        """Copy id and creation time only when already assigned, so column defaults apply."""
        if entity.id is not None:
            model.id = entity.id
        if entity.created_at is not None:
            model.created_at = entity.created_at
        return model


class AppointmentMapper(SubmissionMapper):
    """Maps between Appointment domain entity and AppointmentModel."""

    model = AppointmentModel

    def domain_to_model(self, appointment: Appointment) -> AppointmentModel:
        """Convert Appointment domain entity to AppointmentModel."""
        model = AppointmentModel(
            name=appointment.name,
            email=appointment.email,
            phone=appointment.phone,
            preferred_date=appointment.preferred_date,
            preferred_time=appointment.preferred_time,
            message=appointment.message,
            property_interest=appointment.property_interest,
            status=appointment.status.value,
        )
        return self._with_identity(model, appointment)

    def model_to_domain(self, model: AppointmentModel) -> Appointment:
        """Convert AppointmentModel to Appointment domain entity."""
        return Appointment(
            id=model.id,
            created_at=model.created_at,
            name=model.name,
            email=model.email,
            phone=model.phone,
            preferred_date=model.preferred_date,
            preferred_time=model.preferred_time,
            message=model.message,
            property_interest=model.property_interest,
            status=AppointmentStatus(model.status) if model.status else AppointmentStatus.PENDING,
        )


class BuildRequestMapper(SubmissionMapper):
    """Maps between BuildRequest domain entity and BuildRequestModel."""

    model = BuildRequestModel

    def domain_to_model(self, build_request: BuildRequest) -> BuildRequestModel:
        """Convert BuildRequest domain entity to BuildRequestModel."""
        model = BuildRequestModel(
            name=build_request.name,
            email=build_request.email,
            phone=build_request.phone,
            budget=build_request.budget,
            location=build_request.location,
            property_type=build_request.property_type,
            bedrooms=build_request.bedrooms,
            bathrooms=build_request.bathrooms,
            special_requirements=build_request.special_requirements,
            timeline=build_request.timeline,
            status=build_request.status.value,
        )
        return self._with_identity(model, build_request)

    def model_to_domain(self, model: BuildRequestModel) -> BuildRequest:
        """Convert BuildRequestModel to BuildRequest domain entity."""
        return BuildRequest(
            id=model.id,
            created_at=model.created_at,
            name=model.name,
            email=model.email,
            phone=model.phone,
            budget=float(model.budget) if model.budget is not None else 0.0,
            location=model.location,
            property_type=model.property_type,
            bedrooms=model.bedrooms,
            bathrooms=model.bathrooms,
            special_requirements=model.special_requirements,
            timeline=model.timeline,
            status=BuildRequestStatus(model.status) if model.status else BuildRequestStatus.PENDING,
        )


class ContactMessageMapper(SubmissionMapper):
    """Maps between ContactMessage domain entity and ContactMessageModel."""

    model = ContactMessageModel

    def domain_to_model(self, contact_message: ContactMessage) -> ContactMessageModel:
        """Convert ContactMessage domain entity to ContactMessageModel."""
        model = ContactMessageModel(
            name=contact_message.name,
            email=contact_message.email,
            phone=contact_message.phone,
            subject=contact_message.subject,
            message=contact_message.message,
            status=contact_message.status.value,
        )
        return self._with_identity(model, contact_message)

    def model_to_domain(self, model: ContactMessageModel) -> ContactMessage:
        """Convert ContactMessageModel to ContactMessage domain entity."""
        return ContactMessage(
            id=model.id,
            created_at=model.created_at,
            name=model.name,
            email=model.email,
            phone=model.phone,
            subject=model.subject,
            message=model.message,
            status=ContactMessageStatus(model.status) if model.status else ContactMessageStatus.UNREAD,
        )

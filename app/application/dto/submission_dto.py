"""
Submission DTOs for the application layer.
Request schemas for the lead-capture forms and the records returned to clients.
"""

from typing import Optional
from pydantic import Field, validator

from .base_dto import CreateRequestDTO, ResponseDTO
from app.infrastructure.validation.validators import DataValidator


class SubmissionRequestDTO(CreateRequestDTO):
    """Contact details every form asks for."""

    name: str = Field(description="Submitter name")
    email: str = Field(description="Submitter email")
    phone: str = Field(description="Submitter phone number")

    @validator('name')
    def validate_name(cls, v):
        return DataValidator.validate_required_text(v, "Name is required")

    @validator('email')
    def validate_email(cls, v):
        return DataValidator.validate_email(v)

    @validator('phone')
    def validate_phone(cls, v):
        return DataValidator.validate_required_text(v, "Phone number is required")


class CreateAppointmentRequestDTO(SubmissionRequestDTO):
    """DTO for booking a viewing appointment."""

    preferred_date: str = Field(description="Requested date")
    preferred_time: str = Field(description="Requested time")
    message: Optional[str] = Field(default=None, description="Optional note")
    property_interest: Optional[str] = Field(default=None, description="Property the visitor is interested in")

    @validator('preferred_date')
    def validate_preferred_date(cls, v):
        return DataValidator.validate_required_text(v, "Preferred date is required")

    @validator('preferred_time')
    def validate_preferred_time(cls, v):
        return DataValidator.validate_required_text(v, "Preferred time is required")


class CreateBuildRequestRequestDTO(SubmissionRequestDTO):
    """DTO for requesting a custom build."""

    budget: float = Field(allow_inf_nan=False, description="Budget in the local currency")
    location: str = Field(description="Build location")
    property_type: str = Field(description="Kind of property")
    bedrooms: int = Field(description="Number of bedrooms")
    bathrooms: int = Field(description="Number of bathrooms")
    special_requirements: Optional[str] = Field(default=None, description="Anything else the builder should know")
    timeline: str = Field(description="Desired timeline")

    @validator('budget')
    def validate_budget(cls, v):
        return DataValidator.validate_minimum(v, 0, "Budget must be a positive number")

    @validator('location')
    def validate_location(cls, v):
        return DataValidator.validate_required_text(v, "Location is required")

    @validator('property_type')
    def validate_property_type(cls, v):
        return DataValidator.validate_required_text(v, "Property type is required")

    @validator('bedrooms')
    def validate_bedrooms(cls, v):
        return DataValidator.validate_minimum(v, 1, "Number of bedrooms must be at least 1")

    @validator('bathrooms')
    def validate_bathrooms(cls, v):
        return DataValidator.validate_minimum(v, 1, "Number of bathrooms must be at least 1")

    @validator('timeline')
    def validate_timeline(cls, v):
        return DataValidator.validate_required_text(v, "Timeline is required")


class CreateContactMessageRequestDTO(SubmissionRequestDTO):
    """DTO for the general contact form."""

    subject: str = Field(description="Message subject")
    message: str = Field(description="Message body")

    @validator('subject')
    def validate_subject(cls, v):
        return DataValidator.validate_required_text(v, "Subject is required")

    @validator('message')
    def validate_message(cls, v):
        return DataValidator.validate_required_text(v, "Message is required")


class SubmissionResponseDTO(ResponseDTO):
    """Fields returned for every stored submission."""

    name: str
    email: str
    phone: str
    status: str


class AppointmentResponseDTO(SubmissionResponseDTO):
    """Stored appointment."""

    preferred_date: str
    preferred_time: str
    message: Optional[str] = None
    property_interest: Optional[str] = None


class BuildRequestResponseDTO(SubmissionResponseDTO):
    """Stored build request."""

    budget: float
    location: str
    property_type: str
    bedrooms: int
    bathrooms: int
    special_requirements: Optional[str] = None
    timeline: str


class ContactMessageResponseDTO(SubmissionResponseDTO):
    """Stored contact message."""

    subject: str
    message: str

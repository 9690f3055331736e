"""
Submission domain models.
Records created from the public lead-capture forms.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import BaseEntity, ValidationError


class AppointmentStatus(str, Enum):
    """Appointment lifecycle status."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BuildRequestStatus(str, Enum):
    """Build request lifecycle status."""
    PENDING = "pending"
    REVIEWING = "reviewing"
    QUOTED = "quoted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ContactMessageStatus(str, Enum):
    """Contact message lifecycle status."""
    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


@dataclass
class Submission(BaseEntity):
    """
    Common contact details shared by every form submission.
    Status is only changed by the administrative side, never by this service.
    """

    name: str = ""
    email: str = ""
    phone: str = ""

    def validate(self) -> None:
        """Validate contact fields."""
        for field_name in ("name", "email", "phone"):
            if not getattr(self, field_name):
                raise ValidationError(f"{field_name.capitalize()} is required", field_name)


@dataclass
class Appointment(Submission):
    """A property viewing appointment request."""

    preferred_date: str = ""
    preferred_time: str = ""
    message: Optional[str] = None
    property_interest: Optional[str] = None
    status: AppointmentStatus = AppointmentStatus.PENDING

    def validate(self) -> None:
        super().validate()
        if not self.preferred_date:
            raise ValidationError("Preferred date is required", "preferred_date")
        if not self.preferred_time:
            raise ValidationError("Preferred time is required", "preferred_time")


@dataclass
class BuildRequest(Submission):
    """A custom home build request."""

    budget: float = 0
    location: str = ""
    property_type: str = ""
    bedrooms: int = 1
    bathrooms: int = 1
    timeline: str = ""
    special_requirements: Optional[str] = None
    status: BuildRequestStatus = BuildRequestStatus.PENDING

    def validate(self) -> None:
        super().validate()
        if not math.isfinite(self.budget) or self.budget < 0:
            raise ValidationError("Budget must be a positive number", "budget")
        if self.bedrooms < 1:
            raise ValidationError("Number of bedrooms must be at least 1", "bedrooms")
        if self.bathrooms < 1:
            raise ValidationError("Number of bathrooms must be at least 1", "bathrooms")


@dataclass
class ContactMessage(Submission):
    """A general contact form message."""

    subject: str = ""
    message: str = ""
    status: ContactMessageStatus = ContactMessageStatus.UNREAD

    def validate(self) -> None:
        super().validate()
        if not self.subject:
            raise ValidationError("Subject is required", "subject")
        if not self.message:
            raise ValidationError("Message is required", "message")

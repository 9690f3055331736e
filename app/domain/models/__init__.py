"""
Domain models for the lead-capture backend.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    PersistenceError,
    StoreError,
)

# Submissions
from .submission import (
    Submission,
    Appointment,
    AppointmentStatus,
    BuildRequest,
    BuildRequestStatus,
    ContactMessage,
    ContactMessageStatus,
)

# Notifications
from .notification import (
    NotificationKind,
    NotificationStatus,
    NotificationRequest,
    NotificationResult,
    RenderedEmail,
    MISSING_CREDENTIAL,
)

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "PersistenceError",
    "StoreError",
    "Submission",
    "Appointment",
    "AppointmentStatus",
    "BuildRequest",
    "BuildRequestStatus",
    "ContactMessage",
    "ContactMessageStatus",
    "NotificationKind",
    "NotificationStatus",
    "NotificationRequest",
    "NotificationResult",
    "RenderedEmail",
    "MISSING_CREDENTIAL",
]

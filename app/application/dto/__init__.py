"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .submission_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "HealthCheckResponseDTO",
    "field_errors",

    # Submission DTOs
    "SubmissionRequestDTO",
    "CreateAppointmentRequestDTO",
    "CreateBuildRequestRequestDTO",
    "CreateContactMessageRequestDTO",
    "SubmissionResponseDTO",
    "AppointmentResponseDTO",
    "BuildRequestResponseDTO",
    "ContactMessageResponseDTO",
]

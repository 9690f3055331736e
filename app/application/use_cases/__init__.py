"""
Application layer use cases.
Business logic for the lead-capture forms.
"""

from .base_use_case import *
from .submission_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "CreateUseCase",
    "ListUseCase",
    "UseCaseResult",

    # Submission Use Cases
    "SubmitFormUseCase",
    "SubmitAppointmentUseCase",
    "SubmitBuildRequestUseCase",
    "SubmitContactMessageUseCase",
    "ListSubmissionsUseCase",
]

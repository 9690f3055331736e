"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .submission_repository import (
    SQLAlchemySubmissionRepository,
    SQLAlchemyAppointmentRepository,
    SQLAlchemyBuildRequestRepository,
    SQLAlchemyContactMessageRepository,
)
from .secret_repository import SQLAlchemySecretRepository, get_secret_repository
from .template_repository import SQLAlchemyEmailTemplateRepository, SupabaseEmailTemplateRepository

__all__ = [
    "SQLAlchemySubmissionRepository",
    "SQLAlchemyAppointmentRepository",
    "SQLAlchemyBuildRequestRepository",
    "SQLAlchemyContactMessageRepository",
    "SQLAlchemySecretRepository",
    "get_secret_repository",
    "SQLAlchemyEmailTemplateRepository",
    "SupabaseEmailTemplateRepository",
]

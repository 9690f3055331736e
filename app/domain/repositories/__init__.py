"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .submission_repository import SubmissionRepository
from .secret_repository import SecretRepository
from .template_repository import EmailTemplateRepository

__all__ = [
    "SubmissionRepository",
    "SecretRepository",
    "EmailTemplateRepository",
]

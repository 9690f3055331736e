"""
Infrastructure mappers module.
Converts between domain entities and SQLAlchemy models.
"""

from .submission_mapper import AppointmentMapper, BuildRequestMapper, ContactMessageMapper

__all__ = [
    "AppointmentMapper",
    "BuildRequestMapper",
    "ContactMessageMapper",
]

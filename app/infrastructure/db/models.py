"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean,
    Numeric, Index, CheckConstraint
)
from sqlalchemy.sql import func

from app.domain.models.submission import (
    AppointmentStatus, BuildRequestStatus, ContactMessageStatus
)
from .database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AppointmentModel(Base):
    """Appointment bookings table"""
    __tablename__ = 'appointments'

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    preferred_date = Column(String(50), nullable=False)
    preferred_time = Column(String(50), nullable=False)
    message = Column(Text)
    property_interest = Column(String(255))
    status = Column(String(20), nullable=False, default=AppointmentStatus.PENDING.value)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())

    __table_args__ = (
        Index('idx_appointments_created_at', 'created_at'),
        Index('idx_appointments_status', 'status'),
    )


class BuildRequestModel(Base):
    """Custom build requests table"""
    __tablename__ = 'build_requests'

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    budget = Column(Numeric(14, 2), nullable=False)
    location = Column(String(255), nullable=False)
    property_type = Column(String(100), nullable=False)
    bedrooms = Column(Integer, nullable=False)
    bathrooms = Column(Integer, nullable=False)
    special_requirements = Column(Text)
    timeline = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False, default=BuildRequestStatus.PENDING.value)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())

    __table_args__ = (
        Index('idx_build_requests_created_at', 'created_at'),
        CheckConstraint('budget >= 0', name='check_build_request_budget'),
        CheckConstraint('bedrooms >= 1', name='check_build_request_bedrooms'),
        CheckConstraint('bathrooms >= 1', name='check_build_request_bathrooms'),
    )


class ContactMessageModel(Base):
    """Contact messages table"""
    __tablename__ = 'contact_messages'

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=ContactMessageStatus.UNREAD.value)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())

    __table_args__ = (
        Index('idx_contact_messages_created_at', 'created_at'),
        Index('idx_contact_messages_status', 'status'),
    )


class VaultSecretModel(Base):
    """Secrets table keyed by unique key name"""
    __tablename__ = 'vault_secrets'

    id = Column(Integer, primary_key=True, autoincrement=True)
    key_name = Column(String(255), nullable=False, unique=True)
    encrypted_value = Column(Text, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class EmailTemplateModel(Base):
    """Admin-editable notification templates"""
    __tablename__ = 'email_templates'

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(20), nullable=False)
    subject_template = Column(Text, nullable=False)
    html_template = Column(Text, nullable=False)
    text_template = Column(Text)
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index('idx_email_templates_type_active', 'type', 'is_active'),
    )

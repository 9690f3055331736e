"""
Unit tests for the submission and email template repositories.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock
from sqlalchemy.exc import OperationalError

from app.domain.models.base import PersistenceError
from app.domain.models.notification import NotificationKind
from app.domain.models.submission import (
    Appointment, AppointmentStatus, BuildRequest, BuildRequestStatus,
    ContactMessage, ContactMessageStatus
)
from app.infrastructure.db.models import EmailTemplateModel
from app.infrastructure.repositories.submission_repository import (
    SQLAlchemyAppointmentRepository,
    SQLAlchemyBuildRequestRepository,
    SQLAlchemyContactMessageRepository
)
from app.infrastructure.repositories.template_repository import (
    SQLAlchemyEmailTemplateRepository, SupabaseEmailTemplateRepository
)


def make_contact(subject="Hello", created_at=None):
    return ContactMessage(
        name="Ama",
        email="ama@example.com",
        phone="1",
        subject=subject,
        message="Hi there",
        created_at=created_at,
    )


class TestSQLAlchemySubmissionRepository:
    """Test cases for the submission repositories."""

    def test_create_assigns_id_timestamp_and_default_status(self, db_session):
        repository = SQLAlchemyAppointmentRepository(db_session)

        saved = repository.create(Appointment(
            name="A",
            email="a@b.com",
            phone="1",
            preferred_date="2025-01-01",
            preferred_time="10:00",
        ))

        assert saved.id is not None
        assert len(saved.id) == 36
        assert saved.created_at is not None
        assert saved.status == AppointmentStatus.PENDING
        assert saved.message is None

    def test_create_build_request_keeps_numbers(self, db_session):
        repository = SQLAlchemyBuildRequestRepository(db_session)

        saved = repository.create(BuildRequest(
            name="Kofi",
            email="kofi@example.com",
            phone="1",
            budget=250000.5,
            location="Tema",
            property_type="Townhouse",
            bedrooms=3,
            bathrooms=2,
            timeline="6 months",
        ))

        assert saved.budget == 250000.5
        assert isinstance(saved.budget, float)
        assert saved.bedrooms == 3
        assert saved.status == BuildRequestStatus.PENDING

    def test_contact_message_defaults_to_unread(self, db_session):
        repository = SQLAlchemyContactMessageRepository(db_session)

        saved = repository.create(make_contact())

        assert saved.status == ContactMessageStatus.UNREAD

    def test_list_all_newest_first(self, db_session):
        repository = SQLAlchemyContactMessageRepository(db_session)
        now = datetime.now(timezone.utc)
        repository.create(make_contact("oldest", now - timedelta(days=2)))
        repository.create(make_contact("newest", now))
        repository.create(make_contact("middle", now - timedelta(days=1)))

        subjects = [message.subject for message in repository.list_all()]

        assert subjects == ["newest", "middle", "oldest"]

    def test_list_all_empty(self, db_session):
        assert SQLAlchemyAppointmentRepository(db_session).list_all() == []

    def test_create_failure_raises_persistence_error(self):
        session = Mock()
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("database is locked"))
        repository = SQLAlchemyContactMessageRepository(session)

        with pytest.raises(PersistenceError):
            repository.create(make_contact())

        session.rollback.assert_called_once()

    def test_list_failure_raises_persistence_error(self):
        session = Mock()
        session.query.side_effect = OperationalError("SELECT", {}, Exception("no such table"))
        repository = SQLAlchemyContactMessageRepository(session)

        with pytest.raises(PersistenceError):
            repository.list_all()


class TestSQLAlchemyEmailTemplateRepository:
    """Test cases for stored template lookup."""

    def test_no_template(self, session_factory):
        repository = SQLAlchemyEmailTemplateRepository(session_factory)

        assert repository.get_active(NotificationKind.CONTACT) is None

    def test_most_recently_updated_active_template_wins(self, session_factory, db_session):
        now = datetime.now(timezone.utc)
        db_session.add_all([
            EmailTemplateModel(
                type="contact", subject_template="old", html_template="<p>old</p>",
                is_active=True, updated_at=now - timedelta(days=1)
            ),
            EmailTemplateModel(
                type="contact", subject_template="new", html_template="<p>new</p>",
                text_template="new", is_active=True, updated_at=now
            ),
            EmailTemplateModel(
                type="contact", subject_template="inactive", html_template="<p>x</p>",
                is_active=False, updated_at=now + timedelta(days=1)
            ),
            EmailTemplateModel(
                type="build", subject_template="build", html_template="<p>b</p>",
                is_active=True, updated_at=now + timedelta(days=2)
            ),
        ])
        db_session.commit()
        repository = SQLAlchemyEmailTemplateRepository(session_factory)

        template = repository.get_active(NotificationKind.CONTACT)

        assert template.subject_template == "new"
        assert template.html_template == "<p>new</p>"
        assert template.text_template == "new"


class TestSupabaseEmailTemplateRepository:
    """Test cases for the Supabase template source."""

    def test_unconfigured_source_has_no_templates(self):
        repository = SupabaseEmailTemplateRepository(None, None)

        assert repository.is_configured is False
        assert repository.get_active(NotificationKind.BUILD) is None

    def test_queries_latest_active_template(self):
        client = Mock()
        query = client.table.return_value
        for method in ("select", "eq", "order", "limit"):
            getattr(query, method).return_value = query
        query.execute.return_value = Mock(data=[{
            "subject_template": "Build {{ name }}",
            "html_template": "<p>{{ budget_formatted }}</p>",
            "text_template": None,
        }])
        repository = SupabaseEmailTemplateRepository("https://p.supabase.co", "service", client=client)

        template = repository.get_active(NotificationKind.BUILD)

        client.table.assert_called_once_with("email_templates")
        query.order.assert_called_once_with("updated_at", desc=True)
        query.limit.assert_called_once_with(1)
        assert template.subject_template == "Build {{ name }}"
        assert template.text_template is None

    def test_no_rows(self):
        client = Mock()
        query = client.table.return_value
        for method in ("select", "eq", "order", "limit"):
            getattr(query, method).return_value = query
        query.execute.return_value = Mock(data=[])
        repository = SupabaseEmailTemplateRepository("https://p.supabase.co", "service", client=client)

        assert repository.get_active(NotificationKind.CONTACT) is None

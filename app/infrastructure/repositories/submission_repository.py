"""
Submission repository implementations using SQLAlchemy.
"""

import logging
from typing import List

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.domain.models.base import PersistenceError
from app.domain.models.submission import Submission
from app.domain.repositories.submission_repository import SubmissionRepository
from app.infrastructure.mappers.submission_mapper import (
    SubmissionMapper, AppointmentMapper, BuildRequestMapper, ContactMessageMapper
)


logger = logging.getLogger(__name__)


class SQLAlchemySubmissionRepository(SubmissionRepository):
    """SQLAlchemy implementation of a create/read submission store."""

    def __init__(self, session: Session, mapper: SubmissionMapper):
        self.session = session
        self.mapper = mapper
        self.model = mapper.model

    def create(self, submission: Submission) -> Submission:
        """Insert a submission and return it with its assigned id."""
        model = self.mapper.domain_to_model(submission)
        try:
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to insert into {self.model.__tablename__}: {str(e)}")
            raise PersistenceError(f"Failed to store {self.model.__tablename__} record") from e

        return self.mapper.model_to_domain(model)

    def list_all(self) -> List[Submission]:
        """Get all submissions, newest first."""
        try:
            models = (
                self.session.query(self.model)
                .order_by(self.model.created_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to read {self.model.__tablename__}: {str(e)}")
            raise PersistenceError(f"Failed to read {self.model.__tablename__} records") from e

        return [self.mapper.model_to_domain(model) for model in models]


class SQLAlchemyAppointmentRepository(SQLAlchemySubmissionRepository):
    """Appointment bookings."""

    def __init__(self, session: Session):
        super().__init__(session, AppointmentMapper())


class SQLAlchemyBuildRequestRepository(SQLAlchemySubmissionRepository):
    """Custom build requests."""

    def __init__(self, session: Session):
        super().__init__(session, BuildRequestMapper())


class SQLAlchemyContactMessageRepository(SQLAlchemySubmissionRepository):
    """Contact form messages."""

    def __init__(self, session: Session):
        super().__init__(session, ContactMessageMapper())

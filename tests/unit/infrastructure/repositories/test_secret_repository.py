"""
Unit tests for the vault secret repository.
"""

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import OperationalError

from app.domain.models.base import StoreError
from app.infrastructure.repositories.secret_repository import SQLAlchemySecretRepository


class TestSQLAlchemySecretRepository:
    """Test cases for SQLAlchemySecretRepository."""

    def test_get_missing_key_returns_none(self, session_factory):
        repository = SQLAlchemySecretRepository(session_factory)

        assert repository.get("RESEND_API_KEY") is None

    def test_set_then_get(self, session_factory):
        repository = SQLAlchemySecretRepository(session_factory)

        metadata = repository.set("RESEND_API_KEY", "re_123")

        assert metadata["key_name"] == "RESEND_API_KEY"
        assert metadata["created_at"] is not None
        assert "value" not in metadata
        assert repository.get("RESEND_API_KEY") == "re_123"

    def test_set_existing_key_updates_value(self, session_factory):
        repository = SQLAlchemySecretRepository(session_factory)
        repository.set("RESEND_API_KEY", "re_old")

        repository.set("RESEND_API_KEY", "re_new")

        assert repository.get("RESEND_API_KEY") == "re_new"
        assert len(repository.list()) == 1

    def test_list_returns_names_without_values(self, session_factory):
        repository = SQLAlchemySecretRepository(session_factory)
        repository.set("RESEND_API_KEY", "re_123")
        repository.set("ANOTHER_KEY", "secret")

        secrets = repository.list()

        assert [secret["key_name"] for secret in secrets] == ["ANOTHER_KEY", "RESEND_API_KEY"]
        for secret in secrets:
            assert set(secret) == {"key_name", "created_at", "updated_at"}

    def test_delete(self, session_factory):
        repository = SQLAlchemySecretRepository(session_factory)
        repository.set("RESEND_API_KEY", "re_123")

        assert repository.delete("RESEND_API_KEY") is True
        assert repository.get("RESEND_API_KEY") is None

    def test_delete_missing_key_is_acknowledged(self, session_factory):
        repository = SQLAlchemySecretRepository(session_factory)

        assert repository.delete("UNKNOWN") is True

    def test_backend_failure_raises_store_error(self):
        session = MagicMock()
        session.__enter__.return_value = session
        session.__exit__.return_value = False
        session.query.side_effect = OperationalError("SELECT", {}, Exception("unable to open database"))
        repository = SQLAlchemySecretRepository(lambda: session)

        with pytest.raises(StoreError):
            repository.get("RESEND_API_KEY")
        with pytest.raises(StoreError):
            repository.list()

"""
Vault secret repository using SQLAlchemy.
Stores provider credentials in the vault_secrets table.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.domain.models.base import StoreError
from app.domain.repositories.secret_repository import SecretRepository
from app.infrastructure.db.models import VaultSecretModel


logger = logging.getLogger(__name__)


class SQLAlchemySecretRepository(SecretRepository):
    """
    SQLAlchemy implementation of the secret store.

    Opens a short-lived session per call; it is not bound to a request.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key_name: str) -> Optional[str]:
        """Get a secret value by key name."""
        try:
            with self.session_factory() as session:
                model = session.query(VaultSecretModel).filter_by(key_name=key_name).first()
                if not model:
                    return None
                return model.encrypted_value or None
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to retrieve secret: {str(e)}") from e

    def set(self, key_name: str, value: str) -> Dict[str, Any]:
        """Insert or update a secret."""
        try:
            with self.session_factory() as session:
                model = session.query(VaultSecretModel).filter_by(key_name=key_name).first()
                if model:
                    model.encrypted_value = value
                    model.updated_at = datetime.now(timezone.utc)
                else:
                    model = VaultSecretModel(key_name=key_name, encrypted_value=value)
                    session.add(model)
                session.commit()
                session.refresh(model)
                logger.info(f"Secret stored: {key_name}")
                return self._metadata(model)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to store secret: {str(e)}") from e

    def list(self) -> List[Dict[str, Any]]:
        """List secret metadata without values."""
        try:
            with self.session_factory() as session:
                models = session.query(VaultSecretModel).order_by(VaultSecretModel.key_name).all()
                return [self._metadata(model) for model in models]
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list secrets: {str(e)}") from e

    def delete(self, key_name: str) -> bool:
        """Delete a secret by key name."""
        try:
            with self.session_factory() as session:
                session.query(VaultSecretModel).filter_by(key_name=key_name).delete()
                session.commit()
                logger.info(f"Secret deleted: {key_name}")
                return True
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to delete secret: {str(e)}") from e

    def _metadata(self, model: VaultSecretModel) -> Dict[str, Any]:
        return {
            "key_name": model.key_name,
            "created_at": model.created_at.isoformat() if model.created_at else None,
            "updated_at": model.updated_at.isoformat() if model.updated_at else None,
        }


# Singleton instance
_secret_repository = None

def get_secret_repository() -> SQLAlchemySecretRepository:
    """Get singleton secret repository bound to the application database."""
    global _secret_repository
    if _secret_repository is None:
        from app.infrastructure.db.database import SessionLocal
        _secret_repository = SQLAlchemySecretRepository(SessionLocal)
    return _secret_repository

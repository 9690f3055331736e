"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic, List
from dataclasses import dataclass
from datetime import datetime

from app.domain.models.base import DomainException, ValidationError, PersistenceError


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    errors: Optional[List[Dict[str, str]]] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result, optionally with per-field errors."""
        return cls(success=False, error=error, error_code=error_code, errors=errors, metadata=metadata)

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, "VALIDATION_ERROR", errors=exc.errors)
        if isinstance(exc, PersistenceError):
            return cls.error_result(exc.message, "PERSISTENCE_ERROR")
        if isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        return cls.error_result(str(exc), "UNKNOWN_ERROR")

    @property
    def is_validation_error(self) -> bool:
        return self.error_code == "VALIDATION_ERROR"


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.

    ``execute`` never raises: the request is validated, handed to the
    business logic, and any exception is turned into an error result.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None

    def _elapsed_seconds(self) -> float:
        return (datetime.utcnow() - self.execution_start).total_seconds()

    async def execute(self, request: T) -> UseCaseResult[R]:
        """Run the use case and wrap the outcome in a UseCaseResult."""
        self.execution_start = datetime.utcnow()
        name = self.__class__.__name__

        try:
            request = await self._validate_request(request)
            result = await self._execute_business_logic(request)
        except ValidationError as exc:
            logger.info(f"{name} rejected request: {len(exc.errors)} field error(s)")
            error_result = UseCaseResult.from_exception(exc)
        except Exception as exc:
            logger.error(f"{name} failed: {type(exc).__name__}: {str(exc)}")
            error_result = UseCaseResult.from_exception(exc)
        else:
            return UseCaseResult.success_result(
                result,
                metadata={"execution_time_seconds": self._elapsed_seconds()}
            )

        error_result.metadata = {"execution_time_seconds": self._elapsed_seconds()}
        return error_result

    async def _validate_request(self, request: T) -> Any:
        """
        Return the value handed to the business logic.
        Subclasses parse and validate raw input here.
        """
        return request

    @abstractmethod
    async def _execute_business_logic(self, request: Any) -> R:
        """Execute the core business logic. Must be implemented by subclasses."""
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """Base class for query use cases (read operations)."""
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """Base class for command use cases (write operations)."""

    async def _execute_business_logic(self, request: Any) -> R:
        return await self._execute_command_logic(request)

    @abstractmethod
    async def _execute_command_logic(self, request: Any) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


class CreateUseCase(CommandUseCase[T, R]):
    """Base class for entity creation use cases."""
    pass


class ListUseCase(QueryUseCase[T, R]):
    """Base class for list use cases."""
    pass
